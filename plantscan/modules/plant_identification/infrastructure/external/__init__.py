"""
Clients for the external services the scanner depends on.
"""

from .geolocation import GeolocationProbe
from .perenual_client import PerenualClient
from .plant_id_client import PlantIdClient, encode_image, strip_data_uri
from .wikipedia_client import WikipediaClient

__all__ = [
    "GeolocationProbe",
    "PerenualClient",
    "PlantIdClient",
    "WikipediaClient",
    "encode_image",
    "strip_data_uri",
]
