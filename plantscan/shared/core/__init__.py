"""
Core utilities package for the plant scanner.
Provides the shared exception hierarchy.
"""

from .exceptions import (
    PlantScanException,
    ValidationError,
    NotFoundError,
    InvalidFileTypeError,
    FileTooLargeError,
    ExternalAPIError,
    APITimeoutError,
    APIAuthenticationError,
    PlantIdentificationError,
    MissingCredentialsError,
    NoImageSelectedError,
    exception_to_dict,
)

__all__ = [
    "PlantScanException",
    "ValidationError",
    "NotFoundError",
    "InvalidFileTypeError",
    "FileTooLargeError",
    "ExternalAPIError",
    "APITimeoutError",
    "APIAuthenticationError",
    "PlantIdentificationError",
    "MissingCredentialsError",
    "NoImageSelectedError",
    "exception_to_dict",
]
