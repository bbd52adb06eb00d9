"""
External API integration primitives shared by every service client.
"""

from .api_client import APIClient, create_api_client

__all__ = ["APIClient", "create_api_client"]
