# 📄 File: plantscan/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the scanner's web API, kept separate so a future version can change it safely.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1 with version metadata and route prefixes.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# plantscan.api.v1.router, plantscan.main.py

"""
PlantScan API Version 1

Structure:
    v1/
    ├── __init__.py          # This file
    ├── router.py            # Main v1 router aggregation
    └── health.py            # Health check endpoints
"""

from typing import Any, Dict

__version__ = "1.0.0"
__api_version__ = "v1"
__status__ = "stable"

ROUTE_PREFIXES = {
    "scan": "/scan",
}

API_TAGS = {
    "scan": "Plant Scan",
    "health": "Health Check",
}


def get_api_info() -> Dict[str, Any]:
    """Version information returned by ``GET /api/v1/``."""
    return {
        "version": __version__,
        "api_version": __api_version__,
        "status": __status__,
        "routes": dict(ROUTE_PREFIXES),
    }


__all__ = ["API_TAGS", "ROUTE_PREFIXES", "get_api_info"]
