# 📄 File: plantscan/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the plant scanner which services to call,
# which keys to use, and how to behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - plantscan.main (application startup)
# - All modules requiring configuration

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- External API credentials and endpoints
- Geolocation and localization defaults
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
