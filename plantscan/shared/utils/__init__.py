# 📄 File: plantscan/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a collection of helpful tools that other parts of the app
# can use for common tasks like logging, photo validation, and formatting.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package with logging, validators and formatters
# used across the plant scanner.

# 🔄 Connected Modules / Calls From:
# Used by: All application modules

"""
Shared Utilities Package

- Structured logging with JSON formatting
- Image upload validation
- Display formatting (confidence percentages, ranges, lists)
"""

from .formatters import format_list, format_range, pretty_prob
from .logging import get_logger, setup_logging
from .validators import validate_image_upload

__all__ = [
    "format_list",
    "format_range",
    "pretty_prob",
    "get_logger",
    "setup_logging",
    "validate_image_upload",
]
