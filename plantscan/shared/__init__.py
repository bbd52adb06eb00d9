# 📄 File: plantscan/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as a Python package with the common tools every part of
# the scanner uses: settings, error types, translations, logging and the HTTP client.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, exceptions, i18n,
# infrastructure and cross-cutting utilities.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Exception hierarchy
- Hebrew/Arabic translations
- External API client
- Validators, formatters and structured logging
"""

__all__ = []
