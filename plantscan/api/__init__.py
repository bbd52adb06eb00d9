# 📄 File: plantscan/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package that holds every web address the scanner answers on.
# 🧪 Purpose (Technical Summary):
# Package initialization for the versioned HTTP API layer.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# plantscan.main.py

"""
PlantScan API Package

Structure:
    api/
    ├── __init__.py          # This file
    └── v1/                  # API version 1
        ├── router.py        # v1 router aggregation
        └── health.py        # Health check endpoints
"""
