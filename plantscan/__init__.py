# 📄 File: plantscan/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds the plant scanner application and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version and package metadata.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)

"""
PlantScan - photo-based plant identification with a Hebrew/Arabic care guide.
"""

__version__ = "1.0.0"
__title__ = "PlantScan"
__description__ = "Plant identification and care guide (Hebrew/Arabic)"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
