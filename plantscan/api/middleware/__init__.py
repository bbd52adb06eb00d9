# 📄 File: plantscan/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that look at every request before and after it reaches the scanner.
# 🧪 Purpose (Technical Summary):
# Package initialization for HTTP middleware with per-middleware excluded paths.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# plantscan.main.py (middleware registration)

from typing import Dict, List

MIDDLEWARE_CONFIG: Dict[str, Dict[str, List[str]]] = {
    "logging": {
        "exclude_paths": [
            "/favicon.ico",
            "/api/v1/health",
            "/api/v1/scan/preview",
        ]
    },
}


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """True when ``path`` starts with one of the middleware's excluded prefixes."""
    exclude_paths = MIDDLEWARE_CONFIG.get(middleware_name, {}).get("exclude_paths", [])
    return any(path.startswith(prefix) for prefix in exclude_paths)
