from .scan import scan_router

__all__ = ["scan_router"]
