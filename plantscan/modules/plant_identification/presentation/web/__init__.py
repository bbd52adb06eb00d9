from .page import page_router, render_page

__all__ = ["page_router", "render_page"]
