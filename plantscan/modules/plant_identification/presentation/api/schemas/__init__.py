from .scan_schemas import LocaleRequest

__all__ = ["LocaleRequest"]
