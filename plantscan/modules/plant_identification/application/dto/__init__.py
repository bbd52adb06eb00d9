from .scan_view import CarePanel, CareRow, ErrorPanel, ResultsPanel, ScanView, SuggestionItem, UploadPanel

__all__ = [
    "CarePanel",
    "CareRow",
    "ErrorPanel",
    "ResultsPanel",
    "ScanView",
    "SuggestionItem",
    "UploadPanel",
]
