"""
Presentation layer: JSON scan endpoints and the RTL HTML page.
"""
