"""
HTTP API for the plant scanner.
"""
