"""
Infrastructure layer package for the plant scanner.
Provides the shared external API client.
"""
