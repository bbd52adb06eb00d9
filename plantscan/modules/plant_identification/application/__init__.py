"""
Application layer: the scan controller and the species enrichment service.
"""

from .enrichment_service import EnrichmentOutcome, EnrichmentService
from .scan_controller import ScanController

__all__ = ["EnrichmentOutcome", "EnrichmentService", "ScanController"]
