from enum import Enum


class ScanState(str, Enum):
    """Lifecycle of the scan screen"""
    IDLE = "idle"                  # nothing captured yet
    CAPTURING = "capturing"        # image held (or awaiting one after a reset)
    IDENTIFYING = "identifying"    # identification request in flight
    ENRICHING = "enriching"        # care/summary lookups in flight
    DISPLAYING = "displaying"      # results on screen
    ERRORED = "errored"            # identification failed


BUSY_STATES = {ScanState.IDENTIFYING, ScanState.ENRICHING}
