# 📄 File: plantscan/modules/plant_identification/domain/models/fetch_result.py
# 🧭 Purpose (Layman Explanation):
# Records how each background lookup went: it found something, it found nothing,
# or it broke. The screen treats "nothing" and "broke" the same, the logs do not.
# 🧪 Purpose (Technical Summary):
# Tri-state result type for best-effort enrichment fetches.
# 🔗 Dependencies:
# dataclasses, enum, typing
# 🔄 Connected Modules / Calls From:
# enrichment_service.py, scan_controller.py

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FetchStatus(str, Enum):
    OK = "ok"
    EMPTY = "empty"      # the service answered but had nothing for us
    FAILED = "failed"    # the request or its parsing raised


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of one best-effort fetch."""

    status: FetchStatus
    value: Optional[T] = None
    error: Optional[BaseException] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "FetchResult[T]":
        return cls(FetchStatus.OK, value=value)

    @classmethod
    def empty(cls, reason: Optional[str] = None) -> "FetchResult[T]":
        return cls(FetchStatus.EMPTY, reason=reason)

    @classmethod
    def failed(cls, error: BaseException) -> "FetchResult[T]":
        return cls(FetchStatus.FAILED, error=error, reason=str(error))

    @property
    def is_ok(self) -> bool:
        return self.status is FetchStatus.OK
