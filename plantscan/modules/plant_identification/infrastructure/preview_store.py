# 📄 File: plantscan/modules/plant_identification/infrastructure/preview_store.py
# 🧭 Purpose (Layman Explanation):
# Keeps the picked photo available at a temporary link so the screen can show it,
# and throws the link away when the user picks another photo or starts over.
# 🧪 Purpose (Technical Summary):
# In-memory registry of revocable preview handles (token -> image bytes).
# Each handle is released exactly once; revoking twice is a no-op.
# 🔗 Dependencies:
# secrets, dataclasses
# 🔄 Connected Modules / Calls From:
# scan_controller.py (create/revoke), scan routes (serve preview bytes)

import secrets
from dataclasses import dataclass
from typing import Dict, Optional

from plantscan.shared.core.exceptions import NotFoundError
from plantscan.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class PreviewImage:
    data: bytes
    content_type: str


class PreviewStore:
    """Temporary display handles for captured images."""

    def __init__(self, url_prefix: str = "/api/v1/scan/preview"):
        self.url_prefix = url_prefix.rstrip("/")
        self._images: Dict[str, PreviewImage] = {}
        self.revoked_count = 0

    def create(self, data: bytes, content_type: str) -> str:
        """Register ``data`` and return its preview URL."""
        token = secrets.token_urlsafe(16)
        self._images[token] = PreviewImage(data=data, content_type=content_type)
        return f"{self.url_prefix}/{token}"

    def token_from_url(self, url: str) -> str:
        return url.rsplit("/", 1)[-1]

    def revoke(self, url: Optional[str]) -> bool:
        """Release the handle behind ``url``. Returns False if it was already gone."""
        if not url:
            return False
        released = self._images.pop(self.token_from_url(url), None) is not None
        if released:
            self.revoked_count += 1
            logger.debug("Preview handle revoked", extra={"url": url})
        return released

    def get(self, token: str) -> PreviewImage:
        try:
            return self._images[token]
        except KeyError:
            raise NotFoundError("Preview not found", resource_type="preview", resource_id=token)

    def __len__(self) -> int:
        return len(self._images)

    def clear(self):
        self.revoked_count += len(self._images)
        self._images.clear()
