# 📄 File: plantscan/modules/plant_identification/infrastructure/external/wikipedia_client.py
# 🧭 Purpose (Layman Explanation):
# Fetches the short Wikipedia introduction for a plant, in Hebrew or Arabic.
# 🧪 Purpose (Technical Summary):
# Wikipedia REST page-summary client with one API client per language host.
# A non-success status means "no summary" and yields None.
# 🔗 Dependencies:
# urllib.parse, plantscan.shared.infrastructure.external_apis.api_client
# 🔄 Connected Modules / Calls From:
# enrichment_service.py

from typing import Dict, Optional
from urllib.parse import quote

from plantscan.modules.plant_identification.domain.models import EncyclopediaSummary
from plantscan.shared.core.exceptions import ExternalAPIError
from plantscan.shared.infrastructure.external_apis.api_client import APIClient, create_api_client
from plantscan.shared.utils.logging import get_logger

logger = get_logger(__name__)


class WikipediaClient:
    """Client for ``/page/summary/{title}`` on the language-specific Wikipedia host."""

    def __init__(self, url_template: str, timeout: float = 30):
        self.url_template = url_template
        self.timeout = timeout
        self._clients: Dict[str, APIClient] = {}

    def _client_for(self, lang: str) -> APIClient:
        if lang not in self._clients:
            self._clients[lang] = create_api_client(
                api_name=f"wikipedia_{lang}",
                base_url=self.url_template.format(lang=lang),
                timeout=self.timeout,
            )
        return self._clients[lang]

    async def get_summary(self, title: str, lang: str) -> Optional[EncyclopediaSummary]:
        """
        Fetch the page summary for ``title``.

        Returns ``None`` when the service answers with a non-success
        status. Transport failures still raise.
        """
        endpoint = f"page/summary/{quote(title, safe='')}"
        try:
            data = await self._client_for(lang).get(endpoint)
        except ExternalAPIError as e:
            if e.api_status_code is None:
                raise
            logger.info(
                "No encyclopedia summary",
                extra={"title": title, "lang": lang, "status_code": e.api_status_code}
            )
            return None

        return EncyclopediaSummary.model_validate(data)

    def get_stats(self) -> list:
        return [client.get_stats() for client in self._clients.values()]

    async def close(self):
        for client in self._clients.values():
            await client.close()
        self._clients.clear()
