"""
News proxy client.

The railway demo shows a few recent headlines. The browser can't hold the
API key, so the service fetches them server-side and relays the JSON as-is.

One call, one fixed query:
    GET {NEWS_API_URL}?q=<NEWS_QUERY>&language=en&sortBy=publishedAt&pageSize=8&apiKey=...

Any failure (network, timeout, non-JSON body) becomes NewsFetchError; the
router turns that into a 500 with {"error", "details"}.
"""

import logging
from typing import Optional

import httpx

from config.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class NewsFetchError(Exception):
    """Raised when the upstream news API could not be reached or parsed."""


class NewsClient:

    def __init__(self, http_client: httpx.AsyncClient, config: Optional[Settings] = None):
        self._http = http_client
        self._config = config or default_settings

    def _params(self) -> dict:
        return {
            "q": self._config.NEWS_QUERY,
            "language": "en",
            "sortBy": "publishedAt",
            "pageSize": self._config.NEWS_PAGE_SIZE,
            "apiKey": self._config.NEWS_API_KEY,
        }

    async def fetch(self) -> dict:
        """Fetch headlines and return the upstream JSON body unchanged."""
        try:
            response = await self._http.get(
                self._config.NEWS_API_URL,
                params=self._params(),
                timeout=self._config.NEWS_TIMEOUT,
            )
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching news: {e}", exc_info=True)
            raise NewsFetchError(str(e) or type(e).__name__) from e
