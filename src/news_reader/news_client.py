"""Client for the latest-news JSON endpoint."""

import logging

import httpx
from pydantic import ValidationError

from news_reader.config import DEFAULT_API_URL
from news_reader.exceptions import DecodeError, HttpStatusError, NetworkError
from news_reader.models import Article, NewsResponse

logger = logging.getLogger(__name__)


class NewsClient:
    """Fetches the latest articles with a single GET, no retries and no caching."""

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize client with the endpoint to read from.

        Args:
            api_url: Address of the latest-news endpoint.
            http_client: Optional shared ``httpx.AsyncClient``. When omitted a
                short-lived client is opened for every fetch.

        Raises:
            ValueError: If api_url is empty or whitespace-only.
        """
        if not api_url or not api_url.strip():
            raise ValueError("API URL must not be empty")
        self._api_url = api_url
        self._http_client = http_client

    async def fetch_articles(self) -> list[Article]:
        """Fetch the latest articles.

        Returns:
            Articles in the order the server sent them.

        Raises:
            NetworkError: If the request fails before a response arrives.
            HttpStatusError: If the API answers with a non-2xx status.
            DecodeError: If the body is not JSON or lacks the ``news`` array.
        """
        logger.debug("Fetching latest news from %s", self._api_url)

        try:
            if self._http_client is not None:
                response = await self._http_client.get(self._api_url)
            else:
                async with httpx.AsyncClient(follow_redirects=True) as http_client:
                    response = await http_client.get(self._api_url)
        except httpx.DecodingError as e:
            raise DecodeError(f"Undecodable news API response: {e}", original_error=e) from e
        except httpx.RequestError as e:
            raise NetworkError(f"Request to news API failed: {e}", original_error=e) from e

        if not response.is_success:
            raise HttpStatusError(response.status_code)

        try:
            payload = NewsResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError("Unexpected news API response", original_error=e) from e

        logger.info("Fetched %d articles", len(payload.news))
        return payload.news
