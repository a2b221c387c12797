import asyncio
import aiohttp
from typing import Dict, Optional
from pydantic import ValidationError

from pickupnews.config import CONFIG
from pickupnews.errors import NewsDecodeError, NewsQueryError
from pickupnews.logging_config import create_logger
from pickupnews.news.model import NewsAPIResponse


def build_query_params(keyword: str, from_date: str, to_date: str, api_key: str) -> Dict[str, str]:
    """Query string for a title search on the NewsAPI everything endpoint."""
    return {
        "qInTitle": keyword,
        "from": from_date,
        "to": to_date,
        "apiKey": api_key,
    }


def decode_news_api_response(body: bytes) -> NewsAPIResponse:
    try:
        return NewsAPIResponse.model_validate_json(body)
    except ValidationError as e:
        raise NewsDecodeError(f"Unable to decode NewsAPI response: {e}") from e


class NewsAPIClient:
    """
    Client for the NewsAPI search endpoint.

    A session can be injected to share one connection pool; otherwise a
    session is opened and closed around every request.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        session: Optional[aiohttp.ClientSession] = None,
        timeout_seconds: Optional[float] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url or CONFIG.NEWS_API_URL
        self.session = session
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds or CONFIG.HTTP_TIMEOUT_SECONDS)
        self.logger = create_logger("NewsAPIClient")

    async def search_in_title(self, keyword: str, from_date: str, to_date: str) -> NewsAPIResponse:
        """
        Search articles whose title matches the keyword within the date range.

        Args:
            keyword: Search term matched against article titles
            from_date: First day of the range, YYYY-MM-DD
            to_date: Last day of the range, YYYY-MM-DD

        Returns:
            The decoded response. A non-200 status is only logged; the body is decoded regardless.

        Raises:
            NewsQueryError: the request could not be sent or the response could not be read
            NewsDecodeError: the body is not a NewsAPI response
        """
        params = build_query_params(keyword, from_date, to_date, self.api_key)
        self.logger.info(f"Searching NewsAPI for keyword '{keyword}' from {from_date} to {to_date}")

        try:
            if self.session is not None:
                status, body = await self._get(self.session, params)
            else:
                async with aiohttp.ClientSession(timeout=self.timeout) as session:
                    status, body = await self._get(session, params)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NewsQueryError(f"Request to {self.base_url} failed: {e!r}") from e

        if status != 200:
            self.logger.warning(f"Unable to get this url : http status is {status}")

        result = decode_news_api_response(body)
        self.logger.info(f"NewsAPI returned {result.total_results} results for keyword '{keyword}'")
        return result

    async def _get(self, session: aiohttp.ClientSession, params: Dict[str, str]):
        async with session.get(self.base_url, params=params) as response:
            return response.status, await response.read()
