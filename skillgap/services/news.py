"""Tech news service backed by the public HackerNews API.

This module fetches the current top stories from the HackerNews Firebase API
and reshapes them into NewsItem records for the dashboard.
"""

import asyncio
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from skillgap.config import settings
from skillgap.errors import NewsItemNotFoundError, NewsUnavailableError
from skillgap.schemas.news import NewsCategory, NewsItem

logger = logging.getLogger(__name__)

MAX_STORIES = 30

NEWS_CATEGORIES = (
    NewsCategory(id=1, name="Development", slug="development"),
    NewsCategory(id=2, name="AI & Machine Learning", slug="ai"),
    NewsCategory(id=3, name="Cloud Computing", slug="cloud"),
    NewsCategory(id=4, name="Cybersecurity", slug="security"),
    NewsCategory(id=5, name="Mobile", slug="mobile"),
    NewsCategory(id=6, name="DevOps", slug="devops"),
)


def to_news_item(data: dict[str, Any] | None) -> NewsItem | None:
    """Reshape a raw HackerNews item.

    Args:
        data: Item JSON as returned by /item/{id}.json (may be null)

    Returns:
        NewsItem, or None for null, deleted, dead or untitled items
    """
    if not isinstance(data, dict) or data.get("deleted") or data.get("dead"):
        return None
    if not data.get("title"):
        return None

    try:
        return NewsItem(
            id=data["id"],
            title=data["title"],
            url=data.get("url"),
            score=data.get("score", 0),
            by=data.get("by"),
            type=data.get("type", "story"),
            time=data["time"],
        )
    except (KeyError, ValidationError) as e:
        logger.warning(f"Skipping malformed news item {data.get('id')}: {e}")
        return None


class HackerNewsClient:
    """Async client for the HackerNews Firebase API."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        """Initialize HackerNews client.

        Args:
            base_url: API base URL. Defaults to settings.news_api_base_url
            timeout: Seconds allowed for a whole call. Defaults to
                settings.news_timeout
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = (base_url or settings.news_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.news_timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def _get_json(self, client: httpx.AsyncClient, path: str) -> Any:
        response = await client.get(path)
        response.raise_for_status()
        return response.json()

    async def top_stories(self, limit: int = 10) -> list[NewsItem]:
        """Fetch the current top stories.

        Item requests run concurrently. Items that are null, deleted or dead
        are skipped, so fewer than limit stories may be returned.

        Args:
            limit: Number of story ids to fetch (1-MAX_STORIES)

        Returns:
            Stories in HackerNews ranking order

        Raises:
            NewsUnavailableError: On HTTP error, timeout or malformed payload
        """
        limit = max(1, min(limit, MAX_STORIES))
        try:
            async with asyncio.timeout(self.timeout):
                async with self._client() as client:
                    story_ids = await self._get_json(client, "/topstories.json")
                    if not isinstance(story_ids, list):
                        raise NewsUnavailableError(
                            "HackerNews returned an unexpected top stories payload"
                        )

                    raw_items = await asyncio.gather(
                        *(
                            self._get_json(client, f"/item/{story_id}.json")
                            for story_id in story_ids[:limit]
                        )
                    )
        except TimeoutError:
            logger.error(f"HackerNews request timed out after {self.timeout}s")
            raise NewsUnavailableError(
                f"News request timed out after {self.timeout}s", timed_out=True
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"HackerNews request failed: {e}")
            raise NewsUnavailableError(f"News API error: {e}") from e

        stories = [item for item in map(to_news_item, raw_items) if item is not None]
        logger.info(f"Fetched {len(stories)} top stories from HackerNews")
        return stories

    async def item(self, item_id: int) -> NewsItem:
        """Fetch a single item by id.

        Raises:
            NewsItemNotFoundError: If the item does not exist or is dead
            NewsUnavailableError: On HTTP error, timeout or malformed payload
        """
        try:
            async with asyncio.timeout(self.timeout):
                async with self._client() as client:
                    data = await self._get_json(client, f"/item/{item_id}.json")
        except TimeoutError:
            logger.error(
                f"HackerNews item {item_id} request timed out after {self.timeout}s"
            )
            raise NewsUnavailableError(
                f"News request timed out after {self.timeout}s", timed_out=True
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"HackerNews item {item_id} request failed: {e}")
            raise NewsUnavailableError(f"News API error: {e}") from e

        news_item = to_news_item(data)
        if news_item is None:
            raise NewsItemNotFoundError(item_id)
        return news_item

