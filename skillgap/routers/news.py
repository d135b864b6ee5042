"""News API router.

Proxies the current top HackerNews stories for the dashboard.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from skillgap.config import settings
from skillgap.dependencies import get_news_client
from skillgap.errors import NewsItemNotFoundError, NewsUnavailableError
from skillgap.schemas.envelope import ApiListResponse, ApiResponse
from skillgap.schemas.news import NewsCategory, NewsItem
from skillgap.services.news import MAX_STORIES, NEWS_CATEGORIES, HackerNewsClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/news", tags=["news"])


def _upstream_error(e: NewsUnavailableError) -> HTTPException:
    return HTTPException(
        status_code=(
            status.HTTP_504_GATEWAY_TIMEOUT
            if e.timed_out
            else status.HTTP_502_BAD_GATEWAY
        ),
        detail=str(e)
    )


@router.get("", response_model=ApiListResponse[NewsItem])
async def list_news(
    limit: int | None = Query(
        None, ge=1, le=MAX_STORIES, description="Number of stories to return"
    ),
    client: HackerNewsClient = Depends(get_news_client)
):
    """Get the latest top tech stories.

    Args:
        limit: Number of stories (defaults to settings.news_default_limit)
        client: HackerNews client

    Returns:
        Envelope whose data holds stories in ranking order

    Raises:
        HTTPException 502: HackerNews error
        HTTPException 504: HackerNews timeout
    """
    try:
        stories = await client.top_stories(limit or settings.news_default_limit)
    except NewsUnavailableError as e:
        raise _upstream_error(e)

    return ApiListResponse[NewsItem].of(stories)


@router.get("/categories", response_model=ApiListResponse[NewsCategory])
async def list_categories():
    """Get available news categories."""
    return ApiListResponse[NewsCategory].of(NEWS_CATEGORIES)


@router.get("/{item_id}", response_model=ApiResponse[NewsItem])
async def get_news_item(
    item_id: int,
    client: HackerNewsClient = Depends(get_news_client)
):
    """Get a single story by HackerNews id.

    Raises:
        HTTPException 404: Item not found or dead
        HTTPException 502: HackerNews error
        HTTPException 504: HackerNews timeout
    """
    try:
        story = await client.item(item_id)
    except NewsItemNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except NewsUnavailableError as e:
        raise _upstream_error(e)

    return ApiResponse[NewsItem](data=story)
