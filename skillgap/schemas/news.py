"""News Pydantic schemas."""

from pydantic import ConfigDict, Field

from skillgap.schemas.base import CamelModel


class NewsItem(CamelModel):
    """A HackerNews story reshaped for the frontend."""

    id: int
    title: str
    url: str | None = None
    score: int = 0
    by: str | None = None
    type: str = "story"
    time: int = Field(..., description="Unix timestamp in seconds")



class NewsCategory(CamelModel):
    """Schema for a news category."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    slug: str
