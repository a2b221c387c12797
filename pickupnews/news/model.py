from datetime import datetime
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ZeroValueModel(BaseModel):
    """
    Model that reads JSON null as "not set": a null object becomes an empty
    one and null fields fall back to their defaults ("", 0, []).
    """
    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class NewsAPISource(ZeroValueModel):
    id: Optional[str] = None
    name: Optional[str] = None


class NewsAPIArticle(ZeroValueModel):
    """Represents a single article entry of a NewsAPI response."""
    source: NewsAPISource = Field(default_factory=NewsAPISource)
    author: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    url_to_image: Optional[str] = Field(default=None, alias="urlToImage")
    published_at: Optional[datetime] = Field(default=None, alias="publishedAt")
    content: Optional[str] = None


class NewsAPIResponse(ZeroValueModel):
    """Decoded body of the NewsAPI /v2/everything endpoint."""
    status: str = ""
    total_results: int = Field(default=0, alias="totalResults")
    articles: List[NewsAPIArticle] = Field(default_factory=list)
