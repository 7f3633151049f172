"""Pydantic models for news API data."""

from typing import Any
from urllib.parse import urlsplit
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

NO_TITLE = "NO title.."
NO_DESCRIPTION = "NO description.."


def _web_address(value: str | None) -> str | None:
    """Return *value* if it is an absolute http(s) address, else ``None``."""
    if not value:
        return None
    parts = urlsplit(value.strip())
    if parts.scheme not in ("http", "https") or not parts.netloc:
        return None
    return value.strip()


class Article(BaseModel):
    """A single news item as returned by the latest-news endpoint.

    Every field is optional. A field the server omits, sends as ``null`` or
    sends with the wrong JSON type reads as ``None`` instead of failing the
    article.
    """

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    url: str | None = None
    image_url: str | None = Field(default=None, alias="urlToImage")

    _id: UUID = PrivateAttr(default_factory=uuid4)

    @field_validator("title", "description", "url", "image_url", mode="before")
    @classmethod
    def drop_malformed(cls, v: Any) -> str | None:
        """Degrade non-string values to ``None``."""
        return v if isinstance(v, str) else None

    @property
    def id(self) -> UUID:
        """Identity for list rendering, generated locally and never stable across fetches."""
        return self._id

    @property
    def display_title(self) -> str:
        return self.title or NO_TITLE

    @property
    def display_description(self) -> str:
        return self.description or NO_DESCRIPTION

    @property
    def article_link(self) -> str | None:
        """Address for the "read full article" action, or ``None`` to disable it."""
        return _web_address(self.url)

    @property
    def image_link(self) -> str | None:
        """Preview image address, or ``None`` when there is no usable image."""
        return _web_address(self.image_url)


class NewsResponse(BaseModel):
    """Envelope wrapping the article list."""

    news: list[Article]
