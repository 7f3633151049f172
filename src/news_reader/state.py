"""Presentation states published by the news view model."""

from dataclasses import dataclass

from news_reader.models import Article


@dataclass(frozen=True)
class Idle:
    """Nothing has been requested yet."""


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Loaded:
    articles: tuple[Article, ...]


@dataclass(frozen=True)
class Failed:
    message: str


FetchState = Idle | Loading | Loaded | Failed
