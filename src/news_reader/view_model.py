"""View model driving the latest-news screen.

The view model owns a single ``FetchState`` and publishes every transition to
its subscribers. ``load``, ``retry`` and ``refresh`` all start a fresh fetch;
while one is in flight further triggers are dropped rather than queued or
cancelling the running fetch.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

from news_reader.exceptions import FetchError
from news_reader.models import Article
from news_reader.state import Failed, FetchState, Idle, Loaded, Loading

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Unable to load news. Please try again."

Observer = Callable[[FetchState], None]


class ArticleFetcher(Protocol):
    async def fetch_articles(self) -> list[Article]: ...


class NewsViewModel:
    """Fetch-and-present state machine for the article list."""

    def __init__(self, fetcher: ArticleFetcher, min_loading_seconds: float = 0.5) -> None:
        """Initialize the view model.

        Args:
            fetcher: Source of articles, usually a ``NewsClient``.
            min_loading_seconds: How long ``Loading`` is shown before the
                fetch is issued, so fast responses do not flicker.

        Raises:
            ValueError: If min_loading_seconds is negative.
        """
        if min_loading_seconds < 0:
            raise ValueError("min_loading_seconds must not be negative")

        self._fetcher = fetcher
        self._min_loading_seconds = min_loading_seconds
        self._state: FetchState = Idle()
        self._observers: list[Observer] = []
        self._in_flight = False
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def error_message(self) -> str:
        return self._state.message if isinstance(self._state, Failed) else ""

    @property
    def articles(self) -> tuple[Article, ...]:
        return self._state.articles if isinstance(self._state, Loaded) else ()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register *observer* for state transitions.

        Returns:
            A callable that removes the observer. Calling it more than once
            is harmless.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def load(self) -> asyncio.Task[None]:
        """Start a fetch unless one is already in flight.

        Must be called from a running event loop. The state becomes
        ``Loading`` before this returns.

        Returns:
            The task running the fetch. While a fetch is in flight this is
            the existing task and nothing else happens.
        """
        if self._in_flight and self._task is not None and not self._task.done():
            logger.debug("Fetch already in flight, ignoring trigger")
            return self._task

        task = asyncio.get_running_loop().create_task(self._fetch())
        self._in_flight = True
        self._task = task
        self._publish(Loading())
        return task

    def retry(self) -> asyncio.Task[None]:
        return self.load()

    def refresh(self) -> asyncio.Task[None]:
        return self.load()

    async def _fetch(self) -> None:
        try:
            await asyncio.sleep(self._min_loading_seconds)
            try:
                result: FetchState = Loaded(tuple(await self._fetcher.fetch_articles()))
            except FetchError as e:
                logger.warning("Loading news failed: %s", e)
                result = Failed(FAILURE_MESSAGE)
            except Exception:
                logger.exception("Unexpected error while loading news")
                result = Failed(FAILURE_MESSAGE)
        finally:
            self._in_flight = False

        self._publish(result)

    def _publish(self, state: FetchState) -> None:
        logger.debug("News state -> %s", type(state).__name__)
        self._state = state
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                logger.exception("News state observer failed")
