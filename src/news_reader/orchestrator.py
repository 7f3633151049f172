"""Wires the news client into the view model for a single load."""

from typing import Any

from news_reader.news_client import NewsClient
from news_reader.state import FetchState
from news_reader.view_model import NewsViewModel


async def run(
    client: NewsClient | Any,
    min_loading_seconds: float = 0.5,
) -> FetchState:
    """Load the latest news once and return the settled state.

    Args:
        client: NewsClient instance (or mock for testing).
        min_loading_seconds: Minimum time spent in ``Loading``.

    Returns:
        ``Loaded`` with the articles, or ``Failed`` with the fixed message.
        Fetch errors never propagate.
    """
    view_model = NewsViewModel(client, min_loading_seconds=min_loading_seconds)
    await view_model.load()
    return view_model.state
