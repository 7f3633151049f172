"""Unit tests for the orchestrator module.

These tests verify that the orchestrator wires a client into the view
model and hands back the settled state. The client is mocked so the
wiring is tested in isolation.
"""

from unittest.mock import AsyncMock

import pytest

from news_reader.exceptions import HttpStatusError
from news_reader.models import Article
from news_reader.orchestrator import run
from news_reader.state import Failed, Loaded
from news_reader.view_model import FAILURE_MESSAGE


class TestOrchestrator:
    """Tests for the orchestrator's run() function."""

    @pytest.fixture
    def sample_articles(self) -> list[Article]:
        return [
            Article(title="Test Article 1", url="https://example.com/1"),
            Article(title="Test Article 2", url="https://example.com/2"),
        ]

    @pytest.fixture
    def mock_client(self, sample_articles: list[Article]) -> AsyncMock:
        client = AsyncMock()
        client.fetch_articles.return_value = sample_articles
        return client

    async def test_run_returns_loaded_state(self, mock_client: AsyncMock, sample_articles: list[Article]):
        state = await run(mock_client, min_loading_seconds=0)

        assert state == Loaded(tuple(sample_articles))
        mock_client.fetch_articles.assert_awaited_once()

    async def test_run_absorbs_fetch_errors(self, mock_client: AsyncMock):
        """Errors become a Failed state instead of propagating."""
        mock_client.fetch_articles.side_effect = HttpStatusError(502)

        state = await run(mock_client, min_loading_seconds=0)

        assert state == Failed(FAILURE_MESSAGE)
