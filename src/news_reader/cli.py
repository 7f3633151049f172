"""Command-line interface for the news reader."""

import asyncio
import logging
import sys

import click

from news_reader.config import Config
from news_reader.models import Article
from news_reader.news_client import NewsClient
from news_reader.orchestrator import run
from news_reader.state import Failed, Loaded


def format_article(article: Article) -> str:
    """Render one article the way the list and detail screens show it."""
    lines = [article.display_title, f"  {article.display_description}"]
    if article.image_link:
        lines.append(f"  Image: {article.image_link}")
    if article.article_link:
        lines.append(f"  Read full article: {article.article_link}")
    return "\n".join(lines)


@click.command()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
def main(verbose: bool) -> None:
    """Show the latest news.

    Exits with status 1 when the news cannot be loaded; run again to retry.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        config = Config()
    except Exception as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    client = NewsClient(api_url=config.api_url)
    state = asyncio.run(run(client, min_loading_seconds=config.min_loading_seconds))

    if isinstance(state, Failed):
        click.echo(state.message, err=True)
        sys.exit(1)

    if isinstance(state, Loaded):
        click.echo("Latest News")
        for article in state.articles:
            click.echo("")
            click.echo(format_article(article))


if __name__ == "__main__":
    main()
