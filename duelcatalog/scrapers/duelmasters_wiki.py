"""
Duel Masters fandom wiki card fetcher.

Fetches a card's wiki page and hands the markup to the card table parser.

Note: Web scraping is inherently fragile. Page structure may change.
"""

import logging
from collections.abc import AsyncGenerator

import httpx

from duelcatalog.config import settings
from duelcatalog.models.card import Card
from duelcatalog.models.errors import CardNotFoundError
from duelcatalog.parsers.card_table import parse_card_page

logger = logging.getLogger(__name__)


def page_path(name: str) -> str:
    """
    Convert a card name to its wiki page path.

    Only spaces are rewritten (to underscores). Names containing other
    URL-significant characters are passed through as-is.
    """
    return name.replace(" ", "_")


def card_page_url(name: str, base_url: str | None = None) -> str:
    """Full wiki URL for a card page."""
    return f"{base_url or settings.wiki_base_url}/{page_path(name)}"


def wiki_client() -> httpx.AsyncClient:
    """Create an HTTP client configured for the wiki."""
    return httpx.AsyncClient(
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
        timeout=settings.fetch_timeout,
    )


async def get_wiki_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """Dependency that provides a wiki HTTP client for one request."""
    async with wiki_client() as client:
        yield client


async def fetch_card_page(name: str, client: httpx.AsyncClient) -> str:
    """
    Fetch the wiki page HTML for a card.

    Args:
        name: Card name as shown on the wiki (spaces allowed)
        client: HTTP client to issue the request with

    Returns:
        Raw HTML content

    Raises:
        httpx.HTTPError: If the request fails or returns a non-2xx status
    """
    response = await client.get(card_page_url(name))
    response.raise_for_status()
    return response.text


async def fetch_card(name: str, client: httpx.AsyncClient) -> Card:
    """
    Fetch and parse a card from the wiki.

    Args:
        name: Card name; becomes the card's name and storage key
        client: HTTP client to issue the request with

    Returns:
        Card built from the page's data table

    Raises:
        CardNotFoundError: If the page could not be fetched. The underlying
            HTTP error is logged, never included in the message.
    """
    try:
        html = await fetch_card_page(name, client)
    except httpx.HTTPError as e:
        logger.error("Failed to fetch wiki page for %s: %r", name, e)
        raise CardNotFoundError() from e

    return parse_card_page(html, name)
