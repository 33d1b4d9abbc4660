"""
Card catalogue service.

Connects the wiki fetcher to the card store.
"""

import logging

import httpx
from sqlalchemy.ext.asyncio import AsyncSession

from duelcatalog.db.operations import card_to_model, increment_card_count, upsert_card
from duelcatalog.models.card import Card
from duelcatalog.scrapers.duelmasters_wiki import fetch_card

logger = logging.getLogger(__name__)


async def import_card(session: AsyncSession, client: httpx.AsyncClient, name: str) -> Card:
    """
    Fetch a card from the wiki and store it, replacing any stored copy.

    A re-import resets the card's count to 1.

    Raises:
        CardNotFoundError: If the wiki page could not be fetched
    """
    card = await fetch_card(name, client)
    await upsert_card(session, card)
    logger.info("Imported card %s", name)
    return card


async def adjust_card_count(session: AsyncSession, name: str, increment: int) -> Card:
    """
    Apply a signed delta to a stored card's count.

    Raises:
        CardNotFoundError: If the card is not stored
    """
    db_card = await increment_card_count(session, name, increment)
    logger.info("Adjusted count of %s by %d to %d", name, increment, db_card.count)
    return card_to_model(db_card)
