"""Tests for the card catalogue service."""

import httpx
import pytest
import respx
from sqlalchemy.ext.asyncio import AsyncSession

from duelcatalog.db.operations import get_card, upsert_card
from duelcatalog.models.card import Card
from duelcatalog.models.errors import CardNotFoundError
from duelcatalog.services.catalog import adjust_card_count, import_card

BOLSHACK_URL = "https://duelmasters.fandom.com/wiki/Bolshack_Dragon"


class TestImportCard:
    @respx.mock
    async def test_stores_fetched_card(self, session: AsyncSession, card_page_html: str) -> None:
        respx.get(BOLSHACK_URL).mock(return_value=httpx.Response(200, text=card_page_html))

        async with httpx.AsyncClient() as client:
            card = await import_card(session, client, "Bolshack Dragon")

        stored = await get_card(session, "Bolshack Dragon")
        assert stored is not None
        assert stored.civilization == card.civilization == "Fire"
        assert stored.count == 1

    @respx.mock
    async def test_reimport_resets_count(self, session: AsyncSession, card_page_html: str) -> None:
        await upsert_card(session, Card(name="Bolshack Dragon", count=4))
        respx.get(BOLSHACK_URL).mock(return_value=httpx.Response(200, text=card_page_html))

        async with httpx.AsyncClient() as client:
            await import_card(session, client, "Bolshack Dragon")

        stored = await get_card(session, "Bolshack Dragon")
        assert stored is not None
        assert stored.count == 1
        assert stored.power == 6000

    @respx.mock
    async def test_not_found_stores_nothing(self, session: AsyncSession) -> None:
        respx.get(BOLSHACK_URL).mock(return_value=httpx.Response(404))

        async with httpx.AsyncClient() as client:
            with pytest.raises(CardNotFoundError):
                await import_card(session, client, "Bolshack Dragon")

        assert await get_card(session, "Bolshack Dragon") is None


class TestAdjustCardCount:
    async def test_returns_updated_card(self, session: AsyncSession) -> None:
        await upsert_card(session, Card(name="Aqua Hulcus", count=3))

        card = await adjust_card_count(session, "Aqua Hulcus", -1)

        assert card == Card(name="Aqua Hulcus", count=2)

    async def test_missing_card(self, session: AsyncSession) -> None:
        with pytest.raises(CardNotFoundError):
            await adjust_card_count(session, "Nonexistent", 1)
