"""
Card API endpoints.

Imports cards from the wiki, adjusts owned counts, and exports or
replaces the whole catalogue as JSON.
"""

from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from duelcatalog.db import card_to_model, list_cards, upsert_cards
from duelcatalog.db.database import get_session
from duelcatalog.models.card import Card
from duelcatalog.scrapers.duelmasters_wiki import get_wiki_client
from duelcatalog.services.catalog import adjust_card_count, import_card

router = APIRouter(prefix="/card", tags=["cards"])


class CardPayload(BaseModel):
    """A card in its JSON wire form (camelCase keys)."""

    name: str = Field(..., min_length=1)
    civilization: str = ""
    type: str = ""
    text: str = ""
    manaCost: int = 0
    race: str = ""
    power: int = 0
    manaNumber: int = 0
    flavorText: str = ""
    image: str = ""
    count: int = 1

    @classmethod
    def from_card(cls, card: Card) -> "CardPayload":
        return cls.model_validate(card.to_dict())

    def to_card(self) -> Card:
        return Card.from_dict(self.model_dump())


class IncrementRequest(BaseModel):
    """Request model for adjusting a card's count."""

    increment: int = Field(
        ...,
        description="Signed number of copies to add (negative to remove)",
        examples=[1, -1],
    )


async def _all_cards(session: AsyncSession) -> list[CardPayload]:
    return [CardPayload.from_card(card_to_model(c)) for c in await list_cards(session)]


@router.get("/list", response_model=list[CardPayload])
async def get_card_list(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[CardPayload]:
    """Get every catalogued card."""
    return await _all_cards(session)


@router.get("/list/json")
async def download_card_list(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> JSONResponse:
    """Get every catalogued card as a downloadable cards.json file."""
    cards = await _all_cards(session)
    return JSONResponse(
        content=[card.model_dump() for card in cards],
        headers={"Content-Disposition": "attachment; filename=cards.json"},
    )


@router.put("/list/json")
async def replace_card_list(
    cards: list[CardPayload],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """
    Overwrite stored cards from a JSON array.

    Each card replaces the stored card of the same name.
    """
    await upsert_cards(session, [card.to_card() for card in cards])
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{name}", status_code=status.HTTP_201_CREATED)
async def create_card(
    name: str,
    session: Annotated[AsyncSession, Depends(get_session)],
    client: Annotated[httpx.AsyncClient, Depends(get_wiki_client)],
) -> Response:
    """
    Import a card from the wiki.

    Re-importing an existing card overwrites it (count resets to 1).
    Fails with "Card not found" if the wiki page cannot be fetched.
    """
    await import_card(session, client, name)
    return Response(status_code=status.HTTP_201_CREATED)


@router.patch("/{name}")
async def update_card_count(
    name: str,
    request: IncrementRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Add a signed increment to a stored card's count."""
    await adjust_card_count(session, name, request.increment)
    return Response(status_code=status.HTTP_200_OK)
