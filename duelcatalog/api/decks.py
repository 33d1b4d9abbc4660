"""
Deck API endpoints.

Decks can be written under two keys: `PUT /deck` stores the deck under
its name, `PUT /deck/{deck_id}` stores it under the `id` in the body.
A deck written both ways is stored twice.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from duelcatalog.api.cards import CardPayload
from duelcatalog.db import deck_to_model, list_decks, upsert_deck
from duelcatalog.db.database import get_session
from duelcatalog.models.deck import Deck

router = APIRouter(prefix="/deck", tags=["decks"])


class DeckPayload(BaseModel):
    """A deck in its JSON wire form."""

    name: str = Field(..., min_length=1)
    id: str = ""
    cards: list[CardPayload] = Field(default_factory=list)

    @classmethod
    def from_deck(cls, deck: Deck) -> "DeckPayload":
        return cls(
            name=deck.name,
            id=deck.id,
            cards=[CardPayload.from_card(card) for card in deck.cards],
        )

    def to_deck(self) -> Deck:
        return Deck(
            name=self.name,
            id=self.id,
            cards=[card.to_card() for card in self.cards],
        )


class IdentifiedDeckPayload(DeckPayload):
    """A deck that must carry its own id."""

    id: str = Field(..., min_length=1)


@router.get("/list", response_model=list[DeckPayload])
async def get_deck_list(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[DeckPayload]:
    """Get every stored deck."""
    return [DeckPayload.from_deck(deck_to_model(d)) for d in await list_decks(session)]


@router.put("")
async def put_deck_by_name(
    deck: DeckPayload,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """Store a deck keyed by its name."""
    await upsert_deck(session, deck.name, deck.to_deck())
    return Response(status_code=status.HTTP_200_OK)


@router.put("/{deck_id}")
async def put_deck_by_id(
    deck_id: str,  # noqa: ARG001
    deck: IdentifiedDeckPayload,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> Response:
    """
    Store a deck keyed by the `id` in its body.

    The path segment is not consulted; the body's id is the key and is
    stored unchanged.
    """
    await upsert_deck(session, deck.id, deck.to_deck())
    return Response(status_code=status.HTTP_200_OK)
