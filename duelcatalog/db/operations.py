"""
Database CRUD operations.

Provides async functions for reading and writing catalogued cards and decks.
"""

from collections.abc import Callable
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from duelcatalog.models.card import Card
from duelcatalog.models.db import Base, CardDB, DeckDB
from duelcatalog.models.deck import Deck
from duelcatalog.models.errors import CardNotFoundError

# --- Card Operations ---


async def get_card(session: AsyncSession, name: str) -> CardDB | None:
    """
    Get a stored card by name.

    Returns None if the card has not been catalogued.
    """
    return await session.get(CardDB, name)


async def list_cards(session: AsyncSession) -> list[CardDB]:
    """Get all stored cards ordered by name."""
    result = await session.execute(select(CardDB).order_by(CardDB.name))
    return list(result.scalars().all())


def _insert_for(session: AsyncSession) -> Callable[..., Any]:
    """
    Pick the dialect-specific INSERT that supports ON CONFLICT DO UPDATE.

    Raises:
        ValueError: If the database is neither PostgreSQL nor SQLite
    """
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert
    if dialect == "sqlite":
        return sqlite.insert

    msg = f"Unsupported database dialect for upserts: {dialect}"
    raise ValueError(msg)


async def _upsert(
    session: AsyncSession, model: type[Base], key_column: str, values: dict[str, Any]
) -> None:
    """Insert a row, or overwrite every column of the row that holds its key."""
    stmt = _insert_for(session)(model).values(**values)
    updates = {column: stmt.excluded[column] for column in values if column != key_column}
    updates["updated_at"] = func.now()
    await session.execute(
        stmt.on_conflict_do_update(index_elements=[key_column], set_=updates)
    )


async def upsert_card(session: AsyncSession, card: Card) -> CardDB:
    """
    Insert or overwrite a card.

    There is no uniqueness check: an existing card with the same name is
    replaced field by field, including its count. The write is a single
    INSERT ... ON CONFLICT DO UPDATE, so concurrent first imports of the
    same card both succeed and the last one wins.
    """
    await _upsert(
        session,
        CardDB,
        "name",
        {
            "name": card.name,
            "civilization": card.civilization,
            "type": card.type,
            "text": card.text,
            "mana_cost": card.mana_cost,
            "race": card.race,
            "power": card.power,
            "mana_number": card.mana_number,
            "flavor_text": card.flavor_text,
            "image": card.image,
            "count": card.count,
        },
    )

    db_card = await session.get(CardDB, card.name, populate_existing=True)
    if db_card is None:
        msg = f"Card {card.name} not found after upsert"
        raise RuntimeError(msg)
    return db_card


async def upsert_cards(session: AsyncSession, cards: list[Card]) -> int:
    """
    Overwrite each card by name.

    Returns count of cards written. Stored cards not in the list are kept.
    """
    for card in cards:
        await upsert_card(session, card)

    return len(cards)


async def increment_card_count(session: AsyncSession, name: str, increment: int) -> CardDB:
    """
    Add a signed delta to a stored card's count.

    Reads the current count and writes `count + increment` back. The read
    and the write are separate, so two concurrent increments on the same
    card can lose one of the updates.

    Raises:
        CardNotFoundError: If the card is not stored
    """
    db_card = await get_card(session, name)
    if db_card is None:
        raise CardNotFoundError()

    db_card.count = db_card.count + increment
    await session.flush()
    return db_card


def card_to_model(db_card: CardDB) -> Card:
    """Convert a database card to a domain model."""
    return Card(
        name=db_card.name,
        civilization=db_card.civilization,
        type=db_card.type,
        text=db_card.text,
        mana_cost=db_card.mana_cost,
        race=db_card.race,
        power=db_card.power,
        mana_number=db_card.mana_number,
        flavor_text=db_card.flavor_text,
        image=db_card.image,
        count=db_card.count,
    )


# --- Deck Operations ---


async def list_decks(session: AsyncSession) -> list[DeckDB]:
    """Get all stored decks ordered by key."""
    result = await session.execute(select(DeckDB).order_by(DeckDB.key))
    return list(result.scalars().all())


async def upsert_deck(session: AsyncSession, key: str, deck: Deck) -> DeckDB:
    """
    Insert or replace a deck under the given storage key.

    Callers choose the key (the deck's name or its id); see the deck routes.
    """
    await _upsert(
        session,
        DeckDB,
        "key",
        {
            "key": key,
            "name": deck.name,
            "deck_id": deck.id,
            "cards": [card.to_dict() for card in deck.cards],
        },
    )

    db_deck = await session.get(DeckDB, key, populate_existing=True)
    if db_deck is None:
        msg = f"Deck {key} not found after upsert"
        raise RuntimeError(msg)
    return db_deck


def deck_to_model(db_deck: DeckDB) -> Deck:
    """Convert a database deck to a domain model."""
    return Deck(
        name=db_deck.name,
        id=db_deck.deck_id,
        cards=[Card.from_dict(entry) for entry in db_deck.cards],
    )
