"""
SQLAlchemy ORM models for persistent storage.

Models mirror the dataclass models but add database persistence.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class CardDB(Base):
    """
    A catalogued card stored in the database.

    Keyed by the card name the caller used when importing it.
    """

    __tablename__ = "cards"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    civilization: Mapped[str] = mapped_column(String(255), default="")
    type: Mapped[str] = mapped_column(String(255), default="")
    text: Mapped[str] = mapped_column(Text, default="")
    mana_cost: Mapped[int] = mapped_column(Integer, default=0)
    race: Mapped[str] = mapped_column(String(255), default="")
    power: Mapped[int] = mapped_column(Integer, default=0)
    mana_number: Mapped[int] = mapped_column(Integer, default=0)
    flavor_text: Mapped[str] = mapped_column(Text, default="")
    image: Mapped[str] = mapped_column(Text, default="")
    count: Mapped[int] = mapped_column(Integer, default=1)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<CardDB(name={self.name}, count={self.count})>"


class DeckDB(Base):
    """
    A user deck stored in the database.

    `key` is whatever the write path keyed the deck by (its name or its id).
    """

    __tablename__ = "decks"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    deck_id: Mapped[str] = mapped_column(String(255), default="")

    # Deck entries stored as a JSON list of camelCase card dicts
    cards: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<DeckDB(key={self.key}, name={self.name})>"
