from duelcatalog.db.database import get_session, init_db
from duelcatalog.db.operations import (
    card_to_model,
    deck_to_model,
    get_card,
    increment_card_count,
    list_cards,
    list_decks,
    upsert_card,
    upsert_cards,
    upsert_deck,
)

__all__ = [
    "card_to_model",
    "deck_to_model",
    "get_card",
    "get_session",
    "increment_card_count",
    "init_db",
    "list_cards",
    "list_decks",
    "upsert_card",
    "upsert_cards",
    "upsert_deck",
]
