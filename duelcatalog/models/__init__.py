from duelcatalog.models.card import Card
from duelcatalog.models.deck import Deck
from duelcatalog.models.errors import CardNotFoundError, CatalogError

__all__ = [
    "Card",
    "CardNotFoundError",
    "CatalogError",
    "Deck",
]
