from dataclasses import dataclass, field

from duelcatalog.models.card import Card


@dataclass
class Deck:
    """
    A user-built deck.

    Attributes:
        name: Display label
        id: Client-assigned identifier
        cards: Deck entries in display order, each carrying its own count
    """

    name: str
    id: str
    cards: list[Card] = field(default_factory=list)
