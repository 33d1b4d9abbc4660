from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class Card:
    """
    A Duel Masters card as catalogued from the wiki.

    Every field is always present. Missing source data leaves the
    zero value of the field's type (empty string or 0).

    Attributes:
        name: Card name as supplied by the caller (storage key)
        civilization: Civilization(s), e.g. "Fire" or "Water / Darkness"
        type: Card type line, e.g. "Creature"
        text: English rules text
        mana_cost: Mana cost
        race: Creature race(s)
        power: Creature power
        mana_number: Mana number produced when charged as mana
        flavor_text: Flavor text
        image: URL of the card artwork
        count: Copies owned, 1 at creation
    """

    name: str
    civilization: str = ""
    type: str = ""
    text: str = ""
    mana_cost: int = 0
    race: str = ""
    power: int = 0
    mana_number: int = 0
    flavor_text: str = ""
    image: str = ""
    count: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the API's camelCase keys."""
        return {
            "name": self.name,
            "civilization": self.civilization,
            "type": self.type,
            "text": self.text,
            "manaCost": self.mana_cost,
            "race": self.race,
            "power": self.power,
            "manaNumber": self.mana_number,
            "flavorText": self.flavor_text,
            "image": self.image,
            "count": self.count,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Card":
        """Build a card from its camelCase JSON form, defaulting absent keys."""
        return cls(
            name=data["name"],
            civilization=data.get("civilization", ""),
            type=data.get("type", ""),
            text=data.get("text", ""),
            mana_cost=data.get("manaCost", 0),
            race=data.get("race", ""),
            power=data.get("power", 0),
            mana_number=data.get("manaNumber", 0),
            flavor_text=data.get("flavorText", ""),
            image=data.get("image", ""),
            count=data.get("count", 1),
        )
