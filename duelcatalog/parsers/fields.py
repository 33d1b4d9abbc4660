"""
Field dictionary for the wiki card table.

Maps the attribute labels printed in the first cell of each table row
to card fields, and knows which fields hold integers.
"""

import re
from enum import Enum


class CardField(str, Enum):
    """Card fields that can be filled from a wiki table row."""

    CIVILIZATION = "civilization"
    TYPE = "type"
    TEXT = "text"
    MANA_COST = "manaCost"
    RACE = "race"
    POWER = "power"
    MANA_NUMBER = "manaNumber"
    FLAVOR_TEXT = "flavorText"
    IMAGE = "image"


# Labels are matched exactly (case-sensitive) against the wiki markup
LABEL_TO_FIELD: dict[str, CardField] = {
    "Civilization": CardField.CIVILIZATION,
    "Card Type": CardField.TYPE,
    "English Text": CardField.TEXT,
    "Mana Cost": CardField.MANA_COST,
    "Race": CardField.RACE,
    "Power": CardField.POWER,
    "Mana Number": CardField.MANA_NUMBER,
    "Flavor Text": CardField.FLAVOR_TEXT,
}

NUMERIC_FIELDS = frozenset({CardField.MANA_COST, CardField.POWER, CardField.MANA_NUMBER})

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def field_for_label(label: str) -> CardField | None:
    """Return the field for a row label, or None if the label is not catalogued."""
    return LABEL_TO_FIELD.get(label)


def is_numeric_field(field: CardField) -> bool:
    """True for fields stored as integers."""
    return field in NUMERIC_FIELDS


def parse_leading_int(value: str) -> int:
    """
    Parse the leading integer of a cell value.

    Trailing content is ignored, so "5 mana" gives 5 and "6000+" gives 6000.
    Values without leading digits ("no data", "∞", "") give 0, the same
    value an absent row leaves on the card.
    """
    match = _LEADING_INT.match(value)
    if match:
        return int(match.group(1))
    return 0
