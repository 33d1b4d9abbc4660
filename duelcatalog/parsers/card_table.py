"""
Duel Masters wiki card table parser.

Card pages carry one `.wikitable` laid out as:

    row 0       header (<th>) with the card name
    row 1       artwork: a single cell holding an <img>
    row 2..n    label cell + value cell, e.g. "Civilization" | "Fire"

Label/value rows are mapped onto card fields via the field dictionary.
The artwork row has no label, so it is recognised by position only.
Unknown labels, spacer rows and missing tables are skipped silently:
a partial page still yields a usable card.
"""

from typing import NamedTuple

from bs4 import BeautifulSoup, Tag

from duelcatalog.models.card import Card
from duelcatalog.parsers.fields import (
    CardField,
    field_for_label,
    is_numeric_field,
    parse_leading_int,
)
from duelcatalog.parsers.text import sanitize_text

DATA_TABLE_SELECTOR = ".wikitable"

# Position of the artwork row within the data table
IMAGE_ROW_INDEX = 1


class ParsedRow(NamedTuple):
    """A field value extracted from one table row."""

    field: CardField
    value: str


def parse_row(row: Tag, index: int) -> ParsedRow | None:
    """
    Extract a (field, value) pair from one table row.

    Args:
        row: The <tr> element
        index: Zero-based position of the row within the data table

    Returns:
        ParsedRow, or None for header rows, unknown labels and rows
        that are neither label/value pairs nor the artwork row
    """
    if row.find("th") is not None:
        return None

    cells = row.find_all("td")

    if len(cells) != 2:
        return _parse_image_row(row, index)

    label_element = cells[0].select_one("a span")
    label = label_element.get_text(strip=True) if label_element else ""

    field = field_for_label(label)
    if field is None:
        return None

    return ParsedRow(field, sanitize_text(cells[1].get_text()))


def _parse_image_row(row: Tag, index: int) -> ParsedRow | None:
    """Artwork is only taken from the second row; images elsewhere are decoration."""
    if index != IMAGE_ROW_INDEX:
        return None

    img = row.find("img")
    if not isinstance(img, Tag):
        return None

    src = img.get("src")
    return ParsedRow(CardField.IMAGE, src if isinstance(src, str) else "")


def apply_row(card: Card, parsed: ParsedRow) -> None:
    """Write a parsed row onto the card, converting numeric fields."""
    field, value = parsed
    number = parse_leading_int(value) if is_numeric_field(field) else 0

    match field:
        case CardField.CIVILIZATION:
            card.civilization = value
        case CardField.TYPE:
            card.type = value
        case CardField.TEXT:
            card.text = value
        case CardField.MANA_COST:
            card.mana_cost = number
        case CardField.RACE:
            card.race = value
        case CardField.POWER:
            card.power = number
        case CardField.MANA_NUMBER:
            card.mana_number = number
        case CardField.FLAVOR_TEXT:
            card.flavor_text = value
        case CardField.IMAGE:
            card.image = value


def find_data_table(soup: BeautifulSoup) -> Tag | None:
    """Locate the card data table inside the page body."""
    body = soup.find("body")
    if not isinstance(body, Tag):
        return None
    return body.select_one(DATA_TABLE_SELECTOR)


def parse_card_page(html: str, name: str) -> Card:
    """
    Build a card from a wiki page.

    Rows are applied in document order; if a field appears twice the
    later row wins.

    Args:
        html: Raw page markup
        name: Card name supplied by the caller (not read from the page)

    Returns:
        Card with every field found on the page filled in. A page without
        a data table gives a card with only the name set.
    """
    card = Card(name=name)

    table = find_data_table(BeautifulSoup(html, "html.parser"))
    if table is None:
        return card

    for index, row in enumerate(table.find_all("tr")):
        parsed = parse_row(row, index)
        if parsed is not None:
            apply_row(card, parsed)

    return card
