from duelcatalog.parsers.card_table import ParsedRow, parse_card_page, parse_row
from duelcatalog.parsers.fields import (
    CardField,
    field_for_label,
    is_numeric_field,
    parse_leading_int,
)
from duelcatalog.parsers.text import sanitize_text

__all__ = [
    "CardField",
    "ParsedRow",
    "field_for_label",
    "is_numeric_field",
    "parse_card_page",
    "parse_leading_int",
    "parse_row",
    "sanitize_text",
]
