from duelcatalog.services.catalog import adjust_card_count, import_card

__all__ = [
    "adjust_card_count",
    "import_card",
]
