"""
Domain exceptions.

The HTTP layer turns every CatalogError into a plain-text 500 response
carrying the exception message, so messages must be safe to show.
"""


class CatalogError(Exception):
    """Base class for catalogue failures."""

    pass


class CardNotFoundError(CatalogError):
    """Raised when a card page cannot be fetched or a stored card is missing."""

    def __init__(self, message: str = "Card not found") -> None:
        super().__init__(message)
