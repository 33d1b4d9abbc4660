"""Text cleanup for values scraped from wiki table cells."""

# The wiki prefixes each entry of a multi-value cell with this marker
NOISE_GLYPH = "■"


def sanitize_text(text: str) -> str:
    """Remove noise glyphs anywhere in the text and trim outer whitespace."""
    return text.replace(NOISE_GLYPH, "").strip()
