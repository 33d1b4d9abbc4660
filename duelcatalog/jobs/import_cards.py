"""
Batch import of cards from the wiki.

Fetches each named card and stores it. Can be run as a standalone script:

    python -m duelcatalog.jobs.import_cards "Bolshack Dragon" "Aqua Hulcus"
"""

import argparse
import asyncio
import logging

import httpx

from duelcatalog.db.database import async_session_factory, init_db
from duelcatalog.models.errors import CardNotFoundError
from duelcatalog.scrapers.duelmasters_wiki import wiki_client
from duelcatalog.services.catalog import import_card

logger = logging.getLogger(__name__)


async def import_one(name: str, client: httpx.AsyncClient) -> bool:
    """
    Import a single card in its own session.

    Returns:
        True if the card was stored, False if it could not be found
    """
    try:
        async with async_session_factory() as session:
            await import_card(session, client, name)
            await session.commit()
    except CardNotFoundError:
        logger.warning("Skipping %s: card not found", name)
        return False

    return True


async def run_import(names: list[str]) -> dict[str, bool]:
    """
    Import several cards with one shared HTTP client.

    Args:
        names: Card names as shown on the wiki

    Returns:
        Dict mapping each name to whether it was stored
    """
    await init_db()

    results: dict[str, bool] = {}

    async with wiki_client() as client:
        for name in names:
            results[name] = await import_one(name, client)

    imported = sum(results.values())
    logger.info("Import complete. %d of %d cards stored", imported, len(results))
    return results


def main() -> None:
    """CLI entry point for importing cards."""
    parser = argparse.ArgumentParser(description="Import Duel Masters cards from the wiki")
    parser.add_argument("names", nargs="+", help="Card names, e.g. 'Bolshack Dragon'")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_import(args.names))


if __name__ == "__main__":
    main()
