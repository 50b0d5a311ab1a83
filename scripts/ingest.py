# scripts/ingest.py
"""
Copy a JSON quotes file into the SQL store.

    python -m scripts.ingest [path/to/quotes.json] [--reset]

--reset drops and recreates the quotes table before loading.
"""

import argparse
import logging

from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from quotes_api.config import get_settings
from quotes_api.db.engine import get_engine
from quotes_api.db.schema import metadata, quotes
from quotes_api.db.sql_store import quote_to_row
from quotes_api.db.store import JsonFileQuoteStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)


def upsert_quote(conn, quote_row: dict) -> None:
    """
    Insert or update a quote by id (idempotent ingest).

    quote_row: dict mapping column names to values, e.g.
      {
        "id": 1,
        "text": "...",
        "author": "...",
        "created_at": "2024-01-15T10:00:00.000Z",
        "updated_at": None,
      }
    """
    stmt = sqlite_insert(quotes).values(**quote_row)

    # On conflict by id, overwrite everything but the key
    stmt = stmt.on_conflict_do_update(
        index_elements=[quotes.c.id],
        set_={
            "text": stmt.excluded.text,
            "author": stmt.excluded.author,
            "created_at": stmt.excluded.created_at,
            "updated_at": stmt.excluded.updated_at,
        },
    )

    conn.execute(stmt)


def load_into_db(engine, quote_list, reset: bool = False) -> int:
    if reset:
        metadata.drop_all(engine)
    metadata.create_all(engine)

    with engine.begin() as conn:
        for q in quote_list:
            upsert_quote(conn, quote_to_row(q))
    return len(quote_list)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Load quotes JSON into the database")
    parser.add_argument("path", nargs="?", default=get_settings().quotes_file)
    parser.add_argument("--reset", action="store_true", help="recreate the quotes table first")
    args = parser.parse_args(argv)

    quote_list = JsonFileQuoteStore(args.path).load_all()
    if not quote_list:
        logger.warning("No quotes loaded; is %s present and valid JSON?", args.path)

    n_loaded = load_into_db(get_engine(), quote_list, reset=args.reset)

    logger.info(f"Quotes read from:      {args.path}")
    logger.info(f"Quotes upserted:       {n_loaded}")
    logger.info(f"Distinct authors:      {len({q.author for q in quote_list})}")


if __name__ == "__main__":
    main()
