# quotes_api/db/sql_store.py

import logging
from datetime import datetime
from typing import List

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from quotes_api.db.schema import metadata, quotes
from quotes_api.db.store import QuoteStore
from quotes_api.models.quotes import Quote, format_timestamp

logger = logging.getLogger(__name__)


def _timestamp_column(value):
    if isinstance(value, datetime):
        return format_timestamp(value)
    return value


def _row_to_quote(row) -> Quote:
    return Quote(
        id=row["id"],
        text=row["text"],
        author=row["author"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def quote_to_row(quote: Quote) -> dict:
    return {
        "id": quote.id,
        "text": quote.text,
        "author": quote.author,
        "created_at": _timestamp_column(quote.created_at),
        "updated_at": _timestamp_column(quote.updated_at),
    }


class SqlQuoteStore(QuoteStore):
    """
    Quotes kept in the `quotes` table. Same contract as the JSON store:
    save_all() replaces every row inside one transaction.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        metadata.create_all(engine)

    def load_all(self) -> List[Quote]:
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(
                    select(quotes).order_by(quotes.c.id)
                ).mappings().all()
        except SQLAlchemyError as e:
            logger.error("Failed to read quotes table: %r", e)
            return []

        return [_row_to_quote(row) for row in rows]

    def save_all(self, quote_list: List[Quote]) -> bool:
        rows = [quote_to_row(q) for q in quote_list]
        try:
            with self.engine.begin() as conn:
                conn.execute(quotes.delete())
                if rows:
                    conn.execute(quotes.insert(), rows)
        except SQLAlchemyError as e:
            logger.error("Failed to write quotes table: %r", e)
            return False
        return True
