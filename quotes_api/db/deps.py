# quotes_api/db/deps.py

from functools import lru_cache

from quotes_api.config import Settings, get_settings
from quotes_api.db.engine import get_engine
from quotes_api.db.sql_store import SqlQuoteStore
from quotes_api.db.store import JsonFileQuoteStore, QuoteStore


def create_store(settings: Settings) -> QuoteStore:
    if settings.store_backend == "sql":
        return SqlQuoteStore(get_engine(settings.database_url))
    return JsonFileQuoteStore(settings.quotes_file)


@lru_cache
def get_store() -> QuoteStore:
    """FastAPI dependency; tests replace it through app.dependency_overrides."""
    return create_store(get_settings())
