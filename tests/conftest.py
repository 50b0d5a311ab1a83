from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from quotes_api.db.deps import get_store
from quotes_api.db.store import JsonFileQuoteStore
from quotes_api.main import app
from quotes_api.models.quotes import Quote

SEED = [
    ("The only way to do great work is to love what you do.", "Steve Jobs"),
    ("Life is what happens when you're busy making other plans.", "John Lennon"),
    ("In the middle of difficulty lies opportunity.", "Albert Einstein"),
    ("Simplicity is prerequisite for reliability.", "Edsger W. Dijkstra"),
    ("Talk is cheap. Show me the code.", "Linus Torvalds"),
]


def make_quotes():
    created = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)
    return [
        Quote(id=i, text=text, author=author, created_at=created)
        for i, (text, author) in enumerate(SEED, start=1)
    ]


@pytest.fixture
def quotes():
    return make_quotes()


@pytest.fixture
def quotes_file(tmp_path):
    return tmp_path / "quotes.json"


@pytest.fixture
def store(quotes_file):
    """JSON store in a temporary directory, starting out empty."""
    return JsonFileQuoteStore(quotes_file)


@pytest.fixture
def seeded_store(store, quotes):
    assert store.save_all(quotes)
    return store


def _client_for(store):
    app.dependency_overrides[get_store] = lambda: store
    return TestClient(app)


@pytest.fixture
def client(store):
    """Client over an empty store."""
    yield _client_for(store)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client(seeded_store):
    """Client over the five seed quotes."""
    yield _client_for(seeded_store)
    app.dependency_overrides.clear()


