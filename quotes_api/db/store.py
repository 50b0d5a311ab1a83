# quotes_api/db/store.py
"""
Quote stores. The whole collection is the unit of read and write: every
load returns all quotes and every save replaces all of them.

Stores never raise on I/O trouble. load_all() degrades to an empty list and
save_all() reports failure with False; the cause goes to the log.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Union

from quotes_api.models.quotes import Quote

logger = logging.getLogger(__name__)


class QuoteStore:
    def load_all(self) -> List[Quote]:
        raise NotImplementedError

    def save_all(self, quotes: List[Quote]) -> bool:
        raise NotImplementedError


class JsonFileQuoteStore(QuoteStore):
    """Quotes kept as a pretty-printed JSON array in a single file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_all(self) -> List[Quote]:
        try:
            with self.path.open(encoding="utf-8") as f:
                raw = json.load(f)
            # records only need an id; anything else that fails validation
            # (a bare number, a missing id) counts as an unreadable file.
            # ValidationError from pydantic is a ValueError too
            return [Quote.model_validate(item) for item in raw]
        except FileNotFoundError:
            logger.warning("Quotes file %s does not exist", self.path)
            return []
        except (OSError, ValueError, TypeError) as e:
            logger.error("Failed to read quotes file %s: %r", self.path, e)
            return []

    def save_all(self, quotes: List[Quote]) -> bool:
        payload = json.dumps(
            [q.to_json() for q in quotes], indent=2, ensure_ascii=False
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write quotes file %s: %r", self.path, e)
            return False
        return True


class InMemoryQuoteStore(QuoteStore):
    def __init__(self, quotes: Optional[List[Quote]] = None):
        self._quotes = [q.model_copy(deep=True) for q in quotes or []]

    def load_all(self) -> List[Quote]:
        return [q.model_copy(deep=True) for q in self._quotes]

    def save_all(self, quotes: List[Quote]) -> bool:
        self._quotes = [q.model_copy(deep=True) for q in quotes]
        return True
