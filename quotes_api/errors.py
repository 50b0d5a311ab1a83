# quotes_api/errors.py
"""
Errors raised by the quote handlers and stores.

Each error knows its HTTP status; the app-level handler in main.py turns it
into a `{"error": message}` body.
"""


class QuoteServiceError(Exception):
    http_status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(QuoteServiceError):
    """A required request field is missing."""

    http_status = 400


class NotFoundError(QuoteServiceError):
    """No quote with the requested id, or the collection is empty."""

    http_status = 404


class StorageError(QuoteServiceError):
    """The collection could not be persisted. Details stay in the server log."""

    http_status = 500
