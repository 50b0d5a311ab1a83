# quotes_api/api/quotes.py

from typing import Optional, Type

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from pydantic import ValidationError as SchemaError

from quotes_api.db.deps import get_store
from quotes_api.db.store import QuoteStore
from quotes_api.errors import NotFoundError, StorageError, ValidationError
from quotes_api.models.quotes import (
    Quote,
    QuoteCreate,
    QuoteListOut,
    QuoteMessageOut,
    QuoteSearchOut,
    QuoteUpdate,
    utc_now,
)
from quotes_api.services import quote_query

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


def _locate(quotes, quote_id: str) -> int:
    """
    Index of the quote with the given path id. Only the leading digits of
    the id count; an id without any is simply not found.
    """
    parsed = quote_query.parse_int_prefix(quote_id)
    index = None if parsed is None else quote_query.find_index(quotes, parsed)
    if index is None:
        raise NotFoundError("Quote not found")
    return index


FORM_TYPE = "application/x-www-form-urlencoded"


def _body_of(model: Type[BaseModel]):
    """
    Dependency that reads a JSON or form-encoded body into `model`.
    Failures surface as a RequestValidationError, i.e. a 400.
    """

    async def read_body(request: Request) -> BaseModel:
        content_type = request.headers.get("content-type", "")
        if content_type.startswith(FORM_TYPE):
            data = dict(await request.form())
        elif await request.body():
            try:
                data = await request.json()
            except ValueError:
                raise RequestValidationError(
                    [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error"}]
                )
        else:
            data = {}

        try:
            return model.model_validate(data)
        except SchemaError as e:
            raise RequestValidationError(e.errors(include_url=False))

    return read_body


def _save(store: QuoteStore, quotes, failure: str) -> None:
    if not store.save_all(quotes):
        raise StorageError(failure)


@router.get(
    "", response_model=QuoteListOut, response_model_exclude_none=True
)
def list_quotes(
    author: Optional[str] = Query(
        default=None, description="Case-insensitive substring of the author"
    ),
    limit: Optional[str] = Query(
        default=None, description="Return at most this many quotes"
    ),
    store: QuoteStore = Depends(get_store),
) -> QuoteListOut:
    quotes = store.load_all()

    if author:
        quotes = quote_query.filter_by_author(quotes, author)
    quotes = quote_query.limit_quotes(quotes, limit)

    return QuoteListOut(count=len(quotes), quotes=quotes)


@router.get(
    "/random", response_model=Quote, response_model_exclude_none=True
)
def random_quote(store: QuoteStore = Depends(get_store)) -> Quote:
    return quote_query.pick_random(store.load_all())


@router.get(
    "/search", response_model=QuoteSearchOut, response_model_exclude_none=True
)
def search_quotes(
    q: Optional[str] = Query(
        default=None, description="Text to look for in quote text or author"
    ),
    store: QuoteStore = Depends(get_store),
) -> QuoteSearchOut:
    if not q:
        raise ValidationError("Search query 'q' is required")

    results = quote_query.search(store.load_all(), q)
    return QuoteSearchOut(query=q, count=len(results), quotes=results)


@router.get(
    "/{quote_id}", response_model=Quote, response_model_exclude_none=True
)
def get_quote(quote_id: str, store: QuoteStore = Depends(get_store)) -> Quote:
    quotes = store.load_all()
    return quotes[_locate(quotes, quote_id)]


@router.post(
    "",
    response_model=QuoteMessageOut,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def add_quote(
    body: QuoteCreate = Depends(_body_of(QuoteCreate)),
    store: QuoteStore = Depends(get_store),
) -> QuoteMessageOut:
    quotes = store.load_all()

    quote = Quote(
        id=quote_query.next_id(quotes),
        text=body.text,
        author=body.author,
        created_at=utc_now(),
    )
    quotes.append(quote)
    _save(store, quotes, "Failed to save quote")

    return QuoteMessageOut(message="Quote added", quote=quote)


@router.put(
    "/{quote_id}", response_model=QuoteMessageOut, response_model_exclude_none=True
)
def update_quote(
    quote_id: str,
    body: QuoteUpdate = Depends(_body_of(QuoteUpdate)),
    store: QuoteStore = Depends(get_store),
) -> QuoteMessageOut:
    quotes = store.load_all()
    quote = quotes[_locate(quotes, quote_id)]

    # only fields that were actually sent (and non-empty) change
    if body.text:
        quote.text = body.text
    if body.author:
        quote.author = body.author
    quote.updated_at = utc_now()

    _save(store, quotes, "Failed to update quote")

    return QuoteMessageOut(message="Quote updated", quote=quote)


@router.delete(
    "/{quote_id}", response_model=QuoteMessageOut, response_model_exclude_none=True
)
def delete_quote(
    quote_id: str, store: QuoteStore = Depends(get_store),
) -> QuoteMessageOut:
    quotes = store.load_all()
    deleted = quotes.pop(_locate(quotes, quote_id))

    _save(store, quotes, "Failed to delete quote")

    return QuoteMessageOut(message="Quote deleted", quote=deleted)
