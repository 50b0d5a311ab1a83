# quotes_api/models/quotes.py

from datetime import datetime, timezone
from typing import List, Optional, Union

from pydantic import BaseModel, Field, field_serializer, model_validator


def utc_now() -> datetime:
    # millisecond precision, same as the timestamps already in the data file
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class Quote(BaseModel):
    """
    A stored quote. Only `id` is required: records written by hand or by an
    older version of the service are kept even if they miss a field, and a
    timestamp that does not parse is carried along as the raw string.
    """

    id: int
    text: Optional[str] = None
    author: Optional[str] = None
    created_at: Optional[Union[datetime, str]] = Field(
        default=None, alias="createdAt", union_mode="left_to_right"
    )
    updated_at: Optional[Union[datetime, str]] = Field(
        default=None, alias="updatedAt", union_mode="left_to_right"
    )

    class Config:
        populate_by_name = True
        # keep unknown keys from the data file when it is rewritten
        extra = "allow"

    @field_serializer("created_at", "updated_at", when_used="json-unless-none")
    def serialize_timestamp(self, value):
        if isinstance(value, datetime):
            return format_timestamp(value)
        return value

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class QuoteCreate(BaseModel):
    text: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)


class QuoteUpdate(BaseModel):
    text: Optional[str] = None
    author: Optional[str] = None

    @model_validator(mode="after")
    def require_text_or_author(self) -> "QuoteUpdate":
        if not self.text and not self.author:
            raise ValueError("text or author is required")
        return self


class QuoteListOut(BaseModel):
    count: int
    quotes: List[Quote]


class QuoteSearchOut(BaseModel):
    query: str
    count: int
    quotes: List[Quote]


class QuoteMessageOut(BaseModel):
    message: str
    quote: Quote
