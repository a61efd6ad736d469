"""Endpoint descriptors for the feed service.

Each endpoint pairs a path (relative to the configured base address) with
the decoder for the record shape that path returns.  Decoders are declared
per shape; there is no generic "decode into any type" path.
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeFailure
from ..models import Author, Comment, Post

T = TypeVar("T")


@dataclass(frozen=True)
class Endpoint(Generic[T]):
    """Where to fetch from and how to turn the body into records."""

    path: str
    decode: Callable[[bytes], T]


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------

_posts_adapter = TypeAdapter(list[Post])
_comments_adapter = TypeAdapter(list[Comment])


def decode_posts(raw: bytes) -> list[Post]:
    try:
        return _posts_adapter.validate_json(raw)
    except ValidationError as exc:
        raise DecodeFailure(f"Invalid posts payload: {exc}") from exc


def decode_author(raw: bytes) -> Author:
    try:
        return Author.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeFailure(f"Invalid author payload: {exc}") from exc


def decode_comments(raw: bytes) -> list[Comment]:
    try:
        return _comments_adapter.validate_json(raw)
    except ValidationError as exc:
        raise DecodeFailure(f"Invalid comments payload: {exc}") from exc


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

def list_posts() -> Endpoint[list[Post]]:
    return Endpoint(path="posts", decode=decode_posts)


def author_by_id(author_id: int) -> Endpoint[Author]:
    return Endpoint(path=f"authors/{author_id}", decode=decode_author)


def comments_for_post(post_id: int) -> Endpoint[list[Comment]]:
    return Endpoint(path=f"posts/{post_id}/comments", decode=decode_comments)
