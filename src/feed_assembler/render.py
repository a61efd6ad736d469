"""Plain-text rendering of assembled feed records."""

from typing import Iterable

from .models import PostWithCommentsAndAuthor


def format_record(record: PostWithCommentsAndAuthor) -> str:
    comments = ", ".join(f"[{c.id}] {c.content}" for c in record.comments)
    return (
        f"Author: {record.author.name}\n"
        f"Content: {record.post.content}\n"
        f"Comments: [{comments}]"
    )


def format_feed(records: Iterable[PostWithCommentsAndAuthor]) -> str:
    return "\n".join(format_record(r) for r in records)
