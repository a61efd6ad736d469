"""Feed assembly: join every post with its author and comments.

Pipeline:
    list posts → one join per post (concurrently) → ordered composite records

Each join fetches the author and the comments of one post at the same
time.  A single failing fetch fails the whole feed; callers never see a
partial result.
"""

import logging
from typing import Sequence

from ..models import Post, PostWithCommentsAndAuthor
from .endpoints import author_by_id, comments_for_post, list_posts
from .fanout import gather_in_order

logger = logging.getLogger(__name__)


async def join_post(fetcher, post: Post) -> PostWithCommentsAndAuthor:
    """Fetch the author and comments of *post* concurrently and combine them.

    Parameters
    ----------
    fetcher:
        Anything with an async ``fetch(endpoint)`` method, normally a
        :class:`~feed_assembler.lib.fetcher.Fetcher`.
    post:
        The post to complete.  It is returned unchanged inside the record.
    """
    author, comments = await gather_in_order(
        [
            fetcher.fetch(author_by_id(post.author_id)),
            fetcher.fetch(comments_for_post(post.id)),
        ]
    )
    return PostWithCommentsAndAuthor(post=post, author=author, comments=comments)


async def assemble(fetcher, posts: Sequence[Post]) -> list[PostWithCommentsAndAuthor]:
    """Join every post concurrently; record ``i`` belongs to ``posts[i]``."""
    logger.debug("Assembling %d posts", len(posts))
    try:
        return await gather_in_order(join_post(fetcher, post) for post in posts)
    except Exception:
        logger.warning("Feed assembly of %d posts failed", len(posts))
        raise


async def load_feed(fetcher) -> list[PostWithCommentsAndAuthor]:
    """Fetch the post list and assemble the full feed."""
    posts = await fetcher.fetch(list_posts())
    records = await assemble(fetcher, posts)
    logger.info("Assembled feed of %d posts", len(records))
    return records
