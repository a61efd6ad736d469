"""Feed router – assembles the feed on request.

GET /feed
    Every post joined with its author and comments, in post order.
"""

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from ..errors import FetchError
from ..lib.orchestrator import load_feed
from ..models import PostWithCommentsAndAuthor

router = APIRouter(tags=["feed"])

logger = logging.getLogger(__name__)


class FeedResponse(BaseModel):
    """Assembled feed, one record per post."""

    records: list[PostWithCommentsAndAuthor]


@router.get("/feed", response_model=FeedResponse)
async def get_feed(request: Request) -> FeedResponse:
    """Fetch posts and join each with its author and comments.

    Any failed fetch fails the whole request with 502; no partial feed is
    returned.
    """
    # `app.state.fetcher` is created in the lifespan in `main.py`. Tests set
    # it to a fake with an async `fetch(endpoint)` method.
    fetcher = request.app.state.fetcher
    try:
        records = await load_feed(fetcher)
    except FetchError as exc:
        logger.exception("Feed assembly failed", extra={"path": exc.path})
        raise HTTPException(status_code=502, detail="Feed service request failed") from exc

    return FeedResponse(records=records)
