"""Record shapes returned by the feed service.

All records are immutable once decoded.  Field names are snake_case in
Python and camelCase on the wire.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AttachmentType(str, Enum):
    """Kind of media attached to a post."""

    IMAGE = "IMAGE"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Attachment(_Record):
    url: str = Field(..., description="Location of the attached media")
    description: str = Field(..., description="Human readable description")
    type: AttachmentType = Field(..., description="Media kind")


class Post(_Record):
    """A post as returned by the ``posts`` endpoint."""

    id: int
    author_id: int = Field(..., alias="authorId")
    content: str
    published: int = Field(..., description="Publish time (epoch)")
    liked_by_me: bool = Field(..., alias="likedByMe")
    likes: int = 0
    attachment: Attachment | None = None


class Author(_Record):
    id: int
    name: str = Field(..., description="Display name")
    avatar: str = Field(..., description="Avatar URL or file name")


class Comment(_Record):
    id: int
    post_id: int = Field(..., alias="postId")
    author_id: int = Field(..., alias="authorId")
    content: str
    published: int
    liked_by_me: bool = Field(..., alias="likedByMe")
    likes: int = 0


class PostWithCommentsAndAuthor(_Record):
    """A post joined with its author and comments.

    Only ever built once both the author and the comments were fetched.
    """

    post: Post
    author: Author
    comments: list[Comment] = Field(default_factory=list)
