from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.content import ContentBlock, parse


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------
class Category(str, Enum):
    TECHNOLOGY = "Technology"
    DESIGN = "Design"
    BUSINESS = "Business"
    LIFESTYLE = "Lifestyle"
    TRAVEL = "Travel"


# ---------------------------------------------------------------------------
# Author
# ---------------------------------------------------------------------------
class Author(BaseModel):
    name: str
    avatar_ref: str = ""
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Comment
# ---------------------------------------------------------------------------
class Comment(BaseModel):
    id: str
    author_name: str
    author_avatar_ref: str = ""
    body: str
    created_at: datetime
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Article summary (listing projection)
# ---------------------------------------------------------------------------
class ArticleSummary(BaseModel):
    id: str
    title: str
    excerpt: str
    author: Author
    published_at: date
    category: Category
    read_time: str = ""
    image_ref: str = ""
    like_count: int = Field(0, ge=0)
    status: Literal["published", "draft"] = "published"
    comment_count: int = Field(0, ge=0)
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Article
# ---------------------------------------------------------------------------
class Article(BaseModel):
    """
    The Article aggregate.

    Instances are immutable snapshots: the like and comment operations in
    ``app.services`` return a new Article instead of mutating this one.
    ``comments`` is always the full list, most-recent-first, so
    ``comment_count`` can be checked against it on construction.
    """

    id: str
    title: str
    excerpt: str = ""
    raw_body: str
    author: Author
    published_at: date
    category: Category
    read_time: str = ""
    image_ref: str = ""
    status: Literal["published", "draft"] = "published"
    like_count: int = Field(0, ge=0)
    liked_by_current_viewer: bool = False
    comment_count: int = Field(0, ge=0)
    comments: List[Comment] = Field(default_factory=list)
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_counters(self) -> "Article":
        if self.comment_count != len(self.comments):
            raise ValueError(
                f"comment_count={self.comment_count} does not match "
                f"{len(self.comments)} loaded comment(s)"
            )
        if self.liked_by_current_viewer and self.like_count < 1:
            raise ValueError("a liked article must have like_count >= 1")
        return self

    @property
    def blocks(self) -> list[ContentBlock]:
        """Parsed content blocks for ``raw_body``."""
        return parse(self.raw_body)

    @property
    def is_published(self) -> bool:
        return self.status == "published"

    def summary(self) -> ArticleSummary:
        return ArticleSummary(
            id=self.id,
            title=self.title,
            excerpt=self.excerpt,
            author=self.author,
            published_at=self.published_at,
            category=self.category,
            read_time=self.read_time,
            image_ref=self.image_ref,
            like_count=self.like_count,
            comment_count=self.comment_count,
            status=self.status,
        )

