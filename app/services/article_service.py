"""
Article service: like toggling and authoring for the Article aggregate.

Design notes
------------
- Articles are immutable snapshots.  Every operation here returns a new
  Article built with ``model_copy(update=...)``; the input is never
  modified, so a rejected operation can simply hand it back.
- ``like_count`` and ``liked_by_current_viewer`` only ever change
  together, by exactly one step.  Starting from a validated Article (a
  liked article has ``like_count >= 1``) the count can never go below
  zero, so no clamping is applied.
- The viewer's sign-in state is always an explicit argument.  Nothing in
  this module reads ambient request or user state.
"""
import logging
import math
from datetime import date
from typing import Optional

from app.content import ContentBlock, parse
from app.models import Article, Author
from app.schemas import ArticleCreate

logger = logging.getLogger(__name__)

_WORDS_PER_MINUTE = 200


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def estimate_read_time(raw_body: str) -> str:
    """Return a display string such as ``"5 min read"`` for *raw_body*."""
    words = len(raw_body.split())
    return f"{max(1, math.ceil(words / _WORDS_PER_MINUTE))} min read"


# ---------------------------------------------------------------------------
# Public service functions
# ---------------------------------------------------------------------------

def toggle_like(article: Optional[Article], viewer_is_authenticated: bool) -> Optional[Article]:
    """
    Flip the viewer's like on *article* and move ``like_count`` with it.

    Returns *article* unchanged when the viewer is not signed in or there
    is no article.  Each successful call flips the state again; this is a
    toggle, not a set.
    """
    if article is None or not viewer_is_authenticated:
        logger.debug("toggle_like rejected (article=%s, authenticated=%s)",
                     article.id if article else None, viewer_is_authenticated)
        return article

    liked = not article.liked_by_current_viewer
    return article.model_copy(
        update={
            "liked_by_current_viewer": liked,
            "like_count": article.like_count + (1 if liked else -1),
        }
    )


def is_visible_to(article: Article, viewer_name: Optional[str]) -> bool:
    """
    Return True when *viewer_name* may see *article*.

    Published articles are public.  A draft is visible only to its author.
    """
    if article.is_published:
        return True
    return bool(viewer_name) and article.author.name == viewer_name


def create_draft(
    data: ArticleCreate,
    author: Author,
    viewer_is_authenticated: bool,
    article_id: str,
) -> Optional[Article]:
    """
    Build a new Article from the authoring form.

    Returns None when the viewer is not signed in.  New articles start
    with no likes and no comments.  ``publish_date`` defaults to today.
    """
    if not viewer_is_authenticated:
        logger.debug("create_draft rejected: viewer not authenticated")
        return None

    article = Article(
        id=article_id,
        title=data.title,
        excerpt=data.excerpt,
        raw_body=data.content,
        author=author,
        published_at=data.publish_date or date.today(),
        category=data.category,
        read_time=estimate_read_time(data.content),
        image_ref=data.image_ref,
        status="published" if data.publish else "draft",
    )
    logger.info("Created %s article %s by %s", article.status, article.id, author.name)
    return article


def preview(content: str) -> list[ContentBlock]:
    """Return the blocks *content* would render as, without creating anything."""
    return parse(content)
