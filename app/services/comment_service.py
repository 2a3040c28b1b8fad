"""
Comment service: append-only comment creation for the Article aggregate.

Comments cannot be edited or deleted.  A new comment goes to the head of
the list (most-recent-first) and ``comment_count`` moves up by exactly
one in the same step, so the count always equals the number of loaded
comments.

This is the optimistic half of a server round trip: the comment is
visible immediately under a locally generated id.  ``confirm_comment``
swaps that id for a server-assigned one later without moving anything.
"""
import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable, Optional

from app.models import Article, Comment

logger = logging.getLogger(__name__)


class CommentIdGenerator:
    """
    Millisecond-clock id source whose values strictly increase.

    Two comments created in the same millisecond still get distinct,
    ordered ids: the second one is bumped past the first.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            now_ms = int(self._clock() * 1000)
            self._last = max(now_ms, self._last + 1)
            return str(self._last)


# Module-level default shared by every caller that does not bring its own.
next_comment_id = CommentIdGenerator()


def add_comment(
    article: Optional[Article],
    author_name: str,
    author_avatar_ref: str,
    body: str,
    viewer_is_authenticated: bool,
    *,
    now: Optional[datetime] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> Optional[Article]:
    """
    Prepend a new comment to *article* and bump its ``comment_count``.

    Returns *article* unchanged when the viewer is not signed in, there is
    no article, or *body* is blank once trimmed.  The stored body is the
    text as submitted.
    """
    if article is None or not viewer_is_authenticated or not body.strip():
        logger.debug("add_comment rejected (article=%s, authenticated=%s)",
                     article.id if article else None, viewer_is_authenticated)
        return article

    comment = Comment(
        id=(id_factory or next_comment_id)(),
        author_name=author_name,
        author_avatar_ref=author_avatar_ref,
        body=body,
        created_at=now or datetime.now(timezone.utc),
    )
    return article.model_copy(
        update={
            "comments": [comment, *article.comments],
            "comment_count": article.comment_count + 1,
        }
    )


def confirm_comment(article: Article, provisional_id: str, confirmed_id: str) -> Article:
    """
    Replace a locally generated comment id with the server-confirmed one.

    Not used by the HTTP API, which is its own source of ids.  Clients that
    mirror articles locally and post comments to a remote backend call it
    once the backend answers.

    The comment keeps its position.  Returns *article* unchanged when no
    comment carries *provisional_id*.
    """
    comments = list(article.comments)
    for index, comment in enumerate(comments):
        if comment.id == provisional_id:
            comments[index] = comment.model_copy(update={"id": confirmed_id})
            return article.model_copy(update={"comments": comments})
    logger.debug("confirm_comment: no comment %s on article %s", provisional_id, article.id)
    return article
