"""
Article retrieval state machine.

    idle -> loading -> loaded | not_found

Each call to ``ArticleLoader.navigate`` enters ``loading`` for one
article id and starts a one-shot fetch.  When the fetch completes its
result is applied only if that navigation is still the current one, so
a slow fetch for an article the viewer has already left cannot
overwrite the view of the article they moved to.

There is no separate error state: a missing article and a failed fetch
both end in ``not_found``.
"""
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from app.models import Article

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[Optional[Article]]]
Listener = Callable[["ArticleView"], None]


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ArticleView:
    status: LoadStatus = LoadStatus.IDLE
    article_id: Optional[str] = None
    article: Optional[Article] = None


class ArticleLoader:
    """Owns the view state for one article screen."""

    def __init__(self, fetch: Fetcher) -> None:
        self._fetch = fetch
        self._view = ArticleView()
        self._generation = 0
        self._listeners: list[Listener] = []

    @property
    def view(self) -> ArticleView:
        return self._view

    def subscribe(self, listener: Listener) -> None:
        """Call *listener* with every new view from now on."""
        self._listeners.append(listener)

    def navigate(self, article_id: str) -> "asyncio.Task[ArticleView]":
        """
        Start loading *article_id* and return the pending fetch task.

        The view switches to ``loading`` before this returns.  Must be
        called from a running event loop.
        """
        self._generation += 1
        generation = self._generation
        self._set_view(ArticleView(LoadStatus.LOADING, article_id))
        return asyncio.get_running_loop().create_task(self._load(article_id, generation))

    def apply(self, article: Optional[Article]) -> ArticleView:
        """
        Replace the loaded article with a mutated snapshot of it.

        Ignored unless the view is ``loaded`` with the same article id.
        """
        view = self._view
        if (
            article is None
            or view.status is not LoadStatus.LOADED
            or view.article_id != article.id
        ):
            return view
        if article is not view.article:
            self._set_view(ArticleView(LoadStatus.LOADED, article.id, article))
        return self._view

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _is_current(self, article_id: str, generation: int) -> bool:
        return generation == self._generation and self._view.article_id == article_id

    async def _load(self, article_id: str, generation: int) -> ArticleView:
        try:
            article = await self._fetch(article_id)
        except Exception as exc:
            logger.warning("Fetch for article %s failed: %s", article_id, exc)
            article = None

        if not self._is_current(article_id, generation):
            logger.debug("Discarding stale fetch result for article %s", article_id)
            return self._view

        if article is None:
            self._set_view(ArticleView(LoadStatus.NOT_FOUND, article_id))
        else:
            self._set_view(ArticleView(LoadStatus.LOADED, article_id, article))
        return self._view

    def _set_view(self, view: ArticleView) -> None:
        self._view = view
        for listener in self._listeners:
            listener(view)
