"""
In-memory article repository.

Stands in for a backend: articles live in a dict for the life of the
process and nothing is written anywhere.  ``fetch`` sleeps for
``settings.FETCH_DELAY_SECONDS`` to simulate network latency, which is
what drives the loading state in ``app.loader``.
"""
import asyncio
import itertools
import logging
from datetime import date, datetime, timezone
from typing import Optional

from app.config import settings
from app.models import Article, ArticleSummary, Author, Category, Comment

logger = logging.getLogger(__name__)


class ArticleRepository:
    def __init__(self, delay: Optional[float] = None) -> None:
        self._articles: dict[str, Article] = {}
        self._delay = delay
        self._ids = itertools.count(1)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def fetch(self, article_id: str) -> Optional[Article]:
        """Return the article for *article_id* after the simulated delay, or None."""
        delay = settings.FETCH_DELAY_SECONDS if self._delay is None else self._delay
        if delay > 0:
            await asyncio.sleep(delay)
        return self._articles.get(article_id)

    def get(self, article_id: str) -> Optional[Article]:
        return self._articles.get(article_id)

    def list_summaries(
        self, include_drafts: bool = False, author_name: Optional[str] = None
    ) -> list[ArticleSummary]:
        """
        Return article summaries, newest ``published_at`` first.

        Drafts are left out unless *include_drafts* is set.  *author_name*
        narrows the result to one author's articles.
        """
        articles = [
            a for a in self._articles.values()
            if (include_drafts or a.is_published)
            and (author_name is None or a.author.name == author_name)
        ]
        articles.sort(key=lambda a: a.published_at, reverse=True)
        return [a.summary() for a in articles]

    def stats(self) -> dict:
        articles = list(self._articles.values())
        published = [a for a in articles if a.is_published]
        total_comments = sum(a.comment_count for a in published)
        return {
            "published_articles": len(published),
            "draft_articles": len(articles) - len(published),
            "total_likes": sum(a.like_count for a in published),
            "total_comments": total_comments,
            "avg_comments_per_article": (
                round(total_comments / len(published), 2) if published else 0.0
            ),
        }

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def next_id(self) -> str:
        while True:
            candidate = str(next(self._ids))
            if candidate not in self._articles:
                return candidate

    def add(self, article: Article) -> Article:
        if article.id in self._articles:
            raise ValueError(f"Article {article.id} already exists")
        self._articles[article.id] = article
        return article

    def save(self, article: Article) -> Article:
        """Replace the stored snapshot for ``article.id``."""
        self._articles[article.id] = article
        return article

    def clear(self) -> None:
        self._articles.clear()
        self._ids = itertools.count(1)

    def seed(self) -> None:
        """Load the sample catalogue, replacing anything already stored."""
        self.clear()
        for article in _sample_articles():
            self.add(article)
        logger.info("Seeded %d article(s)", len(self._articles))


# ---------------------------------------------------------------------------
# Sample catalogue
# ---------------------------------------------------------------------------

_PEXELS = "https://images.pexels.com/photos/{0}/pexels-photo-{0}.jpeg?auto=compress&cs=tinysrgb&w={1}&h={2}&fit=crop"

_WEB_DEV_BODY = """Web development continues to evolve at a rapid pace, and 2025 promises to bring exciting new trends and technologies that will reshape how we build and interact with web applications.

## The Rise of AI-Powered Development

Artificial Intelligence is no longer just a buzzword in web development. In 2025, we're seeing AI tools become integral to the development process, from code generation to automated testing and optimization.

### Key AI Developments:

- **Code Completion and Generation**: Tools like GitHub Copilot have evolved to provide more context-aware suggestions
- **Automated Testing**: AI-driven testing frameworks that can predict potential bugs and write comprehensive test suites
- **Performance Optimization**: Machine learning algorithms that analyze user behavior to optimize site performance in real-time

## Serverless Architecture Maturation

Serverless computing has moved beyond the hype phase and is now a mature, production-ready approach for building scalable applications.

### Benefits of Serverless in 2025:

1. **Cost Efficiency**: Pay only for what you use, reducing operational costs
2. **Scalability**: Automatic scaling based on demand
3. **Developer Productivity**: Focus on code rather than infrastructure management

## Conclusion

The future of web development is bright, with these trends pointing toward more intelligent, efficient, and user-centric applications.

What excites you most about the future of web development? Share your thoughts in the comments below!"""


def _comment(author: str, photo: int, body: str, created_at: datetime) -> Comment:
    return Comment(
        id=str(int(created_at.timestamp() * 1000)),
        author_name=author,
        author_avatar_ref=_PEXELS.format(photo, 50, 50),
        body=body,
        created_at=created_at,
    )


def _sample_articles() -> list[Article]:
    web_dev_comments = [
        _comment(
            "Alex Rivera", 1040880,
            "Web3 integration is still a bit unclear to me. Do you have any "
            "recommendations for getting started with practical Web3 applications?",
            datetime(2025, 1, 8, 16, 45, tzinfo=timezone.utc),
        ),
        _comment(
            "Emma Davis", 614810,
            "The serverless section was particularly helpful. We're considering "
            "migrating our current architecture and this gives me confidence in the decision.",
            datetime(2025, 1, 8, 14, 15, tzinfo=timezone.utc),
        ),
        _comment(
            "Mike Johnson", 1043471,
            "Great insights! The AI-powered development tools have already changed "
            "how I work. Excited to see what 2025 brings.",
            datetime(2025, 1, 8, 10, 30, tzinfo=timezone.utc),
        ),
    ]
    return [
        Article(
            id="1",
            title="The Future of Web Development: Trends to Watch in 2025",
            excerpt="Explore the latest trends shaping the future of web development, "
                    "from AI integration to serverless architectures.",
            raw_body=_WEB_DEV_BODY,
            author=Author(name="Sarah Chen", avatar_ref=_PEXELS.format(762020, 100, 100)),
            published_at=date(2025, 1, 8),
            category=Category.TECHNOLOGY,
            read_time="8 min read",
            image_ref=_PEXELS.format(546819, 1200, 600),
            like_count=24,
            comment_count=len(web_dev_comments),
            comments=web_dev_comments,
        ),
        Article(
            id="2",
            title="Designing for Accessibility: A Complete Guide",
            excerpt="Learn how to create inclusive designs that work for everyone, "
                    "regardless of their abilities.",
            raw_body="Accessible design starts with empathy.\n\n## Start with contrast\n\n"
                     "- Check colour contrast ratios\n- Never rely on colour alone",
            author=Author(name="Mike Rodriguez", avatar_ref=_PEXELS.format(1043471, 100, 100)),
            published_at=date(2025, 1, 7),
            category=Category.DESIGN,
            read_time="8 min read",
            image_ref=_PEXELS.format(196644, 800, 400),
            like_count=32,
        ),
        Article(
            id="3",
            title="Building a Successful Remote Team Culture",
            excerpt="Discover strategies for fostering collaboration and maintaining "
                    "company culture in remote work environments.",
            raw_body="Remote culture is built on purpose, not proximity.\n\n"
                     "1. Write things down\n2. Default to async\n3. Meet in person now and then",
            author=Author(name="Emma Thompson", avatar_ref=_PEXELS.format(614810, 100, 100)),
            published_at=date(2025, 1, 6),
            category=Category.BUSINESS,
            read_time="6 min read",
            image_ref=_PEXELS.format(3184292, 800, 400),
            like_count=18,
        ),
        Article(
            id="4",
            title="Minimalist Living: Finding Joy in Less",
            excerpt="Explore how embracing minimalism can lead to a more fulfilling "
                    "and intentional lifestyle.",
            raw_body="Owning less leaves room for more.\n\n### Where to begin\n\n"
                     "Pick one drawer and empty it.",
            author=Author(name="David Park", avatar_ref=_PEXELS.format(1040880, 100, 100)),
            published_at=date(2025, 1, 5),
            category=Category.LIFESTYLE,
            read_time="4 min read",
            image_ref=_PEXELS.format(1571460, 800, 400),
            like_count=45,
        ),
        Article(
            id="5",
            title="Hidden Gems: Exploring Off-the-Beaten-Path Destinations",
            excerpt="Discover incredible travel destinations that offer authentic "
                    "experiences away from crowded tourist spots.",
            raw_body="The best trips are rarely on the front page.\n\n"
                     "- Travel shoulder season\n- Stay longer in fewer places",
            author=Author(name="Lisa Wang", avatar_ref=_PEXELS.format(733872, 100, 100)),
            published_at=date(2025, 1, 4),
            category=Category.TRAVEL,
            read_time="7 min read",
            image_ref=_PEXELS.format(346529, 800, 400),
            like_count=38,
        ),
    ]


# Module-level singleton shared across all request handlers.
repository = ArticleRepository()


def get_repository() -> ArticleRepository:
    return repository
