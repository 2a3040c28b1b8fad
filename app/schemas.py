from datetime import date

from pydantic import BaseModel, Field, field_validator

from app.content import ContentBlock, Section, group_lists
from app.models import Article, ArticleSummary, Category


# --- Comment ---

class CommentCreate(BaseModel):
    body: str = Field(max_length=5000)


# --- Article ---

class ArticleCreate(BaseModel):
    title: str = Field(max_length=200)
    excerpt: str = Field("", max_length=500)
    content: str
    category: Category = Category.TECHNOLOGY
    image_ref: str = ""
    publish_date: date | None = None
    publish: bool = False

    @field_validator("title", "content")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class ArticlePreview(BaseModel):
    content: str


class ArticleDetail(BaseModel):
    article: Article
    blocks: list[ContentBlock] = []
    sections: list[Section] = []

    @classmethod
    def from_article(cls, article: Article) -> "ArticleDetail":
        blocks = article.blocks
        return cls(article=article, blocks=blocks, sections=group_lists(blocks))


class ArticleListResponse(BaseModel):
    items: list[ArticleSummary]
    total: int
    search: str
    category: str


class PreviewResponse(BaseModel):
    blocks: list[ContentBlock] = []
    sections: list[Section] = []

    @classmethod
    def from_blocks(cls, blocks: list[ContentBlock]) -> "PreviewResponse":
        return cls(blocks=blocks, sections=group_lists(blocks))


# --- Metrics ---

class MetricsResponse(BaseModel):
    published_articles: int
    draft_articles: int
    total_likes: int
    total_comments: int
    avg_comments_per_article: float
