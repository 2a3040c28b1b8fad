from fastapi import APIRouter, Depends, HTTPException, Query, Response

from app.dependencies import Viewer, get_viewer
from app.loader import ArticleLoader, LoadStatus
from app.models import Article, Author
from app.repository import ArticleRepository, get_repository
from app.schemas import (
    ArticleCreate,
    ArticleDetail,
    ArticleListResponse,
    ArticlePreview,
    CommentCreate,
    PreviewResponse,
)
from app.services import article_service, comment_service, listing_service

router = APIRouter(prefix="/api/v1/articles", tags=["articles"])


def _get_or_404(repo: ArticleRepository, article_id: str, viewer: Viewer) -> Article:
    article = repo.get(article_id)
    if article is None or not article_service.is_visible_to(article, viewer.name):
        raise HTTPException(status_code=404, detail="Article not found")
    return article


@router.get("", response_model=ArticleListResponse)
async def list_articles(
    search: str = Query("", description="Case-insensitive text matched against title and excerpt."),
    category: str = Query(listing_service.ALL_CATEGORIES, description="Category name, or 'All'."),
    repo: ArticleRepository = Depends(get_repository),
):
    if category not in listing_service.CATEGORY_CHOICES:
        raise HTTPException(status_code=422, detail=f"Unknown category: {category}")
    items = listing_service.filter_articles(repo.list_summaries(), search, category)
    return ArticleListResponse(items=items, total=len(items), search=search, category=category)

@router.get("/drafts", response_model=ArticleListResponse)
async def list_drafts(
    viewer: Viewer = Depends(get_viewer),
    repo: ArticleRepository = Depends(get_repository),
):
    """The signed-in viewer's own unpublished articles."""
    if not viewer.is_authenticated:
        raise HTTPException(status_code=401, detail="Sign in to see your drafts")
    items = [
        s for s in repo.list_summaries(include_drafts=True, author_name=viewer.name)
        if s.status == "draft"
    ]
    return ArticleListResponse(
        items=items, total=len(items), search="", category=listing_service.ALL_CATEGORIES
    )

@router.post("/preview", response_model=PreviewResponse)
async def preview_article(data: ArticlePreview):
    return PreviewResponse.from_blocks(article_service.preview(data.content))

@router.get("/{article_id}", response_model=ArticleDetail)
async def get_article(
    article_id: str,
    viewer: Viewer = Depends(get_viewer),
    repo: ArticleRepository = Depends(get_repository),
):
    async def fetch_visible(requested_id: str):
        # Someone else's draft loads as not_found.
        article = await repo.fetch(requested_id)
        if article is not None and article_service.is_visible_to(article, viewer.name):
            return article
        return None

    loader = ArticleLoader(fetch_visible)
    view = await loader.navigate(article_id)
    if view.status is LoadStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Article not found")
    return ArticleDetail.from_article(view.article)

@router.post("", status_code=201, response_model=ArticleDetail)
async def create_article(
    data: ArticleCreate,
    viewer: Viewer = Depends(get_viewer),
    repo: ArticleRepository = Depends(get_repository),
):
    article = article_service.create_draft(
        data,
        Author(name=viewer.name or "", avatar_ref=viewer.avatar_ref),
        viewer.is_authenticated,
        repo.next_id(),
    )
    if article is None:
        raise HTTPException(status_code=401, detail="Sign in to write an article")
    repo.add(article)
    return ArticleDetail.from_article(article)

@router.post("/{article_id}/like", response_model=ArticleDetail)
async def toggle_like(
    article_id: str,
    viewer: Viewer = Depends(get_viewer),
    repo: ArticleRepository = Depends(get_repository),
):
    article = _get_or_404(repo, article_id, viewer)
    updated = article_service.toggle_like(article, viewer.is_authenticated)
    if updated is not article:
        repo.save(updated)
    return ArticleDetail.from_article(updated)

@router.post("/{article_id}/comments", status_code=201, response_model=ArticleDetail)
async def add_comment(
    article_id: str,
    data: CommentCreate,
    response: Response,
    viewer: Viewer = Depends(get_viewer),
    repo: ArticleRepository = Depends(get_repository),
):
    article = _get_or_404(repo, article_id, viewer)
    updated = comment_service.add_comment(
        article,
        viewer.name or "",
        viewer.avatar_ref,
        data.body,
        viewer.is_authenticated,
    )
    if updated is article:
        # Rejected: nothing was created, hand back the unchanged article.
        response.status_code = 200
    else:
        repo.save(updated)
    return ArticleDetail.from_article(updated)
