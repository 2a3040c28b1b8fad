from fastapi import APIRouter, Depends
from app.repository import ArticleRepository, get_repository
from app.schemas import MetricsResponse

router = APIRouter(prefix="/api/v1/metrics", tags=["metrics"])

@router.get("", response_model=MetricsResponse)
async def get_metrics(repo: ArticleRepository = Depends(get_repository)):
    return MetricsResponse(**repo.stats())
