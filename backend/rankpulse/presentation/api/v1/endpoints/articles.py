"""Article endpoints — bulk insert, month-scoped export/delete and inspection."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse

from rankpulse.application.schemas import (
    ArticleBulkCreate,
    ArticleBulkCreateResponse,
    ArticleColumnsResponse,
    ArticleRangeDeleteResponse,
    ArticleResponse,
    FeaturedImageResponse,
    LatestArticleSummary,
)
from rankpulse.application.services import ArticleService, RangeScopedMutator
from rankpulse.domain.exceptions import EntityNotFoundError, StoreError, ValidationError
from rankpulse.infrastructure.dependencies import (
    get_article_service,
    get_range_scoped_mutator,
)

router = APIRouter(prefix="/articles", tags=["Articles"])

_MONTH_DESCRIPTION = "Zero-indexed month (0 = January, 11 = December)"


@router.post("", response_model=ArticleBulkCreateResponse, status_code=status.HTTP_201_CREATED)
async def create_articles(
    data: ArticleBulkCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleBulkCreateResponse:
    """Bulk-insert a list of candidate articles."""
    try:
        articles = await service.create_articles(
            data.articles, capitalize_titles=data.capitalize_titles
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message or "Failed to create articles",
        )
    return ArticleBulkCreateResponse(
        articles=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles]
    )


@router.get("", response_model=list[ArticleResponse])
async def list_articles_in_month(
    project_id: str | None = Query(None, alias="projectId"),
    month: str | None = Query(None, description=_MONTH_DESCRIPTION),
    year: str | None = Query(None),
    mutator: RangeScopedMutator = Depends(get_range_scoped_mutator),
) -> list[ArticleResponse]:
    """List a project's articles scheduled in the given month."""
    try:
        articles = await mutator.list_articles_in_month(project_id, month, year)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message or "Failed to list articles",
        )
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.delete("/delete", response_model=ArticleRangeDeleteResponse)
async def delete_articles_in_month(
    project_id: str | None = Query(None, alias="projectId"),
    month: str | None = Query(None, description=_MONTH_DESCRIPTION),
    year: str | None = Query(None),
    mutator: RangeScopedMutator = Depends(get_range_scoped_mutator),
) -> ArticleRangeDeleteResponse:
    """Permanently delete a project's articles scheduled in the given month."""
    try:
        deleted = await mutator.delete_articles_in_month(project_id, month, year)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message or "Failed to delete articles",
        )
    return ArticleRangeDeleteResponse(deleted=deleted)


@router.get("/columns", response_model=ArticleColumnsResponse)
async def inspect_article_columns(
    project_id: str | None = Query(None, alias="projectId"),
    service: ArticleService = Depends(get_article_service),
):
    """Show the latest article with its raw row and the table's column names."""
    try:
        article, row = await service.inspect_latest_columns(project_id)
    except EntityNotFoundError as e:
        return JSONResponse(content={"success": False, "error": str(e)})
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"success": False, "error": e.message},
        )
    return ArticleColumnsResponse(
        article=LatestArticleSummary.model_validate(article, from_attributes=True),
        raw_data=row,
        columns=list(row.keys()),
    )


@router.get("/featured-image", response_model=FeaturedImageResponse)
async def check_featured_image(
    project_id: str | None = Query(None, alias="projectId"),
    service: ArticleService = Depends(get_article_service),
) -> FeaturedImageResponse:
    """Report whether the latest article has a featured image."""
    try:
        article = await service.get_latest_article(project_id)
    except EntityNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"success": False, "error": str(e)},
        )
    except StoreError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"success": False, "error": e.message},
        )
    return FeaturedImageResponse(
        article=LatestArticleSummary.model_validate(article, from_attributes=True),
        has_featured_image=article.has_featured_image,
    )
