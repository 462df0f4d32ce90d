"""Website metadata extraction endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status

from rankpulse.application.schemas import (
    MetadataExtractRequest,
    MetadataExtractResponse,
    WebsiteMetadataSchema,
)
from rankpulse.application.services import WebsiteMetadataService
from rankpulse.domain.exceptions import MetadataFetchError, ValidationError
from rankpulse.infrastructure.dependencies import get_website_metadata_service

router = APIRouter(prefix="/metadata", tags=["Metadata"])


@router.post("/extract", response_model=MetadataExtractResponse)
async def extract_metadata(
    data: MetadataExtractRequest,
    service: WebsiteMetadataService = Depends(get_website_metadata_service),
) -> MetadataExtractResponse:
    """Fetch a website server-side and extract its title, description, language and favicon."""
    try:
        metadata = await service.extract(data.url)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except MetadataFetchError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "Failed to extract metadata", "details": e.message},
        )
    return MetadataExtractResponse(
        metadata=WebsiteMetadataSchema.model_validate(metadata, from_attributes=True)
    )
