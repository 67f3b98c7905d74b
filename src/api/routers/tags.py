"""Tag catalog endpoints."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from api.dependencies import get_tag_catalog_service
from schemas.tag import TagCount, TagRead
from services.errors import AggregationError, TagError, TagErrorKind
from services.tag_catalog_service import TagCatalogService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tag", tags=["tags"])


@router.get(
    "/getTagsWithQuestionNumber",
    response_model=list[TagCount],
    responses={500: {"description": "Tag counts could not be computed"}},
)
async def get_tags_with_question_number(
    service: TagCatalogService = Depends(get_tag_catalog_service),
) -> list[TagCount] | PlainTextResponse:
    """
    Get every tag referenced by a question with its question count.

    Tags appear in the order they were discovered during aggregation.
    """
    try:
        tag_count_map = await service.get_tag_count_map()
    except AggregationError as e:
        logger.exception("Failed to compute tag count map")
        return PlainTextResponse(
            f"Error when fetching tag count map: {e}", status_code=500,
        )
    return list(tag_count_map.values())


@router.get(
    "/getTagByName/{tag_name}",
    response_model=TagRead,
    responses={
        400: {"description": "Tag name is empty"},
        404: {"description": "No tag with this name"},
        500: {"description": "Tag lookup failed"},
    },
)
async def get_tag_by_name(
    tag_name: str,
    service: TagCatalogService = Depends(get_tag_catalog_service),
) -> TagRead | PlainTextResponse:
    """Get a single tag by exact (case-sensitive) name."""
    try:
        return await service.get_tag_by_name(tag_name)
    except TagError as e:
        if e.kind is TagErrorKind.INVALID_INPUT:
            return PlainTextResponse("Tag name is required", status_code=400)
        if e.kind is TagErrorKind.NOT_FOUND:
            return PlainTextResponse(
                f'Tag with name "{tag_name}" not found', status_code=404,
            )
        # Cause stays in the log; the response carries a fixed message
        logger.error("Lookup of tag %r failed: %s", tag_name, e.message)
        return PlainTextResponse(
            "Error when fetching tag: Error fetching tag", status_code=500,
        )


@router.get("/getTagByName/", response_model=None, include_in_schema=False)
async def get_tag_by_empty_name(
    service: TagCatalogService = Depends(get_tag_catalog_service),
) -> TagRead | PlainTextResponse:
    """Route the empty path parameter through the same lookup so it gets a 400."""
    return await get_tag_by_name("", service)
