"""FastAPI dependencies for injection."""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from db.session import get_async_session
from services.question_counts import QuestionCountSource, SqlQuestionCountSource
from services.tag_catalog_service import TagCatalogService
from services.tag_repository import TagRepository


def get_tag_repository(
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> TagRepository:
    """Tag repository bound to the request's session."""
    return TagRepository(db, timeout=settings.query_timeout_seconds)


def get_question_count_source(
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> QuestionCountSource:
    """Question count source bound to the request's session."""
    return SqlQuestionCountSource(db, timeout=settings.query_timeout_seconds)


def get_tag_catalog_service(
    repository: TagRepository = Depends(get_tag_repository),
    question_counts: QuestionCountSource = Depends(get_question_count_source),
) -> TagCatalogService:
    """Tag catalog service wired to the request's repository and count source."""
    return TagCatalogService(repository, question_counts)


__all__ = [
    "get_async_session",
    "get_question_count_source",
    "get_tag_catalog_service",
    "get_tag_repository",
]
