"""Read access to persisted tag records."""
import asyncio
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.tag import Tag
from schemas.tag import TagRead
from services.errors import StorageError

logger = logging.getLogger(__name__)


class TagRepository:
    """
    Resolve tag names against the tag store.

    `find_by_name` has three outcomes: a tag, `None` when no record matches,
    or `StorageError` when the store itself fails.
    """

    def __init__(self, session: AsyncSession, timeout: float) -> None:
        self._session = session
        self._timeout = timeout

    async def find_by_name(self, name: str) -> TagRead | None:
        """Return the tag whose name equals `name` exactly, or None."""
        query = select(Tag).where(Tag.name == name)
        try:
            async with asyncio.timeout(self._timeout):
                result = await self._session.execute(query)
            tag = result.scalar_one_or_none()
        except TimeoutError as e:
            logger.warning("Tag lookup for %r timed out after %ss", name, self._timeout)
            raise StorageError(f"Tag lookup timed out after {self._timeout}s") from e
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(str(e)) from e

        if tag is None:
            return None
        return TagRead.model_validate(tag)
