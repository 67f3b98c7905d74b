"""Question counts per tag, computed from question/tag associations."""
import asyncio
from collections.abc import Collection
from typing import Protocol

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from models.tag import Tag, question_tags
from services.errors import StorageError


class QuestionCountSource(Protocol):
    """Anything that can count questions per tag."""

    async def count_by_tag(
        self, names: Collection[str] | None = None,
    ) -> list[tuple[str, int]]: ...


class SqlQuestionCountSource:
    """Count questions per tag with a single grouped query."""

    def __init__(self, session: AsyncSession, timeout: float) -> None:
        self._session = session
        self._timeout = timeout

    async def count_by_tag(
        self, names: Collection[str] | None = None,
    ) -> list[tuple[str, int]]:
        """
        Return (tag name, question count) for every tag referenced by a question.

        Tags no question references are omitted. Rows come back in tag id
        order, i.e. the order tags were added to the store. When `names` is
        given only those tags are counted.
        """
        # Inner join drops unreferenced tags
        query = (
            select(Tag.name, func.count(question_tags.c.question_id).label("qcnt"))
            .join(question_tags, question_tags.c.tag_id == Tag.id)
            .group_by(Tag.id, Tag.name)
            .order_by(Tag.id)
        )
        if names is not None:
            query = query.where(Tag.name.in_(list(names)))

        try:
            async with asyncio.timeout(self._timeout):
                result = await self._session.execute(query)
            rows = result.all()
        except TimeoutError as e:
            raise StorageError(f"Tag count query timed out after {self._timeout}s") from e
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(str(e)) from e

        return [(row.name, row.qcnt) for row in rows]
