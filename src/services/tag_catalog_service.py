"""Service layer for the tag catalog: tag counts and single-tag lookup."""
import logging

from schemas.tag import TagCount, TagCountMap, TagRead
from services.errors import (
    NO_ELEMENT_FOUND,
    AggregationError,
    StorageError,
    TagError,
    TagErrorKind,
)
from services.question_counts import QuestionCountSource
from services.tag_repository import TagRepository

logger = logging.getLogger(__name__)


class TagCatalogService:
    """Read-only operations over tags and the questions that reference them."""

    def __init__(
        self,
        repository: TagRepository,
        question_counts: QuestionCountSource,
    ) -> None:
        self._repository = repository
        self._question_counts = question_counts

    async def get_tag_count_map(self) -> TagCountMap:
        """
        Map each tag referenced by at least one question to its question count.

        Raises AggregationError if the store fails or the counts it returns are
        not well-formed (bad names, negative or non-integer counts, duplicates).
        """
        try:
            rows = await self._question_counts.count_by_tag()
        except StorageError as e:
            raise AggregationError(str(e)) from e

        try:
            pairs = [(name, qcnt) for name, qcnt in rows]
        except (TypeError, ValueError) as e:
            raise AggregationError("Tag counts are not (name, count) pairs") from e

        tag_count_map: TagCountMap = {}
        for name, qcnt in pairs:
            if not isinstance(name, str) or not name:
                raise AggregationError(f"Invalid tag name in tag counts: {name!r}")
            # bool is an int subclass
            if isinstance(qcnt, bool) or not isinstance(qcnt, int) or qcnt < 0:
                raise AggregationError(f"Invalid question count for tag {name!r}: {qcnt!r}")
            if name in tag_count_map:
                raise AggregationError(f"Duplicate tag in tag counts: {name!r}")
            tag_count_map[name] = TagCount(name=name, qcnt=qcnt)
        return tag_count_map

    async def get_tag_by_name(self, name: str) -> TagRead:
        """Return the tag named exactly `name`."""
        if not name:
            raise TagError(TagErrorKind.INVALID_INPUT, "Tag name is required")

        try:
            tag = await self._repository.find_by_name(name)
        except StorageError as e:
            raise TagError(TagErrorKind.LOOKUP_ERROR, str(e)) from e

        if tag is None:
            raise TagError(TagErrorKind.NOT_FOUND, NO_ELEMENT_FOUND)
        if not tag.name:
            # A stored record with a blank name is corrupt, not absent
            logger.error("Tag record matched %r but has an empty name", name)
            raise TagError(TagErrorKind.LOOKUP_ERROR, "Tag record has an empty name")
        return tag
