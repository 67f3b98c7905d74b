"""Question model. Questions are written elsewhere; this service only reads them."""
from typing import TYPE_CHECKING

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base
from models.tag import question_tags

if TYPE_CHECKING:
    from models.tag import Tag


class Question(Base):
    """Question model - carries the tag references counted by the catalog."""

    __tablename__ = "questions"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    text: Mapped[str] = mapped_column(Text, default="")

    tags: Mapped[list["Tag"]] = relationship(
        secondary=question_tags,
        back_populates="questions",
    )
