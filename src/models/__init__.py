"""SQLAlchemy models."""
from models.base import Base
from models.question import Question
from models.tag import Tag, question_tags

__all__ = ["Base", "Question", "Tag", "question_tags"]
