"""Pydantic schemas for tag endpoints."""
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TagRead(BaseModel):
    """Schema for a single tag record."""

    model_config = ConfigDict(from_attributes=True)

    name: str
    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: str | None) -> str:
        """Stored tags may carry no description; render it as empty."""
        if v is None:
            return ""
        return v


class TagCount(BaseModel):
    """Schema for a tag with the number of questions referencing it."""

    name: str
    qcnt: int = Field(ge=0)


# Tag name -> count, in the order tags were discovered during aggregation
TagCountMap = dict[str, TagCount]
