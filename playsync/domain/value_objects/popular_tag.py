"""PopularTag value object."""

from pydantic import BaseModel, Field, field_validator


class PopularTag(BaseModel):
    """A game tag together with its number of occurrences."""

    tag: str = Field(..., min_length=1, description="Tag name")
    count: int = Field(..., ge=1, description="Number of occurrences of the tag")

    model_config = {"frozen": True}

    @field_validator("tag")
    @classmethod
    def validate_tag(cls, v: str) -> str:
        """Reject blank tags."""
        if not v.strip():
            raise ValueError("Tag cannot be blank")
        return v
