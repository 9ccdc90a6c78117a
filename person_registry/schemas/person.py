"""Schemas for person forms and views."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

ID_MAX_LENGTH = 30
NAME_MAX_LENGTH = 50


class PersonIn(BaseModel):
    """Person fields submitted through the save/update forms."""

    id: str = Field(min_length=1, max_length=ID_MAX_LENGTH)
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    age: int | None = None

    @field_validator("age", mode="before")
    @classmethod
    def _parse_age(cls, v: object) -> object:
        """HTML forms send an empty string for a blank number input."""
        if isinstance(v, str):
            s = v.strip()
            return s or None
        return v


class PersonOut(BaseModel):
    """Person as rendered by the views."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    age: int | None = None
