"""User models for User API."""

from typing import ClassVar

from pydantic import BaseModel, Field


class User(BaseModel):
    """User entity model."""

    id: int = Field(..., description="Unique identifier assigned by the store")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")

    class Config:
        """Pydantic config."""

        frozen = True
        json_schema_extra: ClassVar[dict] = {
            "example": {
                "id": 1,
                "name": "Alice",
                "email": "alice@example.com",
            }
        }


class UserInput(BaseModel):
    """Candidate user supplied by a caller on create or update.

    Fields are optional so that missing values reach validation and are
    reported with its messages. Any ``id`` sent by the caller is ignored.
    """

    id: int | None = Field(None, description="Ignored; ids are assigned by the store")
    name: str | None = Field(None, description="Full name of the user")
    email: str | None = Field(None, description="Email address of the user")

    class Config:
        """Pydantic config."""

        json_schema_extra: ClassVar[dict] = {
            "example": {
                "name": "Jane Doe",
                "email": "jane.doe@example.com",
            }
        }
