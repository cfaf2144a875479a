"""Error response models."""

from pydantic import BaseModel


class ErrorMessage(BaseModel):
    """Body returned when a user fails validation."""

    message: str
