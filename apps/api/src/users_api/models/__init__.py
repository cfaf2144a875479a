"""API response models."""

from users_api.models.error import ErrorMessage
from users_api.models.health import HealthCheckResponse

__all__ = ["ErrorMessage", "HealthCheckResponse"]
