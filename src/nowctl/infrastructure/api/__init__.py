"""Platform REST API client and endpoint helpers."""

from nowctl.infrastructure.api.client import ApiClient
from nowctl.infrastructure.api.errors import APIError

__all__ = ["APIError", "ApiClient"]
