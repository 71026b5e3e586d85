"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, nowctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_API_URL = "https://api.zeit.co"


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    url: str = DEFAULT_API_URL
    timeout: float = 30.0
    max_retries: int = 3
    backoff_factor: float = 0.5
