"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rubyfilter.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator

from rubyfilter.domain.types import ErrorPolicy
from rubyfilter.output.html import DEFAULT_CLOSE_PAREN, DEFAULT_OPEN_PAREN

# --- rubyfilter.toml sections ---


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    open_paren: str = DEFAULT_OPEN_PAREN
    close_paren: str = DEFAULT_CLOSE_PAREN


class FilterConfig(BaseModel):
    """[filter] section."""

    model_config = {"frozen": True}

    on_error: ErrorPolicy = ErrorPolicy.RAW

    @field_validator("on_error", mode="before")
    @classmethod
    def _lowercase_policy(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value
