"""Results returned by :class:`~rubyfilter.services.filter.FilterService`.

The CLI formats a ServiceResult and derives the exit code from ``ok``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ServiceError(BaseModel):
    """Why an operation failed. ``detail`` holds machine-readable context."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation on a document.

    INVARIANT: ``error`` is set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> ServiceResult:
        if self.ok == (self.error is not None):
            msg = "error must be set exactly when ok is False"
            raise ValueError(msg)
        return self

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], *, warnings: Iterable[str] = ()
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=list(warnings))

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, *, detail: dict[str, Any] | None = None
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error)
