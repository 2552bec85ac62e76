"""ServiceResult and ServiceError — the service contract.

Services return a ServiceResult instead of raising; the CLI decides how
to render it and which exit code to use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from howoldami.domain.errors import HowOldError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str

    @classmethod
    def from_exception(cls, exc: HowOldError) -> ServiceError:
        return cls(code=exc.code, message=exc.message)


class ServiceResult(BaseModel):
    """Return type for service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"calculate_age"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
