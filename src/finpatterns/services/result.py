"""ServiceResult and ServiceError, the contract between services and callers.

INVARIANT: Every public service method returns a ServiceResult.
Domain errors become ``ok=False`` results; the CLI decides how to show them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Error payload carried by a failed ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of a single service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (e.g. ``"create_plan"``); selects the renderer.
        data: JSON-friendly payload on success.
        warnings: Non-fatal notes for the caller.
        error: Populated when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
