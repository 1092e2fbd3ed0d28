"""Output mode dispatch: JSON, quiet, or Rich-rendered text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from finpatterns.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from finpatterns.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output flags relevant to formatting."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, and quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
