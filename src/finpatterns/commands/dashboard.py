"""Command: themed dashboard rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finpatterns.commands._base import FinCommand

if TYPE_CHECKING:
    from finpatterns.commands._context import AppContext


@click.command(
    cls=FinCommand,
    examples="""\
  finpatterns dashboard
  finpatterns dashboard --theme light
  FINPATTERNS_DASHBOARD__THEME=high-contrast finpatterns dashboard""",
)
@click.option("--theme", default=None, help="Theme name (default: [dashboard] theme).")
@click.pass_obj
def dashboard(app: AppContext, theme: str | None) -> None:
    """Render a dashboard whose chart and table share one theme."""
    from finpatterns.services.dashboard import DashboardService

    app.emit(DashboardService(app.settings).render_dashboard(theme))
