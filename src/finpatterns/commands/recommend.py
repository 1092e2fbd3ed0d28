"""Command: goal-specific savings recommendations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finpatterns.commands._base import FinCommand

if TYPE_CHECKING:
    from finpatterns.commands._context import AppContext


@click.command(
    cls=FinCommand,
    examples="""\
  finpatterns recommend travel
  finpatterns -q recommend home""",
)
@click.argument("goal_type")
@click.pass_obj
def recommend(app: AppContext, goal_type: str) -> None:
    """Recommend a savings approach for GOAL_TYPE (travel, car, home)."""
    from finpatterns.services.recommendations import RecommendationService

    app.emit(RecommendationService(app.settings).recommend(goal_type))
