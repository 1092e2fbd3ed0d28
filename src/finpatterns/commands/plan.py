"""Command group: prototype-based financial plans (list, show, create)."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import click

from finpatterns.commands._base import AMOUNT, FinGroup

if TYPE_CHECKING:
    from finpatterns.commands._context import AppContext


_PLAN_EXAMPLES = """\
  finpatterns plan list
  finpatterns plan show "Savings Plan"
  finpatterns plan create "Savings Plan" --goal "Save for a trip to Europe" --duration 12
  finpatterns plan create "Investment Plan" --incentive "Reduced fees" --incentive "Bonus" """


@click.group(cls=FinGroup, examples=_PLAN_EXAMPLES)
def plan() -> None:
    """Clone and customize registered financial plan templates."""


@plan.command("list", examples="  finpatterns plan list\n  finpatterns -v plan list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List registered plan templates."""
    from finpatterns.services.plans import PlanService

    app.emit(PlanService(app.settings).list_plans())


@plan.command(examples='  finpatterns plan show "Savings Plan"')
@click.argument("name")
@click.pass_obj
def show(app: AppContext, name: str) -> None:
    """Show a fresh copy of the template NAME."""
    from finpatterns.services.plans import PlanService

    app.emit(PlanService(app.settings).show_plan(name))


@plan.command(
    examples="""\
  finpatterns plan create "Savings Plan"
  finpatterns plan create "Savings Plan" --goal "Save for a trip" --duration 12 --monthly-savings 400""",
)
@click.argument("name")
@click.option("--goal", default=None, help="Override the plan goal.")
@click.option("--duration", type=click.IntRange(min=0), default=None, help="Months.")
@click.option("--monthly-savings", type=AMOUNT, default=None, help="Monthly savings amount.")
@click.option("--initial-savings", type=AMOUNT, default=None, help="Initial savings amount.")
@click.option(
    "--incentive",
    "incentives",
    multiple=True,
    help="Replace incentives (repeatable).",
)
@click.pass_obj
def create(
    app: AppContext,
    name: str,
    goal: str | None,
    duration: int | None,
    monthly_savings: Decimal | None,
    initial_savings: Decimal | None,
    incentives: tuple[str, ...],
) -> None:
    """Clone the template NAME and apply overrides to the copy."""
    from finpatterns.services.plans import PlanService

    app.emit(
        PlanService(app.settings).create_plan(
            name,
            goal=goal,
            duration=duration,
            monthly_savings=monthly_savings,
            initial_savings=initial_savings,
            incentives=list(incentives) if incentives else None,
        )
    )
