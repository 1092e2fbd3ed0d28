"""Command group: builder-driven goal simulators (recipe, custom)."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import click

from finpatterns.commands._base import AMOUNT, FinGroup
from finpatterns.domain.types import Recipe

if TYPE_CHECKING:
    from finpatterns.commands._context import AppContext


_SIMULATE_EXAMPLES = """\
  finpatterns simulate recipe travel
  finpatterns --json simulate recipe home
  finpatterns simulate custom --goal "Emergency fund" --duration 10 --amount 3000 --total 3000"""


@click.group(cls=FinGroup, examples=_SIMULATE_EXAMPLES)
def simulate() -> None:
    """Build financial goal simulators step by step."""


@simulate.command(examples="  finpatterns simulate recipe travel")
@click.argument("name", type=click.Choice([r.value for r in Recipe]))
@click.pass_obj
def recipe(app: AppContext, name: str) -> None:
    """Build the simulator for a predefined recipe."""
    from finpatterns.services.simulator import SimulatorService

    app.emit(SimulatorService(app.settings).run_recipe(name))


@simulate.command(
    examples="""\
  finpatterns simulate custom --goal "New car" --duration 24 --amount 12000 --total 15000 \\
      --initial 3000 --incentive "Dealer discount" """,
)
@click.option("--goal", default=None, help="Goal description.")
@click.option("--duration", type=int, default=None, help="Months to reach the goal.")
@click.option("--amount", type=AMOUNT, default=None, help="Amount to spread over the duration.")
@click.option("--total", type=AMOUNT, default=None, help="Total savings goal.")
@click.option("--initial", type=AMOUNT, default=None, help="Savings already set aside.")
@click.option("--incentive", "incentives", multiple=True, help="Incentive (repeatable).")
@click.pass_obj
def custom(
    app: AppContext,
    goal: str | None,
    duration: int | None,
    amount: Decimal | None,
    total: Decimal | None,
    initial: Decimal | None,
    incentives: tuple[str, ...],
) -> None:
    """Build a simulator from explicit parameters."""
    from finpatterns.services.simulator import SimulatorService

    app.emit(
        SimulatorService(app.settings).simulate(
            goal=goal,
            duration=duration,
            amount=amount,
            total=total,
            initial=initial,
            incentives=incentives,
        )
    )
