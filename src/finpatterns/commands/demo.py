"""Command: run the pattern walkthroughs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finpatterns.commands._base import FinCommand
from finpatterns.services.demo import DEMO_PATTERNS

if TYPE_CHECKING:
    from finpatterns.commands._context import AppContext


@click.command(
    cls=FinCommand,
    examples="""\
  finpatterns demo
  finpatterns demo --pattern prototype""",
)
@click.option(
    "--pattern",
    type=click.Choice(DEMO_PATTERNS),
    default=None,
    help="Run a single walkthrough.",
)
@click.pass_obj
def demo(app: AppContext, pattern: str | None) -> None:
    """Print the Builder, Factory Method, Abstract Factory and Prototype walkthroughs."""
    from finpatterns.services.demo import DemoService

    app.emit(DemoService(app.settings).run(pattern))
