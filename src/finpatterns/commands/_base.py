"""Click base classes adding an eager ``--examples`` flag.

``--help`` stays short; ``--examples`` prints ready-to-copy invocations.
Also provides the ``AMOUNT`` parameter type for monetary options.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

import click


def _examples_option(examples: str) -> click.Option:
    def _show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_show,
        help="Show usage examples.",
    )


class FinCommand(click.Command):
    """Command accepting an ``examples`` keyword."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class FinGroup(click.Group):
    """Group accepting an ``examples`` keyword; subcommands default to FinCommand."""

    command_class = FinCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class DecimalParamType(click.ParamType):
    """Parse monetary amounts into :class:`~decimal.Decimal`."""

    name = "amount"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Decimal:
        if isinstance(value, Decimal):
            amount = value
        else:
            try:
                amount = Decimal(str(value))
            except InvalidOperation:
                self.fail(f"{value!r} is not a valid amount", param, ctx)
        if not amount.is_finite():
            self.fail(f"{value!r} is not a finite amount", param, ctx)
        return amount


AMOUNT = DecimalParamType()
