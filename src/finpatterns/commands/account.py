"""Command group: factory-method account opening."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from finpatterns.commands._base import FinGroup

if TYPE_CHECKING:
    from finpatterns.commands._context import AppContext


@click.group(
    cls=FinGroup,
    examples="""\
  finpatterns account open savings
  finpatterns -q account open investment""",
)
def account() -> None:
    """Open accounts through their type-specific creators."""


@account.command(
    "open",
    examples="""\
  finpatterns account open savings
  finpatterns --json account open retirement""",
)
@click.argument("account_type")
@click.pass_obj
def open_cmd(app: AppContext, account_type: str) -> None:
    """Open an account of ACCOUNT_TYPE (savings, investment, retirement)."""
    from finpatterns.services.accounts import AccountService

    app.emit(AccountService(app.settings).open_account(account_type))
