"""Subcommand modules for finpatterns.

Provides register_commands(), which imports command modules lazily so
``finpatterns --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach every command group and standalone command to the root group.

    3 groups (plan, simulate, account) + 3 standalone commands.
    """
    # --- Groups ---
    from finpatterns.commands.account import account
    from finpatterns.commands.plan import plan
    from finpatterns.commands.simulate import simulate

    cli.add_command(plan)
    cli.add_command(simulate)
    cli.add_command(account)

    # --- Standalone commands ---
    from finpatterns.commands.dashboard import dashboard
    from finpatterns.commands.demo import demo
    from finpatterns.commands.recommend import recommend

    cli.add_command(recommend)
    cli.add_command(dashboard)
    cli.add_command(demo)
