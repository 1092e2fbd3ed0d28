"""Shared pytest fixtures for finpatterns tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from decimal import Decimal
from pathlib import Path

import pytest
from click.testing import CliRunner

from finpatterns.config.settings import FinSettings
from finpatterns.domain.plans import FinancialPlan


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp dir with no FINPATTERNS_* env vars.

    Keeps config discovery from picking up a developer's finpatterns.toml.
    """
    for key in list(os.environ):
        if key.startswith("FINPATTERNS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure logging; put the root logger back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg = logging.getLogger("finpatterns")
    pkg_level = pkg.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> FinSettings:
    """Settings built from code defaults only."""
    return FinSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def savings_plan() -> FinancialPlan:
    """The "Savings Plan" template from the prototype walkthrough."""
    return FinancialPlan(
        goal="Save for a car",
        duration=24,
        monthly_savings=Decimal("300"),
        incentives=["Cashback, Rewards Points"],
        initial_savings=Decimal("100"),
    )
