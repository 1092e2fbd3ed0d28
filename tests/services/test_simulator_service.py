"""Tests for SimulatorService."""

from __future__ import annotations

from decimal import Decimal

import pytest

from finpatterns.config.settings import FinSettings
from finpatterns.services.simulator import SimulatorService


class TestRunRecipe:
    @pytest.mark.parametrize("recipe,goal", [("travel", "Travel to Europe"), ("home", "Buy a Home")])
    def test_known_recipe(self, settings: FinSettings, recipe: str, goal: str) -> None:
        result = SimulatorService(settings).run_recipe(recipe)
        assert result.ok
        assert result.op == "run_recipe"
        assert result.data["recipe"] == recipe
        assert result.data["goal"] == goal
        assert result.data["progress"] == "16.67"
        assert f"Goal: {goal}" in result.data["details"]

    def test_travel_payload_is_json_friendly(self, settings: FinSettings) -> None:
        data = SimulatorService(settings).run_recipe("travel").data
        assert data["monthly_savings"] == "416.67"
        assert data["incentives"] == ["Cashback on flights", "Reward points"]

    def test_unknown_recipe(self, settings: FinSettings) -> None:
        result = SimulatorService(settings).run_recipe("wedding")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_VARIANT"
        assert result.error.detail["choices"] == ["home", "travel"]


class TestSimulate:
    def test_custom_simulation(self, settings: FinSettings) -> None:
        result = SimulatorService(settings).simulate(
            goal="New car",
            duration=24,
            amount=Decimal("12000"),
            total=Decimal("15000"),
            initial=Decimal("3000"),
            incentives=["Dealer discount"],
        )
        assert result.ok
        assert result.data["monthly_savings"] == "500.00"
        assert result.data["progress"] == "20.00"
        assert result.data["incentives"] == ["Dealer discount"]

    def test_missing_required_fields(self, settings: FinSettings) -> None:
        result = SimulatorService(settings).simulate(
            goal="Half configured", duration=None, amount=None, total=None
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CONFIGURATION"
        assert result.error.detail["fields"] == ["duration", "monthly_savings", "total_savings"]

    def test_amount_without_duration(self, settings: FinSettings) -> None:
        result = SimulatorService(settings).simulate(
            goal="g", duration=None, amount=Decimal("100"), total=Decimal("100")
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.detail["fields"] == ["duration"]

    def test_zero_duration(self, settings: FinSettings) -> None:
        result = SimulatorService(settings).simulate(
            goal="g", duration=0, amount=Decimal("100"), total=Decimal("100")
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CONFIGURATION"

    @pytest.mark.parametrize(
        "overrides,field",
        [
            ({"amount": Decimal("NaN")}, "monthly_savings"),
            ({"amount": Decimal("Infinity")}, "monthly_savings"),
            ({"total": Decimal("NaN")}, "total_savings"),
            ({"initial": Decimal("-Infinity")}, "initial_savings"),
        ],
    )
    def test_non_finite_amounts(
        self, settings: FinSettings, overrides: dict[str, Decimal], field: str
    ) -> None:
        params = {"goal": "g", "duration": 12, "amount": Decimal("1200"), "total": Decimal("1200")}
        result = SimulatorService(settings).simulate(**{**params, **overrides})
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CONFIGURATION"
        assert result.error.detail["fields"] == [field]
