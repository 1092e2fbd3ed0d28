"""Tests for financial plan prototypes and the prototype registry."""

from __future__ import annotations

import threading
from decimal import Decimal

import pytest

from finpatterns.domain.errors import NotFoundError
from finpatterns.domain.plans import Cloneable, FinancialPlan, PlanRegistry


class TestFinancialPlanClone:
    def test_clone_equals_source(self, savings_plan: FinancialPlan) -> None:
        clone = savings_plan.clone()
        assert clone == savings_plan
        assert clone is not savings_plan

    def test_clone_owns_incentives(self, savings_plan: FinancialPlan) -> None:
        clone = savings_plan.clone()
        assert clone.incentives is not savings_plan.incentives

    def test_mutating_clone_leaves_source(self, savings_plan: FinancialPlan) -> None:
        clone = savings_plan.clone()
        clone.incentives.append("Free ATM withdrawals")
        clone.goal = "Something else"
        assert savings_plan.incentives == ["Cashback, Rewards Points"]
        assert savings_plan.goal == "Save for a car"

    def test_mutating_source_leaves_clone(self, savings_plan: FinancialPlan) -> None:
        clone = savings_plan.clone()
        savings_plan.incentives.append("Bonus")
        savings_plan.duration = 6
        assert clone.incentives == ["Cashback, Rewards Points"]
        assert clone.duration == 24

    def test_satisfies_cloneable_protocol(self, savings_plan: FinancialPlan) -> None:
        assert isinstance(savings_plan, Cloneable)

    def test_describe_includes_every_field(self, savings_plan: FinancialPlan) -> None:
        text = savings_plan.describe()
        assert "Goal: Save for a car" in text
        assert "Duration: 24 months" in text
        assert "Monthly Savings: $300" in text
        assert "Incentives: Cashback, Rewards Points" in text
        assert "Initial Savings: $100" in text

    def test_incentive_order_preserved(self) -> None:
        plan = FinancialPlan(
            goal="g", duration=1, monthly_savings=Decimal("1"), incentives=["b", "a", "c"]
        )
        assert plan.clone().incentives == ["b", "a", "c"]


class TestPlanRegistry:
    def test_create_returns_equal_clone(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry()
        registry.register("Savings Plan", savings_plan)
        created = registry.create("Savings Plan")
        assert created == savings_plan
        assert created is not savings_plan

    def test_each_create_is_independent(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry()
        registry.register("Savings Plan", savings_plan)
        first = registry.create("Savings Plan")
        second = registry.create("Savings Plan")
        first.incentives.append("Extra")
        assert first is not second
        assert second.incentives == ["Cashback, Rewards Points"]

    def test_registration_snapshot(self, savings_plan: FinancialPlan) -> None:
        """Mutating the registered object later does not leak into the template."""
        registry = PlanRegistry()
        registry.register("Savings Plan", savings_plan)
        savings_plan.goal = "Changed after registration"
        savings_plan.incentives.append("Late addition")
        created = registry.create("Savings Plan")
        assert created.goal == "Save for a car"
        assert created.incentives == ["Cashback, Rewards Points"]

    def test_reregister_replaces(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry()
        registry.register("Plan", savings_plan)
        replacement = FinancialPlan(goal="Replacement", duration=3, monthly_savings=Decimal("10"))
        registry.register("Plan", replacement)
        assert registry.create("Plan") == replacement
        assert registry.create("Plan").goal == "Replacement"
        assert len(registry) == 1

    def test_missing_name_raises(self) -> None:
        registry = PlanRegistry()
        with pytest.raises(NotFoundError) as excinfo:
            registry.create("Ghost Plan")
        assert excinfo.value.name == "Ghost Plan"
        assert "Ghost Plan" in str(excinfo.value)

    def test_get_returns_none_on_miss(self) -> None:
        assert PlanRegistry().get("nothing") is None

    def test_get_returns_clone(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry()
        registry.register("Savings Plan", savings_plan)
        got = registry.get("Savings Plan")
        assert got == savings_plan
        assert got is not registry.get("Savings Plan")

    def test_names_in_registration_order(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry()
        registry.register("b", savings_plan)
        registry.register("a", savings_plan)
        assert registry.names() == ["b", "a"]
        assert "a" in registry
        assert "c" not in registry

    def test_unregister(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry()
        registry.register("Savings Plan", savings_plan)
        registry.unregister("Savings Plan")
        assert "Savings Plan" not in registry
        with pytest.raises(NotFoundError):
            registry.create("Savings Plan")

    def test_unregister_missing_raises(self) -> None:
        with pytest.raises(NotFoundError):
            PlanRegistry().unregister("nope")

    def test_from_templates(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry.from_templates({"Savings Plan": savings_plan})
        assert registry.names() == ["Savings Plan"]

    def test_concurrent_register_and_create(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry()
        registry.register("shared", savings_plan)
        errors: list[BaseException] = []

        def worker(index: int) -> None:
            try:
                for _ in range(50):
                    registry.register(f"plan-{index}", savings_plan)
                    plan = registry.create("shared")
                    plan.incentives.append(str(index))
            except BaseException as exc:  # pragma: no cover - surfaced below
                errors.append(exc)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert len(registry) == 9
        assert registry.create("shared").incentives == ["Cashback, Rewards Points"]


class TestSavingsPlanScenario:
    def test_customized_clone_leaves_template(self, savings_plan: FinancialPlan) -> None:
        registry = PlanRegistry()
        registry.register("Savings Plan", savings_plan)

        clone = registry.create("Savings Plan")
        clone.goal = "Save for a trip to Europe"
        clone.duration = 12

        fresh = registry.create("Savings Plan")
        assert fresh.goal == "Save for a car"
        assert fresh.duration == 24
        assert clone.goal == "Save for a trip to Europe"
        assert clone.duration == 12
