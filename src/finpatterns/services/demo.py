"""DemoService: the four pattern walkthroughs as text reports.

Each section reproduces one pattern's console demonstration. Sections
are plain lists of lines so the output layer decides how to print them.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

from finpatterns.config.models import default_plan_templates
from finpatterns.domain.accounts import ACCOUNT_CREATORS
from finpatterns.domain.errors import UnknownVariantError
from finpatterns.domain.plans import PlanRegistry
from finpatterns.domain.recommendations import creator_for_goal
from finpatterns.domain.simulator import FinancialSimulatorBuilder, SimulatorDirector
from finpatterns.domain.themes import THEME_FACTORIES, FinancialDashboard
from finpatterns.domain.types import GoalType
from finpatterns.services.base import BaseService
from finpatterns.services.result import ServiceResult

DEMO_PATTERNS = ("builder", "factory-method", "abstract-factory", "prototype")


class DemoService(BaseService):
    """Runs the pattern walkthroughs in catalogue order."""

    def run(self, pattern: str | None = None) -> ServiceResult:
        """Run every walkthrough, or only *pattern* when given."""
        sections: dict[str, Callable[[], dict[str, Any]]] = {
            "builder": self._builder_section,
            "factory-method": self._factory_method_section,
            "abstract-factory": self._abstract_factory_section,
            "prototype": self._prototype_section,
        }
        if pattern is None:
            selected = list(DEMO_PATTERNS)
        elif pattern in sections:
            selected = [pattern]
        else:
            return self._failure("demo", UnknownVariantError("pattern", pattern, sections))
        return ServiceResult(
            ok=True,
            op="demo",
            data={"sections": [sections[name]() for name in selected]},
        )

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _builder_section(self) -> dict[str, Any]:
        director = SimulatorDirector(FinancialSimulatorBuilder())
        lines: list[str] = []
        for simulator in (director.build_travel_simulator(), director.build_home_simulator()):
            lines.extend(simulator.describe().splitlines())
            lines.append("")
        return {"title": "Builder", "lines": lines[:-1]}

    def _factory_method_section(self) -> dict[str, Any]:
        currency = self.settings.accounts.currency
        lines = [
            creator_cls(currency=currency).generate_account()
            for creator_cls in ACCOUNT_CREATORS.values()
        ]
        lines.extend(
            creator_for_goal(goal).generate_recommendation()
            for goal in (GoalType.TRAVEL, GoalType.CAR)
        )
        return {"title": "Factory Method", "lines": lines}

    def _abstract_factory_section(self) -> dict[str, Any]:
        lines: list[str] = []
        for factory_cls in THEME_FACTORIES.values():
            factory = factory_cls()
            if lines:
                lines.append("")
            lines.append(f"{factory.label.title()} Theme")
            lines.extend(FinancialDashboard(factory).render())
        return {"title": "Abstract Factory", "lines": lines}

    def _prototype_section(self) -> dict[str, Any]:
        registry = PlanRegistry.from_templates(
            {name: template.to_plan() for name, template in default_plan_templates().items()}
        )

        savings = registry.create("Savings Plan")
        savings.goal = "Save for a trip to Europe"
        savings.duration = 12
        savings.monthly_savings = Decimal("400")
        investment = registry.create("Investment Plan")

        lines = ["Cloned and Customized Savings Plan:", *savings.describe().splitlines()]
        lines += ["", "Cloned Investment Plan:", *investment.describe().splitlines()]
        return {"title": "Prototype", "lines": lines}
