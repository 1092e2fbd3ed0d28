"""SimulatorService: builder and director driven goal simulations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from finpatterns.domain.errors import InvalidConfigurationError, UnknownVariantError
from finpatterns.domain.simulator import (
    FinancialSimulator,
    FinancialSimulatorBuilder,
    SimulatorDirector,
)
from finpatterns.services.base import BaseService
from finpatterns.services.result import ServiceResult

logger = logging.getLogger(__name__)


def simulator_payload(simulator: FinancialSimulator) -> dict[str, Any]:
    return {
        **simulator.model_dump(mode="json"),
        "progress": str(simulator.progress_percent()),
        "details": simulator.describe(),
    }


class SimulatorService(BaseService):
    """Builds financial simulators from recipes or explicit parameters."""

    def run_recipe(self, recipe: str) -> ServiceResult:
        """Build the simulator for a named director recipe."""
        director = SimulatorDirector(FinancialSimulatorBuilder())
        try:
            simulator = director.build(recipe)
        except UnknownVariantError as exc:
            return self._failure("run_recipe", exc)
        logger.debug("Built %s simulator", recipe)
        return ServiceResult(
            ok=True,
            op="run_recipe",
            data={"recipe": recipe, **simulator_payload(simulator)},
        )

    def simulate(
        self,
        *,
        goal: str | None,
        duration: int | None,
        amount: Decimal | None,
        total: Decimal | None,
        initial: Decimal | None = None,
        incentives: Sequence[str] = (),
    ) -> ServiceResult:
        """Build a custom simulator step by step.

        Unset required parameters are reported as an INVALID_CONFIGURATION
        failure rather than defaulted.
        """
        builder = FinancialSimulatorBuilder()
        try:
            if goal is not None:
                builder.set_goal(goal)
            if duration is not None:
                builder.set_duration(duration)
            if amount is not None:
                builder.calculate_monthly_savings(amount)
            if initial is not None:
                builder.set_initial_savings(initial)
            if total is not None:
                builder.set_total_goal(total)
            if incentives:
                builder.add_incentives(incentives)
            simulator = builder.build()
        except InvalidConfigurationError as exc:
            return self._failure("simulate", exc)
        return ServiceResult(ok=True, op="simulate", data=simulator_payload(simulator))
