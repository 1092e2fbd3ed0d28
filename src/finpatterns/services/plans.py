"""PlanService: prototype-based financial plan creation.

Seeds a :class:`PlanRegistry` from the ``[plans.templates]`` config
section and stamps out customized clones on request.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from finpatterns.domain.errors import InvalidConfigurationError, NotFoundError
from finpatterns.domain.plans import FinancialPlan, PlanRegistry
from finpatterns.services.base import BaseService
from finpatterns.services.result import ServiceResult

if TYPE_CHECKING:
    from finpatterns.config.settings import FinSettings

logger = logging.getLogger(__name__)


def plan_payload(name: str, plan: FinancialPlan) -> dict[str, Any]:
    """JSON-friendly view of *plan* registered under *name*."""
    return {"name": name, **plan.model_dump(mode="json"), "details": plan.describe()}


class PlanService(BaseService):
    """Registers plan templates and hands out independent clones."""

    def __init__(
        self,
        settings: FinSettings | None = None,
        *,
        registry: PlanRegistry | None = None,
    ) -> None:
        super().__init__(settings)
        if registry is None:
            templates = self.settings.plans.templates
            registry = PlanRegistry.from_templates(
                {name: template.to_plan() for name, template in templates.items()}
            )
        self._registry = registry

    @property
    def registry(self) -> PlanRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def register_plan(self, name: str, plan: FinancialPlan) -> ServiceResult:
        """Register (or replace) the template stored under *name*.

        Replacing an existing template succeeds with a warning.
        """
        replaced = name in self._registry
        self._registry.register(name, plan)
        logger.debug("Registered plan template %r (replaced=%s)", name, replaced)
        warnings = [f"Replaced existing plan template {name!r}"] if replaced else []
        return ServiceResult(
            ok=True,
            op="register_plan",
            data={**plan_payload(name, plan), "replaced": replaced},
            warnings=warnings,
        )

    def list_plans(self) -> ServiceResult:
        """List every registered template."""
        items = []
        for name in self._registry.names():
            plan = self._registry.get(name)
            if plan is not None:
                items.append(plan_payload(name, plan))
        return ServiceResult(ok=True, op="list_plans", data={"items": items, "count": len(items)})

    def show_plan(self, name: str) -> ServiceResult:
        """Show a fresh clone of the template under *name*."""
        try:
            plan = self._registry.create(name)
        except NotFoundError as exc:
            return self._failure("show_plan", exc)
        return ServiceResult(ok=True, op="show_plan", data=plan_payload(name, plan))

    def create_plan(
        self,
        name: str,
        *,
        goal: str | None = None,
        duration: int | None = None,
        monthly_savings: Decimal | None = None,
        initial_savings: Decimal | None = None,
        incentives: list[str] | None = None,
    ) -> ServiceResult:
        """Clone the template under *name* and apply the given overrides.

        The registered template is left untouched. An override that fails
        validation yields an INVALID_CONFIGURATION failure.
        """
        try:
            plan = self._registry.create(name)
        except NotFoundError as exc:
            return self._failure("create_plan", exc)

        overrides: dict[str, Any] = {
            "goal": goal,
            "duration": duration,
            "monthly_savings": monthly_savings,
            "initial_savings": initial_savings,
            "incentives": incentives,
        }
        customized: list[str] = []
        for field, value in overrides.items():
            if value is None:
                continue
            try:
                setattr(plan, field, value)
            except ValidationError as exc:
                reason = exc.errors()[0]["msg"]
                error = InvalidConfigurationError(f"Invalid {field}: {reason}", fields=[field])
                return self._failure("create_plan", error)
            customized.append(field)

        logger.debug("Cloned plan %r with overrides %s", name, customized)
        return ServiceResult(
            ok=True,
            op="create_plan",
            data={**plan_payload(name, plan), "customized": customized},
        )
