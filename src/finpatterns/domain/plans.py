"""Financial plan prototypes and the name-keyed prototype registry.

A plan template is registered once under a name and every ``create``
returns an independent clone. The registry keeps its own copy of each
template, so neither the registering caller nor any consumer of a clone
can reach the canonical instance.

INVARIANT: The stored template under a name is never handed out.
INVARIANT: A clone never shares its ``incentives`` list with its source.
"""

from __future__ import annotations

import threading
from decimal import Decimal
from typing import Generic, Protocol, Self, TypeVar, runtime_checkable

from pydantic import BaseModel, Field

from finpatterns.domain.errors import NotFoundError


@runtime_checkable
class Cloneable(Protocol):
    """Anything that can produce an independent deep copy of itself."""

    def clone(self) -> Self: ...

    def describe(self) -> str: ...


class FinancialPlan(BaseModel):
    """Configurable savings plan used as a prototype.

    Fields are mutable after cloning; assignments are re-validated.
    """

    model_config = {"validate_assignment": True, "allow_inf_nan": False}

    goal: str
    duration: int = Field(description="Plan length in months.")
    monthly_savings: Decimal
    incentives: list[str] = Field(default_factory=list)
    initial_savings: Decimal = Decimal("0")

    def clone(self) -> Self:
        """Return a deep copy with its own incentives list."""
        return self.model_copy(deep=True)

    def describe(self) -> str:
        """Render every field as indented ``label: value`` lines."""
        return "\n".join(
            [
                f"Goal: {self.goal}",
                f"Duration: {self.duration} months",
                f"Monthly Savings: ${self.monthly_savings}",
                f"Incentives: {', '.join(self.incentives)}",
                f"Initial Savings: ${self.initial_savings}",
            ]
        )


P = TypeVar("P", bound=Cloneable)


class PrototypeRegistry(Generic[P]):
    """Thread-safe mapping of registration names to prototype templates.

    Usage::

        registry = PlanRegistry()
        registry.register("Savings Plan", FinancialPlan(...))
        plan = registry.create("Savings Plan")  # independent clone
    """

    def __init__(self) -> None:
        self._prototypes: dict[str, P] = {}
        self._lock = threading.RLock()

    def register(self, name: str, prototype: P) -> None:
        """Store a private copy of *prototype* under *name*, replacing any prior entry."""
        template = prototype.clone()
        with self._lock:
            self._prototypes[name] = template

    def get(self, name: str) -> P | None:
        """Return a clone of the template under *name*, or None on a miss."""
        with self._lock:
            template = self._prototypes.get(name)
            if template is None:
                return None
            return template.clone()

    def create(self, name: str) -> P:
        """Return a fresh clone of the template under *name*.

        Raises:
            NotFoundError: If nothing is registered under *name*.
        """
        plan = self.get(name)
        if plan is None:
            raise NotFoundError(name)
        return plan

    def unregister(self, name: str) -> None:
        """Remove the template under *name*.

        Raises:
            NotFoundError: If nothing is registered under *name*.
        """
        with self._lock:
            if name not in self._prototypes:
                raise NotFoundError(name)
            del self._prototypes[name]

    def names(self) -> list[str]:
        """Registered names in registration order."""
        with self._lock:
            return list(self._prototypes)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._prototypes

    def __len__(self) -> int:
        with self._lock:
            return len(self._prototypes)


class PlanRegistry(PrototypeRegistry[FinancialPlan]):
    """Prototype registry specialised to financial plans."""

    @classmethod
    def from_templates(cls, templates: dict[str, FinancialPlan]) -> PlanRegistry:
        """Build a registry pre-populated with *templates* in mapping order."""
        registry = cls()
        for name, plan in templates.items():
            registry.register(name, plan)
        return registry
