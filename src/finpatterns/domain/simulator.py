"""Financial goal simulator, its fluent builder, and the recipe director.

The builder accumulates fields step by step and ``build()`` assembles a
frozen :class:`FinancialSimulator`. A builder yields exactly one product
per lifetime: once built, every further call fails until ``reset()``.

INVARIANT: ``build()`` never returns a simulator with unset required fields.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Self

from pydantic import BaseModel, Field

from finpatterns.domain.errors import InvalidConfigurationError, UnknownVariantError
from finpatterns.domain.types import Recipe

CENTS = Decimal("0.01")

REQUIRED_FIELDS = ("goal", "duration", "monthly_savings", "total_savings")


def to_decimal(value: int | float | str | Decimal, field: str = "amount") -> Decimal:
    """Convert *value* to Decimal without binary float artefacts.

    Raises:
        InvalidConfigurationError: If *value* is not a finite number.
    """
    if isinstance(value, Decimal):
        number = value
    else:
        try:
            number = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidConfigurationError(
                f"{field} must be a number, got {value!r}", fields=[field]
            ) from exc
    if not number.is_finite():
        raise InvalidConfigurationError(
            f"{field} must be a finite number, got {value!r}", fields=[field]
        )
    return number


class FinancialSimulator(BaseModel):
    """Assembled simulator for one savings goal."""

    model_config = {"frozen": True}

    goal: str
    duration: int
    monthly_savings: Decimal
    incentives: tuple[str, ...] = Field(default_factory=tuple)
    initial_savings: Decimal = Decimal("0")
    total_savings: Decimal

    def progress_percent(self) -> Decimal:
        """Share of the total goal already covered by the initial savings."""
        return (self.initial_savings / self.total_savings * 100).quantize(
            CENTS, rounding=ROUND_HALF_UP
        )

    def calculate_progress(self) -> str:
        return f"Progress {self.progress_percent()}% of your goal completed"

    def describe(self) -> str:
        return "\n".join(
            [
                f"Goal: {self.goal}",
                f"Duration: {self.duration} months",
                f"Monthly Savings: ${self.monthly_savings}",
                f"Initial Savings: ${self.initial_savings}",
                f"Total Savings: ${self.total_savings}",
                f"Incentives: {', '.join(self.incentives)}",
                self.calculate_progress(),
            ]
        )


class FinancialSimulatorBuilder:
    """Mutable, chainable builder for :class:`FinancialSimulator`.

    Usage::

        simulator = (
            FinancialSimulatorBuilder()
            .set_goal("Emergency fund")
            .set_duration(10)
            .calculate_monthly_savings(3000)
            .set_total_goal(3000)
            .build()
        )

    Reusing a builder after ``build()`` is unsupported and raises
    :class:`InvalidConfigurationError`; call ``reset()`` to start over.
    """

    def __init__(self) -> None:
        self._fields: dict[str, Any] = {}
        self._built = False

    def reset(self) -> Self:
        """Discard any in-progress state and allow a new product."""
        self._fields = {}
        self._built = False
        return self

    def _ensure_open(self) -> None:
        if self._built:
            msg = "Builder already produced a simulator; call reset() before reuse"
            raise InvalidConfigurationError(msg)

    def set_goal(self, goal: str) -> Self:
        self._ensure_open()
        self._fields["goal"] = goal
        return self

    def set_duration(self, duration: int) -> Self:
        """Set the plan length in months. Negative durations are rejected."""
        self._ensure_open()
        if duration < 0:
            raise InvalidConfigurationError(
                f"Duration must not be negative, got {duration}", fields=["duration"]
            )
        self._fields["duration"] = duration
        return self

    def calculate_monthly_savings(self, amount: int | float | str | Decimal) -> Self:
        """Derive monthly savings as ``amount / duration``, rounded to cents.

        Raises:
            InvalidConfigurationError: If duration is unset or zero, or
                *amount* is not a finite number.
        """
        self._ensure_open()
        duration = self._fields.get("duration")
        if not duration:
            raise InvalidConfigurationError(
                "Duration must be set to a positive value before calculating monthly savings",
                fields=["duration"],
            )
        monthly = to_decimal(amount, "monthly_savings") / Decimal(duration)
        self._fields["monthly_savings"] = monthly.quantize(CENTS, rounding=ROUND_HALF_UP)
        return self

    def add_incentives(self, incentives: Sequence[str]) -> Self:
        self._ensure_open()
        self._fields["incentives"] = tuple(incentives)
        return self

    def set_initial_savings(self, initial_savings: int | float | str | Decimal) -> Self:
        self._ensure_open()
        self._fields["initial_savings"] = to_decimal(initial_savings, "initial_savings")
        return self

    def set_total_goal(self, total_savings: int | float | str | Decimal) -> Self:
        self._ensure_open()
        self._fields["total_savings"] = to_decimal(total_savings, "total_savings")
        return self

    def build(self) -> FinancialSimulator:
        """Assemble the simulator.

        Raises:
            InvalidConfigurationError: If any required field is missing,
                duration is zero, or the total goal is not positive.
        """
        self._ensure_open()
        missing = [name for name in REQUIRED_FIELDS if name not in self._fields]
        if missing:
            raise InvalidConfigurationError(
                f"Missing required simulator fields: {', '.join(missing)}", fields=missing
            )
        if self._fields["duration"] == 0:
            raise InvalidConfigurationError("Duration must be positive", fields=["duration"])
        if self._fields["total_savings"] <= 0:
            raise InvalidConfigurationError(
                "Total goal must be positive", fields=["total_savings"]
            )
        simulator = FinancialSimulator(**self._fields)
        self._built = True
        return simulator


class SimulatorDirector:
    """Sequences builder calls into named recipes.

    Holds only a reference to its builder; each recipe resets it first.
    """

    def __init__(self, builder: FinancialSimulatorBuilder) -> None:
        self._builder = builder

    def build_travel_simulator(self) -> FinancialSimulator:
        return (
            self._builder.reset()
            .set_goal("Travel to Europe")
            .set_duration(12)
            .calculate_monthly_savings(5000)
            .set_initial_savings(1000)
            .set_total_goal(6000)
            .add_incentives(["Cashback on flights", "Reward points"])
            .build()
        )

    def build_home_simulator(self) -> FinancialSimulator:
        return (
            self._builder.reset()
            .set_goal("Buy a Home")
            .set_duration(24)
            .calculate_monthly_savings(50000)
            .set_initial_savings(10000)
            .set_total_goal(60000)
            .add_incentives(["Discount on loans", "Free consultations"])
            .build()
        )

    def build(self, recipe: str) -> FinancialSimulator:
        """Build the simulator for a named recipe.

        Raises:
            UnknownVariantError: If *recipe* is not a known recipe name.
        """
        recipes: dict[str, Callable[[], FinancialSimulator]] = {
            Recipe.TRAVEL: self.build_travel_simulator,
            Recipe.HOME: self.build_home_simulator,
        }
        method = recipes.get(recipe)
        if method is None:
            raise UnknownVariantError("simulator recipe", recipe, recipes)
        return method()
