"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, finpatterns.toml only contains
overrides. Defining ``[plans.templates]`` replaces the seed templates.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from finpatterns.domain.plans import FinancialPlan


class PlanTemplateConfig(BaseModel):
    """One ``[plans.templates."<name>"]`` entry."""

    model_config = {"frozen": True}

    goal: str
    duration: int
    monthly_savings: Decimal
    incentives: list[str] = Field(default_factory=list)
    initial_savings: Decimal = Decimal("0")

    def to_plan(self) -> FinancialPlan:
        return FinancialPlan(**self.model_dump())


def default_plan_templates() -> dict[str, PlanTemplateConfig]:
    return {
        "Savings Plan": PlanTemplateConfig(
            goal="Save for a car",
            duration=24,
            monthly_savings=Decimal("300"),
            incentives=["Cashback, Rewards Points"],
            initial_savings=Decimal("100"),
        ),
        "Investment Plan": PlanTemplateConfig(
            goal="Invest in stocks",
            duration=36,
            monthly_savings=Decimal("500"),
            incentives=["Dividend reinvestment", "Reduced fees"],
            initial_savings=Decimal("200"),
        ),
    }


class PlansConfig(BaseModel):
    """[plans] section."""

    model_config = {"frozen": True}

    templates: dict[str, PlanTemplateConfig] = Field(default_factory=default_plan_templates)


class AccountsConfig(BaseModel):
    """[accounts] section."""

    model_config = {"frozen": True}

    currency: str = "USD"


class DashboardConfig(BaseModel):
    """[dashboard] section."""

    model_config = {"frozen": True}

    theme: str = "dark"


class FinConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    plans: PlansConfig = Field(default_factory=PlansConfig)
    accounts: AccountsConfig = Field(default_factory=AccountsConfig)
    dashboard: DashboardConfig = Field(default_factory=DashboardConfig)
