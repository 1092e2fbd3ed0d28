"""Discriminator enums for the virtual-constructor and family factories.

Each enum names the tags a client may pass to select a concrete variant.
"""

from __future__ import annotations

from enum import StrEnum


class AccountType(StrEnum):
    """Account variants produced by the account creators."""

    SAVINGS = "savings"
    INVESTMENT = "investment"
    RETIREMENT = "retirement"


class GoalType(StrEnum):
    """Goal variants produced by the recommendation creators."""

    TRAVEL = "travel"
    CAR = "car"
    HOME = "home"


class ThemeName(StrEnum):
    """Dashboard themes, one per matched-family factory."""

    DARK = "dark"
    LIGHT = "light"
    HIGH_CONTRAST = "high-contrast"


class Recipe(StrEnum):
    """Named director recipes for the financial simulator."""

    TRAVEL = "travel"
    HOME = "home"
