"""Themed dashboard widgets built through matched-family factories.

Each concrete :class:`ThemeFactory` hard-wires the constructors of its own
theme, so a dashboard built from one factory can never mix families.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from finpatterns.domain.errors import UnknownVariantError
from finpatterns.domain.types import ThemeName


class Chart(ABC):
    @abstractmethod
    def render(self) -> str: ...


class Table(ABC):
    @abstractmethod
    def render(self) -> str: ...


# --- Dark theme ---


class DarkThemeChart(Chart):
    def render(self) -> str:
        return "Rendering chart with dark theme"


class DarkThemeTable(Table):
    def render(self) -> str:
        return "Rendering table with dark theme"


# --- Light theme ---


class LightThemeChart(Chart):
    def render(self) -> str:
        return "Rendering chart with light theme"


class LightThemeTable(Table):
    def render(self) -> str:
        return "Rendering table with light theme"


# --- High contrast theme ---


class HighContrastThemeChart(Chart):
    def render(self) -> str:
        return "Rendering chart with high contrast theme"


class HighContrastThemeTable(Table):
    def render(self) -> str:
        return "Rendering table with high contrast theme"


class ThemeFactory(ABC):
    """Creates one chart and one table belonging to the same theme."""

    theme: ClassVar[ThemeName]
    label: ClassVar[str]

    @abstractmethod
    def create_chart(self) -> Chart: ...

    @abstractmethod
    def create_table(self) -> Table: ...


class DarkThemeFactory(ThemeFactory):
    theme = ThemeName.DARK
    label = "dark"

    def create_chart(self) -> Chart:
        return DarkThemeChart()

    def create_table(self) -> Table:
        return DarkThemeTable()


class LightThemeFactory(ThemeFactory):
    theme = ThemeName.LIGHT
    label = "light"

    def create_chart(self) -> Chart:
        return LightThemeChart()

    def create_table(self) -> Table:
        return LightThemeTable()


class HighContrastThemeFactory(ThemeFactory):
    theme = ThemeName.HIGH_CONTRAST
    label = "high contrast"

    def create_chart(self) -> Chart:
        return HighContrastThemeChart()

    def create_table(self) -> Table:
        return HighContrastThemeTable()


THEME_FACTORIES: dict[str, type[ThemeFactory]] = {
    ThemeName.DARK: DarkThemeFactory,
    ThemeName.LIGHT: LightThemeFactory,
    ThemeName.HIGH_CONTRAST: HighContrastThemeFactory,
}


def factory_for_theme(theme: str) -> ThemeFactory:
    """Select the factory for a theme name.

    Raises:
        UnknownVariantError: If *theme* is not registered.
    """
    factory_cls = THEME_FACTORIES.get(theme)
    if factory_cls is None:
        raise UnknownVariantError("theme", theme, THEME_FACTORIES)
    return factory_cls()


class FinancialDashboard:
    """Client composing a chart and a table from a single factory."""

    def __init__(self, factory: ThemeFactory) -> None:
        self.theme = factory.theme
        self.chart = factory.create_chart()
        self.table = factory.create_table()

    def render(self) -> list[str]:
        """Rendered widget lines, chart first."""
        return [self.chart.render(), self.table.render()]
