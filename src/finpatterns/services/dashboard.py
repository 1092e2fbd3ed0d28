"""DashboardService: themed dashboards from matched-family factories."""

from __future__ import annotations

import logging

from finpatterns.domain.errors import UnknownVariantError
from finpatterns.domain.themes import FinancialDashboard, factory_for_theme
from finpatterns.services.base import BaseService
from finpatterns.services.result import ServiceResult

logger = logging.getLogger(__name__)


class DashboardService(BaseService):
    def render_dashboard(self, theme: str | None = None) -> ServiceResult:
        """Render a dashboard; *theme* defaults to ``[dashboard] theme``."""
        selected = theme or self.settings.dashboard.theme
        try:
            factory = factory_for_theme(selected)
        except UnknownVariantError as exc:
            return self._failure("render_dashboard", exc)

        dashboard = FinancialDashboard(factory)
        logger.debug("Rendered dashboard with %s", type(factory).__name__)
        return ServiceResult(
            ok=True,
            op="render_dashboard",
            data={"theme": str(dashboard.theme), "lines": dashboard.render()},
        )
