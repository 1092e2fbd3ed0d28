"""BaseService: shared construction and error translation for services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from finpatterns.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from finpatterns.config.settings import FinSettings
    from finpatterns.domain.errors import FinPatternsError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Services receive the resolved :class:`FinSettings` and turn domain
    errors into failed results instead of letting them escape.

    Usage::

        class PlanService(BaseService):
            def show_plan(self, name: str) -> ServiceResult:
                try:
                    plan = self._registry.create(name)
                except NotFoundError as exc:
                    return self._failure("show_plan", exc)
                ...
    """

    def __init__(self, settings: FinSettings | None = None) -> None:
        if settings is None:
            from finpatterns.config.settings import FinSettings

            settings = FinSettings()
        self._settings = settings

    @property
    def settings(self) -> FinSettings:
        return self._settings

    def _failure(self, op: str, exc: FinPatternsError) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=exc.detail()),
        )
