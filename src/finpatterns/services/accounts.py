"""AccountService: factory-method account opening."""

from __future__ import annotations

import logging

from finpatterns.domain.accounts import creator_for_account, describe_account
from finpatterns.domain.errors import UnknownVariantError
from finpatterns.services.base import BaseService
from finpatterns.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AccountService(BaseService):
    def open_account(self, account_type: str) -> ServiceResult:
        """Open an account of the given type in the configured currency."""
        try:
            creator = creator_for_account(account_type, currency=self.settings.accounts.currency)
        except UnknownVariantError as exc:
            return self._failure("open_account", exc)

        account = creator.create_account()
        logger.debug("Opened %s via %s", account.get_account_type(), type(creator).__name__)
        return ServiceResult(
            ok=True,
            op="open_account",
            data={
                "account_type": account.get_account_type(),
                "interest_rate": str(account.calculate_interest()),
                "balance": str(account.balance),
                "currency": account.currency,
                "summary": describe_account(account),
            },
        )
