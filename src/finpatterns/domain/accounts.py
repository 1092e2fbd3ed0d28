"""Account products and their factory-method creators.

Each :class:`AccountCreator` subclass overrides ``create_account`` to
decide which concrete :class:`Account` gets instantiated. The template
method ``generate_account`` is shared and only relies on the product's
self-describing interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

from finpatterns.domain.errors import UnknownVariantError
from finpatterns.domain.types import AccountType


@dataclass
class Account:
    """Base account with a balance and currency."""

    account_type: ClassVar[str]
    interest_rate: ClassVar[Decimal]

    balance: Decimal = Decimal("0")
    currency: str = "USD"

    def get_account_type(self) -> str:
        return self.account_type

    def calculate_interest(self) -> Decimal:
        """Annual interest rate, in percent."""
        return self.interest_rate

    def deposit(self, amount: Decimal) -> None:
        self.balance += amount

    def withdraw(self, amount: Decimal) -> bool:
        """Withdraw *amount* if funds allow. Returns False when refused."""
        if self.balance >= amount:
            self.balance -= amount
            return True
        return False


@dataclass
class SavingsAccount(Account):
    account_type: ClassVar[str] = "Savings Account"
    interest_rate: ClassVar[Decimal] = Decimal("1.5")


@dataclass
class InvestmentAccount(Account):
    account_type: ClassVar[str] = "Investment Account"
    interest_rate: ClassVar[Decimal] = Decimal("5")


@dataclass
class RetirementAccount(Account):
    account_type: ClassVar[str] = "Retirement Account"
    interest_rate: ClassVar[Decimal] = Decimal("3")


class AccountCreator(ABC):
    """Declares the factory method and the shared generation template."""

    def __init__(self, currency: str = "USD") -> None:
        self.currency = currency

    @abstractmethod
    def create_account(self) -> Account:
        """Instantiate the concrete account for this creator."""
        ...

    def generate_account(self) -> str:
        """Create an account and describe it in one sentence."""
        account = self.create_account()
        return describe_account(account)


def describe_account(account: Account) -> str:
    return (
        f"Created a {account.get_account_type()} with {account.calculate_interest()}% "
        f"interest rate and balance of {account.balance} {account.currency}."
    )


class SavingsAccountCreator(AccountCreator):
    """Opens a savings account and replays its opening transactions."""

    def create_account(self) -> Account:
        account = SavingsAccount(balance=Decimal("1000"), currency=self.currency)
        account.deposit(Decimal("2500"))
        account.withdraw(Decimal("3000"))
        account.withdraw(Decimal("500"))
        return account


class InvestmentAccountCreator(AccountCreator):
    def create_account(self) -> Account:
        return InvestmentAccount(currency=self.currency)


class RetirementAccountCreator(AccountCreator):
    def create_account(self) -> Account:
        return RetirementAccount(currency=self.currency)


ACCOUNT_CREATORS: dict[str, type[AccountCreator]] = {
    AccountType.SAVINGS: SavingsAccountCreator,
    AccountType.INVESTMENT: InvestmentAccountCreator,
    AccountType.RETIREMENT: RetirementAccountCreator,
}


def creator_for_account(account_type: str, *, currency: str = "USD") -> AccountCreator:
    """Select the creator for an account-type discriminator.

    Raises:
        UnknownVariantError: If *account_type* is not registered.
    """
    creator_cls = ACCOUNT_CREATORS.get(account_type)
    if creator_cls is None:
        raise UnknownVariantError("account type", account_type, ACCOUNT_CREATORS)
    return creator_cls(currency=currency)
