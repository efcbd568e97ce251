"""
Banking Exceptions Module

Typed failures raised by the account model and the banking service.
Every failure is a caller-input or business-rule violation; none are
transient, so callers never retry them.
"""

from decimal import Decimal


class BankingError(Exception):
    """Base exception for all retail banking errors."""


class InvalidAccountError(BankingError, ValueError):
    """Raised for bad account or customer data, including a duplicate email."""


class InvalidTransactionError(BankingError, ValueError):
    """Raised when a transaction request cannot be accepted as given."""


class InsufficientFundsError(BankingError):
    """
    Raised when an account's withdrawal policy rejects the amount.
    Carries the requested amount and the balance at the time of the request.
    """

    def __init__(self, requested_amount: Decimal, available_balance: Decimal):
        self.requested_amount = requested_amount
        self.available_balance = available_balance
        super().__init__(
            f"Insufficient funds. Requested: ${requested_amount:,.2f}, "
            f"Available: ${available_balance:,.2f}"
        )


class EntityNotFoundError(BankingError, LookupError):
    """Raised when a referenced customer or account does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account is registered under the given number."""

    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__(f"Account not found: {account_number}")


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when no customer is registered under the given ID."""

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(f"Customer not found: {customer_id}")
