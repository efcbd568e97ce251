"""
Transaction Records Module

Immutable records of balance-affecting events. Every deposit, withdrawal,
transfer half, fee and interest posting appends exactly one Transaction to
the owning account's history, carrying the balance immediately after it.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from typing import Any, Dict
from enum import Enum

from .currency import format_amount


class TransactionType(Enum):
    """Types of balance-affecting events"""
    DEPOSIT = ("deposit", "Deposit")
    WITHDRAWAL = ("withdrawal", "Withdrawal")
    TRANSFER_IN = ("transfer_in", "Transfer In")
    TRANSFER_OUT = ("transfer_out", "Transfer Out")
    INTEREST_CREDIT = ("interest_credit", "Interest Credit")
    FEE_DEBIT = ("fee_debit", "Fee Debit")

    def __init__(self, code: str, label: str):
        self.code = code
        self.label = label

    @property
    def is_credit(self) -> bool:
        """True for types that increase the balance"""
        return self in (
            TransactionType.DEPOSIT,
            TransactionType.TRANSFER_IN,
            TransactionType.INTEREST_CREDIT,
        )

    @classmethod
    def from_code(cls, code: str) -> 'TransactionType':
        for member in cls:
            if member.code == code:
                return member
        raise ValueError(f"Unknown transaction type: {code}")

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class Transaction:
    """
    One balance-affecting event on one account

    amount is always a positive magnitude; the direction comes from
    transaction_type. balance_after is the account balance right after
    this transaction was applied.
    """
    id: str
    account_number: str
    transaction_type: TransactionType
    amount: Decimal
    description: str
    balance_after: Decimal
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.amount <= Decimal('0'):
            raise ValueError("Transaction amount must be positive")

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign of its effect on the balance"""
        return self.amount if self.transaction_type.is_credit else -self.amount

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            "id": self.id,
            "account_number": self.account_number,
            "transaction_type": self.transaction_type.code,
            "amount": str(self.amount),
            "description": self.description,
            "balance_after": str(self.balance_after),
            "timestamp": self.timestamp.isoformat(),
        }

    def format_line(self) -> str:
        """Single statement line"""
        return (
            f"{self.timestamp:%b %d, %Y %H:%M} - {self.transaction_type.label}: "
            f"{format_amount(self.amount)} (Balance: {format_amount(self.balance_after)}) "
            f"[{self.description}]"
        )

    def __str__(self) -> str:
        return (
            f"{self.id:<10} | {self.transaction_type.label:<15} | {self.amount:>10.2f} | "
            f"{self.timestamp:%Y-%m-%d %H:%M:%S} | {self.balance_after:>10.2f} | {self.description}"
        )
