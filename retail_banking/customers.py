"""
Customer Management Module

Customer profiles with validated names and email, and the collection of
accounts a customer holds. Accounts are held by reference; their lifecycle
belongs to the banking service.
"""

from decimal import Decimal
from datetime import datetime, timezone
from typing import List, Optional
import re

from .accounts import Account, ProductType
from .currency import ZERO, format_amount
from .exceptions import InvalidAccountError

# One "@", then a domain with at least one later "." and non-empty parts
EMAIL_PATTERN = re.compile(r'^[^@\s]+@[^@\s]+\.[^@\s.]+$')


def is_valid_email(email: str) -> bool:
    """Check email shape: local@domain.tld with non-empty segments"""
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def _require_name(value: Optional[str], label: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidAccountError(f"{label} cannot be empty")
    return str(value).strip()


def _normalize_email(value: Optional[str]) -> str:
    email = str(value).strip() if value is not None else ""
    if not is_valid_email(email):
        raise InvalidAccountError("Valid email address is required")
    return email.lower()


def _optional_text(value: Optional[str], label: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidAccountError(f"{label} must be text")
    return value.strip()


class Customer:
    """
    Bank customer

    Names and email are re-validated on every update. Email uniqueness is
    a registry concern and is only checked when the customer is created.
    """

    def __init__(
        self,
        customer_id: str,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str] = None,
        address: Optional[str] = None
    ):
        self._first_name = _require_name(first_name, "First name")
        self._last_name = _require_name(last_name, "Last name")
        self._email = _normalize_email(email)
        self._customer_id = customer_id
        self._phone = _optional_text(phone, "Phone")
        self._address = _optional_text(address, "Address")
        self._date_joined = datetime.now(timezone.utc)
        self._is_active = True
        self._accounts: List[Account] = []

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def first_name(self) -> str:
        return self._first_name

    @first_name.setter
    def first_name(self, value: str) -> None:
        self._first_name = _require_name(value, "First name")

    @property
    def last_name(self) -> str:
        return self._last_name

    @last_name.setter
    def last_name(self, value: str) -> None:
        self._last_name = _require_name(value, "Last name")

    @property
    def full_name(self) -> str:
        return f"{self._first_name} {self._last_name}"

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        # Format only; uniqueness is not re-checked here
        self._email = _normalize_email(value)

    @property
    def phone(self) -> Optional[str]:
        return self._phone

    @phone.setter
    def phone(self, value: Optional[str]) -> None:
        self._phone = _optional_text(value, "Phone")

    @property
    def address(self) -> Optional[str]:
        return self._address

    @address.setter
    def address(self, value: Optional[str]) -> None:
        self._address = _optional_text(value, "Address")

    @property
    def date_joined(self) -> datetime:
        return self._date_joined

    @property
    def is_active(self) -> bool:
        return self._is_active

    def deactivate_customer(self) -> None:
        """Deactivate the customer and every account they hold"""
        self._is_active = False
        for account in self._accounts:
            account.deactivate_account()

    def activate_customer(self) -> None:
        """Reactivate the customer only; accounts stay as they are"""
        self._is_active = True

    def add_account(self, account: Optional[Account]) -> None:
        if account is not None and account not in self._accounts:
            self._accounts.append(account)

    def remove_account(self, account: Account) -> bool:
        if account in self._accounts:
            self._accounts.remove(account)
            return True
        return False

    def get_accounts(self) -> List[Account]:
        return list(self._accounts)

    def get_account(self, account_number: str) -> Optional[Account]:
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    def get_active_accounts(self) -> List[Account]:
        return [account for account in self._accounts if account.is_active]

    def get_accounts_by_type(self, product_type: ProductType) -> List[Account]:
        return [account for account in self._accounts if account.product_type == product_type]

    @property
    def total_balance(self) -> Decimal:
        """Sum of balances across all held accounts"""
        return sum((account.balance for account in self._accounts), ZERO)

    @property
    def account_count(self) -> int:
        return len(self._accounts)

    @property
    def active_account_count(self) -> int:
        return len(self.get_active_accounts())

    def get_customer_summary(self) -> str:
        lines = [
            "=== Customer Summary ===",
            f"Customer ID: {self._customer_id}",
            f"Name: {self.full_name}",
            f"Email: {self._email}",
        ]
        if self._phone is not None:
            lines.append(f"Phone: {self._phone}")
        if self._address is not None:
            lines.append(f"Address: {self._address}")
        lines += [
            f"Date Joined: {self._date_joined.date().isoformat()}",
            f"Status: {'Active' if self._is_active else 'Inactive'}",
            f"Total Accounts: {len(self._accounts)}",
            f"Active Accounts: {self.active_account_count}",
            f"Total Balance: {format_amount(self.total_balance)}",
        ]
        if self._accounts:
            lines += ["", "--- Accounts ---"]
            lines += [f"• {account}" for account in self._accounts]
        return "\n".join(lines) + "\n"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Customer):
            return False
        return self._customer_id == other._customer_id

    def __hash__(self) -> int:
        return hash(self._customer_id)

    def __str__(self) -> str:
        return (
            f"Customer: {self._customer_id} | Name: {self.full_name} | Email: {self._email} | "
            f"Accounts: {len(self._accounts)} | Status: {'Active' if self._is_active else 'Inactive'}"
        )
