"""
Account Management Module

Savings and checking accounts sharing one deposit/withdraw/transfer
algorithm. Account defines the fixed control flow and the transaction log;
each product type plugs in its own withdrawal policy, fees and interest.
"""

from decimal import Decimal
from datetime import datetime, timezone
from typing import List, Optional
from enum import Enum
from abc import ABC, abstractmethod

from .currency import AmountLike, ZERO, to_decimal, round_to_cents, format_amount
from .exceptions import InvalidAccountError, InvalidTransactionError, InsufficientFundsError
from .identifiers import IdSequence
from .transactions import Transaction, TransactionType


class ProductType(Enum):
    """Banking product types"""
    SAVINGS = "savings"
    CHECKING = "checking"


class Account(ABC):
    """
    Bank account with an append-only transaction history

    The balance only changes through deposit, withdraw, the transfer halves,
    or fee/interest postings, and each of those appends exactly one
    Transaction carrying the resulting balance.
    """

    product_type: ProductType

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        initial_balance: AmountLike = ZERO,
        *,
        transaction_ids: IdSequence
    ):
        if not isinstance(transaction_ids, IdSequence):
            raise InvalidAccountError("Transaction id sequence is required")
        if not account_number or not str(account_number).strip():
            raise InvalidAccountError("Account number cannot be empty")
        opening_balance = self.validate_opening_data(holder_name, initial_balance)

        self._account_number = str(account_number).strip()
        self._holder_name = str(holder_name).strip()
        self._date_opened = datetime.now(timezone.utc)
        self._is_active = True
        self._balance = ZERO
        self._transactions: List[Transaction] = []
        self._transaction_ids = transaction_ids

        if opening_balance > ZERO:
            self._balance += opening_balance
            self._add_transaction(TransactionType.DEPOSIT, opening_balance, "Initial deposit")

        # Accounts always open at or above the product minimum
        shortfall = self.minimum_balance - self._balance
        if shortfall > ZERO:
            self._balance += shortfall
            self._add_transaction(
                TransactionType.DEPOSIT, shortfall, "Minimum balance requirement deposit"
            )

    @staticmethod
    def validate_opening_data(holder_name: str, initial_balance: AmountLike) -> Decimal:
        """
        Check holder and opening balance without creating an account

        Returns:
            The opening balance as a Decimal

        Raises:
            InvalidAccountError: If the holder is empty or the balance is
                not a non-negative amount
        """
        if holder_name is None or not str(holder_name).strip():
            raise InvalidAccountError("Account holder name cannot be empty")
        try:
            opening_balance = to_decimal(initial_balance)
        except ValueError:
            raise InvalidAccountError(f"Invalid initial balance: {initial_balance!r}")
        if opening_balance < ZERO:
            raise InvalidAccountError("Initial balance cannot be negative")
        return opening_balance

    # Extension points

    @property
    @abstractmethod
    def account_type(self) -> str:
        """Display name of the product"""

    @property
    @abstractmethod
    def minimum_balance(self) -> Decimal:
        """Balance the account opens with at least"""

    @abstractmethod
    def can_withdraw(self, amount: AmountLike) -> bool:
        """Whether the product policy allows withdrawing this amount now"""

    @abstractmethod
    def apply_monthly_maintenance(self) -> List[Transaction]:
        """
        Close the maintenance cycle: reset monthly counters, assess fees
        and credit interest. Returns the transactions posted.
        """

    # Template algorithm

    def deposit(self, amount: AmountLike) -> Transaction:
        """
        Deposit funds

        Raises:
            InvalidTransactionError: If the amount is not positive or the
                account is inactive
        """
        value = self._validate_transaction_amount(amount)
        self._perform_deposit(value)
        return self._add_transaction(TransactionType.DEPOSIT, value, "Cash deposit")

    def withdraw(self, amount: AmountLike) -> Transaction:
        """
        Withdraw funds subject to the product's withdrawal policy

        Any fee the withdrawal triggers is posted as its own transaction
        after the withdrawal transaction.

        Raises:
            InvalidTransactionError: If the amount is not positive or the
                account is inactive
            InsufficientFundsError: If can_withdraw rejects the amount
        """
        return self._apply_withdrawal(amount, TransactionType.WITHDRAWAL, "Cash withdrawal")

    def transfer_out(self, amount: AmountLike, to_account: str) -> Transaction:
        """Debit half of a transfer; same rules as withdraw"""
        return self._apply_withdrawal(
            amount, TransactionType.TRANSFER_OUT, f"Transfer to {to_account}"
        )

    def transfer_in(self, amount: AmountLike, from_account: str) -> Transaction:
        """Credit half of a transfer; same rules as deposit"""
        value = self._validate_transaction_amount(amount)
        self._perform_deposit(value)
        return self._add_transaction(
            TransactionType.TRANSFER_IN, value, f"Transfer from {from_account}"
        )

    def _apply_withdrawal(
        self,
        amount: AmountLike,
        transaction_type: TransactionType,
        description: str
    ) -> Transaction:
        value = self._validate_transaction_amount(amount)
        self._validate_withdrawal(value)
        balance_before = self._balance
        self._perform_withdrawal(value)
        transaction = self._add_transaction(transaction_type, value, description)
        self._on_withdrawal_applied(value, balance_before)
        return transaction

    # Overridable steps

    def _perform_deposit(self, amount: Decimal) -> None:
        self._balance += amount

    def _perform_withdrawal(self, amount: Decimal) -> None:
        self._balance -= amount

    def _on_withdrawal_applied(self, amount: Decimal, balance_before: Decimal) -> None:
        """Runs after the withdrawal transaction is recorded; fees go here"""

    def _validate_withdrawal(self, amount: Decimal) -> None:
        if not self.can_withdraw(amount):
            raise InsufficientFundsError(amount, self._balance)

    def _validate_transaction_amount(self, amount: AmountLike) -> Decimal:
        try:
            value = to_decimal(amount)
        except ValueError:
            raise InvalidTransactionError(f"Invalid transaction amount: {amount!r}")
        if value <= ZERO:
            raise InvalidTransactionError("Transaction amount must be positive")
        if not self._is_active:
            raise InvalidTransactionError("Account is not active")
        return value

    def _require_active(self) -> None:
        if not self._is_active:
            raise InvalidTransactionError("Account is not active")

    # System postings

    def add_fee_transaction(self, amount: AmountLike, description: str) -> Optional[Transaction]:
        """Debit a system fee; non-positive amounts are ignored"""
        value = to_decimal(amount)
        if value <= ZERO:
            return None
        self._balance -= value
        return self._add_transaction(TransactionType.FEE_DEBIT, value, description)

    def add_interest_transaction(
        self,
        amount: AmountLike,
        description: str = "Monthly interest credit"
    ) -> Optional[Transaction]:
        """Credit system interest; non-positive amounts are ignored"""
        value = to_decimal(amount)
        if value <= ZERO:
            return None
        self._balance += value
        return self._add_transaction(TransactionType.INTEREST_CREDIT, value, description)

    def _add_transaction(
        self,
        transaction_type: TransactionType,
        amount: Decimal,
        description: str
    ) -> Transaction:
        transaction = Transaction(
            id=self._transaction_ids.next_id(),
            account_number=self._account_number,
            transaction_type=transaction_type,
            amount=amount,
            description=description,
            balance_after=self._balance
        )
        self._transactions.append(transaction)
        return transaction

    # State and queries

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def date_opened(self) -> datetime:
        return self._date_opened

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def transaction_count(self) -> int:
        return len(self._transactions)

    def deactivate_account(self) -> None:
        """Block balance-changing operations; history and balance are kept"""
        self._is_active = False

    def activate_account(self) -> None:
        self._is_active = True

    def get_transaction_history(self) -> List[Transaction]:
        """Copy of the full history, oldest first"""
        return list(self._transactions)

    def get_recent_transactions(self, count: int) -> List[Transaction]:
        """Copy of the last `count` transactions, oldest first"""
        if count <= 0:
            return []
        return self._transactions[-count:]

    def _summary_lines(self) -> List[str]:
        return [
            "=== Account Summary ===",
            f"Account Number: {self._account_number}",
            f"Account Type: {self.account_type}",
            f"Account Holder: {self._holder_name}",
            f"Current Balance: {format_amount(self._balance)}",
            f"Minimum Balance: {format_amount(self.minimum_balance)}",
            f"Account Status: {'Active' if self._is_active else 'Inactive'}",
            f"Date Opened: {self._date_opened.date().isoformat()}",
            f"Total Transactions: {len(self._transactions)}",
        ]

    def get_account_summary(self) -> str:
        """Human-readable account report"""
        return "\n".join(self._summary_lines()) + "\n"

    def __str__(self) -> str:
        return (
            f"Account: {self._account_number} | Type: {self.account_type} | "
            f"Holder: {self._holder_name} | Balance: {format_amount(self._balance)} | "
            f"Status: {'Active' if self._is_active else 'Inactive'}"
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(account_number={self._account_number!r}, balance={self._balance})"


class SavingsAccount(Account):
    """
    Interest-bearing account with a limited number of free monthly
    withdrawals and a 100.00 minimum balance
    """

    product_type = ProductType.SAVINGS

    MINIMUM_BALANCE = Decimal('100.00')
    INTEREST_RATE = Decimal('0.035')  # Annual
    MONTHLY_MAINTENANCE_FEE = Decimal('5.00')
    FREE_WITHDRAWALS_PER_MONTH = 6
    EXCESS_WITHDRAWAL_FEE = Decimal('2.00')
    MAINTENANCE_FEE_WAIVER_BALANCE = Decimal('500.00')

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        initial_balance: AmountLike = ZERO,
        *,
        transaction_ids: IdSequence
    ):
        self._withdrawals_this_month = 0
        super().__init__(
            account_number, holder_name, initial_balance, transaction_ids=transaction_ids
        )

    @property
    def account_type(self) -> str:
        return "Savings Account"

    @property
    def minimum_balance(self) -> Decimal:
        return self.MINIMUM_BALANCE

    def can_withdraw(self, amount: AmountLike) -> bool:
        balance_after = self._balance - to_decimal(amount)

        if balance_after < self.MINIMUM_BALANCE:
            return False

        if self._withdrawals_this_month < self.FREE_WITHDRAWALS_PER_MONTH:
            return True

        # Over the free limit the balance must also absorb the excess fee
        return balance_after >= self.MINIMUM_BALANCE + self.EXCESS_WITHDRAWAL_FEE

    def _on_withdrawal_applied(self, amount: Decimal, balance_before: Decimal) -> None:
        self._withdrawals_this_month += 1
        if self._withdrawals_this_month > self.FREE_WITHDRAWALS_PER_MONTH:
            self.add_fee_transaction(self.EXCESS_WITHDRAWAL_FEE, "Excess withdrawal fee")

    def apply_monthly_maintenance(self) -> List[Transaction]:
        self._require_active()
        mark = len(self._transactions)

        self._withdrawals_this_month = 0

        if self.MONTHLY_MAINTENANCE_FEE <= self._balance < self.MAINTENANCE_FEE_WAIVER_BALANCE:
            self.add_fee_transaction(self.MONTHLY_MAINTENANCE_FEE, "Monthly maintenance fee")

        monthly_interest = round_to_cents(self._balance * self.INTEREST_RATE / 12)
        if monthly_interest >= Decimal('0.01'):
            self.add_interest_transaction(monthly_interest)

        return self._transactions[mark:]

    @property
    def interest_rate(self) -> Decimal:
        return self.INTEREST_RATE

    @property
    def withdrawals_this_month(self) -> int:
        return self._withdrawals_this_month

    @property
    def remaining_free_withdrawals(self) -> int:
        return max(0, self.FREE_WITHDRAWALS_PER_MONTH - self._withdrawals_this_month)

    @property
    def monthly_maintenance_fee(self) -> Decimal:
        return self.MONTHLY_MAINTENANCE_FEE

    @property
    def maintenance_fee_waiver_balance(self) -> Decimal:
        return self.MAINTENANCE_FEE_WAIVER_BALANCE

    def _summary_lines(self) -> List[str]:
        return super()._summary_lines() + [
            f"Interest Rate: {self.INTEREST_RATE * 100:.2f}% annually",
            f"Monthly Maintenance Fee: {format_amount(self.MONTHLY_MAINTENANCE_FEE)}",
            f"Fee Waiver Balance: {format_amount(self.MAINTENANCE_FEE_WAIVER_BALANCE)}",
            f"Withdrawals This Month: {self._withdrawals_this_month}",
            f"Free Withdrawals Remaining: {self.remaining_free_withdrawals}",
        ]


class CheckingAccount(Account):
    """
    Transactional account with optional overdraft protection and check
    writing. Earns premium interest only on very high balances.
    """

    product_type = ProductType.CHECKING

    MINIMUM_BALANCE = Decimal('25.00')
    MONTHLY_MAINTENANCE_FEE = Decimal('10.00')
    OVERDRAFT_FEE = Decimal('35.00')
    OVERDRAFT_LIMIT = Decimal('500.00')
    MAINTENANCE_FEE_WAIVER_BALANCE = Decimal('1000.00')
    PREMIUM_INTEREST_THRESHOLD = Decimal('5000.00')
    PREMIUM_INTEREST_RATE = Decimal('0.001')  # Annual

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        initial_balance: AmountLike = ZERO,
        overdraft_protection: bool = True,
        *,
        transaction_ids: IdSequence
    ):
        self._overdraft_protection = overdraft_protection
        self._checks_written_this_month = 0
        super().__init__(
            account_number, holder_name, initial_balance, transaction_ids=transaction_ids
        )

    @property
    def account_type(self) -> str:
        return "Checking Account"

    @property
    def minimum_balance(self) -> Decimal:
        return self.MINIMUM_BALANCE

    def can_withdraw(self, amount: AmountLike) -> bool:
        balance_after = self._balance - to_decimal(amount)

        if balance_after >= ZERO:
            return True

        if self._overdraft_protection:
            return -balance_after <= self.OVERDRAFT_LIMIT

        return False

    def _on_withdrawal_applied(self, amount: Decimal, balance_before: Decimal) -> None:
        # Fee only on the withdrawal that crosses into overdraft
        if balance_before >= ZERO and self._balance < ZERO and self._overdraft_protection:
            self.add_fee_transaction(self.OVERDRAFT_FEE, "Overdraft fee")

    def write_check(self, amount: AmountLike, payee: str) -> Transaction:
        """
        Pay a check through the regular withdrawal path

        Raises:
            InvalidTransactionError: If the payee is empty, the amount is not
                positive or the account is inactive
            InsufficientFundsError: If can_withdraw rejects the amount
        """
        if payee is None or not str(payee).strip():
            raise InvalidTransactionError("Payee cannot be empty")
        transaction = self._apply_withdrawal(
            amount, TransactionType.WITHDRAWAL, f"Check written to {str(payee).strip()}"
        )
        self._checks_written_this_month += 1
        return transaction

    def apply_monthly_maintenance(self) -> List[Transaction]:
        self._require_active()
        mark = len(self._transactions)

        self._checks_written_this_month = 0

        if self._balance < self.MAINTENANCE_FEE_WAIVER_BALANCE:
            if self._balance >= self.MONTHLY_MAINTENANCE_FEE:
                self.add_fee_transaction(self.MONTHLY_MAINTENANCE_FEE, "Monthly maintenance fee")
            elif self._balance > ZERO:
                self.add_fee_transaction(self._balance, "Partial monthly maintenance fee")

        if self._balance > self.PREMIUM_INTEREST_THRESHOLD:
            monthly_interest = round_to_cents(self._balance * self.PREMIUM_INTEREST_RATE / 12)
            if monthly_interest >= Decimal('0.01'):
                self.add_interest_transaction(monthly_interest)

        return self._transactions[mark:]

    @property
    def overdraft_protection(self) -> bool:
        return self._overdraft_protection

    def enable_overdraft_protection(self) -> None:
        self._overdraft_protection = True

    def disable_overdraft_protection(self) -> None:
        self._overdraft_protection = False

    @property
    def overdraft_limit(self) -> Decimal:
        return self.OVERDRAFT_LIMIT

    @property
    def overdraft_fee(self) -> Decimal:
        return self.OVERDRAFT_FEE

    @property
    def available_overdraft(self) -> Decimal:
        """Overdraft room left before the limit"""
        if not self._overdraft_protection:
            return ZERO
        if self._balance >= ZERO:
            return self.OVERDRAFT_LIMIT
        return max(ZERO, self.OVERDRAFT_LIMIT + self._balance)

    @property
    def is_overdrawn(self) -> bool:
        return self._balance < ZERO

    @property
    def checks_written_this_month(self) -> int:
        return self._checks_written_this_month

    @property
    def monthly_maintenance_fee(self) -> Decimal:
        return self.MONTHLY_MAINTENANCE_FEE

    @property
    def maintenance_fee_waiver_balance(self) -> Decimal:
        return self.MAINTENANCE_FEE_WAIVER_BALANCE

    def _summary_lines(self) -> List[str]:
        lines = super()._summary_lines()
        lines.append(
            f"Overdraft Protection: {'Enabled' if self._overdraft_protection else 'Disabled'}"
        )
        if self._overdraft_protection:
            lines += [
                f"Overdraft Limit: {format_amount(self.OVERDRAFT_LIMIT)}",
                f"Available Overdraft: {format_amount(self.available_overdraft)}",
                f"Overdraft Fee: {format_amount(self.OVERDRAFT_FEE)}",
            ]
        lines += [
            f"Monthly Maintenance Fee: {format_amount(self.MONTHLY_MAINTENANCE_FEE)}",
            f"Fee Waiver Balance: {format_amount(self.MAINTENANCE_FEE_WAIVER_BALANCE)}",
            f"Checks Written This Month: {self._checks_written_this_month}",
        ]
        if self.is_overdrawn:
            lines.append(f"*** ACCOUNT OVERDRAWN BY {format_amount(-self._balance)} ***")
        return lines
