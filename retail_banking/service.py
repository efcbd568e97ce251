"""
Banking Service Module

Registry of customers and accounts and the entry point for every banking
operation. Resolves identifiers, delegates to the account model, and
aggregates bank-wide reporting. Owns the identifier sequences, so two
service instances never share numbering state.
"""

from decimal import Decimal
from typing import Dict, List, Optional

from .accounts import Account, SavingsAccount, CheckingAccount, ProductType
from .config import BankingConfig, get_config
from .currency import AmountLike, ZERO, format_amount
from .customers import Customer
from .exceptions import (
    InvalidAccountError, InvalidTransactionError,
    AccountNotFoundError, CustomerNotFoundError
)
from .identifiers import IdSequence
from .logging_config import get_logger, log_action
from .transactions import Transaction


class BankingService:
    """
    Manages customers and accounts and runs banking operations against them
    """

    def __init__(
        self,
        bank_name: Optional[str] = None,
        bank_code: Optional[str] = None,
        config: Optional[BankingConfig] = None
    ):
        self.config = config or get_config()
        self.bank_name = bank_name or self.config.bank_name
        self.bank_code = bank_code or self.config.bank_code

        self._customers: Dict[str, Customer] = {}
        self._accounts: Dict[str, Account] = {}

        self._account_numbers = IdSequence("", self.config.account_number_start)
        self._customer_ids = IdSequence(
            self.config.customer_id_prefix, self.config.customer_id_start
        )
        self._transaction_ids = IdSequence(
            self.config.transaction_id_prefix, self.config.transaction_id_start
        )

        self.logger = get_logger("retail_banking.service")

    # Customers

    def create_customer(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: Optional[str] = None,
        address: Optional[str] = None
    ) -> Customer:
        """
        Register a new customer

        Raises:
            InvalidAccountError: If the data is invalid or the email is
                already registered (case-insensitive)
        """
        if email is not None and self.find_customer_by_email(email) is not None:
            raise InvalidAccountError(f"Customer with email {email} already exists")

        # Validate before consuming an ID
        Customer("", first_name, last_name, email, phone=phone, address=address)

        customer = Customer(
            customer_id=self._customer_ids.next_id(),
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone=phone,
            address=address
        )
        self._customers[customer.customer_id] = customer

        log_action(
            self.logger, "info", "Customer created",
            action="create_customer", resource=f"customer:{customer.customer_id}",
            extra={"email": customer.email}
        )
        return customer

    def get_customer(self, customer_id: str) -> Customer:
        customer = self._customers.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def find_customer_by_email(self, email: str) -> Optional[Customer]:
        """Case-insensitive lookup by email"""
        needle = email.strip().lower()
        for customer in self._customers.values():
            if customer.email == needle:
                return customer
        return None

    def get_all_customers(self) -> List[Customer]:
        return list(self._customers.values())

    def get_active_customers(self) -> List[Customer]:
        return [c for c in self._customers.values() if c.is_active]

    def deactivate_customer(self, customer_id: str) -> Customer:
        """Deactivate a customer and all their accounts"""
        customer = self.get_customer(customer_id)
        customer.deactivate_customer()
        log_action(
            self.logger, "info", "Customer deactivated",
            action="deactivate_customer", resource=f"customer:{customer_id}",
            extra={"accounts_deactivated": customer.account_count}
        )
        return customer

    def activate_customer(self, customer_id: str) -> Customer:
        customer = self.get_customer(customer_id)
        customer.activate_customer()
        log_action(
            self.logger, "info", "Customer activated",
            action="activate_customer", resource=f"customer:{customer_id}"
        )
        return customer

    # Accounts

    def create_savings_account(
        self,
        customer_id: str,
        initial_balance: AmountLike = ZERO
    ) -> SavingsAccount:
        """
        Open a savings account for an existing customer

        Nothing is numbered unless the opening data is valid.

        Raises:
            CustomerNotFoundError: If the customer does not exist
            InvalidAccountError: If the initial balance is invalid
        """
        customer = self.get_customer(customer_id)
        Account.validate_opening_data(customer.full_name, initial_balance)
        account = SavingsAccount(
            self._account_numbers.next_id(),
            customer.full_name,
            initial_balance,
            transaction_ids=self._transaction_ids
        )
        self._register_account(customer, account)
        return account

    def create_checking_account(
        self,
        customer_id: str,
        initial_balance: AmountLike = ZERO,
        overdraft_protection: Optional[bool] = None
    ) -> CheckingAccount:
        """
        Open a checking account for an existing customer

        overdraft_protection defaults to the configured product default.
        """
        customer = self.get_customer(customer_id)
        if overdraft_protection is None:
            overdraft_protection = self.config.default_overdraft_protection
        Account.validate_opening_data(customer.full_name, initial_balance)
        account = CheckingAccount(
            self._account_numbers.next_id(),
            customer.full_name,
            initial_balance,
            overdraft_protection=overdraft_protection,
            transaction_ids=self._transaction_ids
        )
        self._register_account(customer, account)
        return account

    def _register_account(self, customer: Customer, account: Account) -> None:
        customer.add_account(account)
        self._accounts[account.account_number] = account
        log_action(
            self.logger, "info", f"{account.account_type} opened",
            action="create_account", resource=f"account:{account.account_number}",
            extra={
                "customer_id": customer.customer_id,
                "product_type": account.product_type.value,
                "opening_balance": str(account.balance)
            }
        )

    def get_account(self, account_number: str) -> Account:
        account = self._accounts.get(account_number)
        if account is None:
            raise AccountNotFoundError(account_number)
        return account

    def get_all_accounts(self) -> List[Account]:
        return list(self._accounts.values())

    def get_active_accounts(self) -> List[Account]:
        return [a for a in self._accounts.values() if a.is_active]

    def deactivate_account(self, account_number: str) -> Account:
        account = self.get_account(account_number)
        account.deactivate_account()
        log_action(
            self.logger, "info", "Account deactivated",
            action="deactivate_account", resource=f"account:{account_number}"
        )
        return account

    def activate_account(self, account_number: str) -> Account:
        account = self.get_account(account_number)
        account.activate_account()
        log_action(
            self.logger, "info", "Account activated",
            action="activate_account", resource=f"account:{account_number}"
        )
        return account

    # Operations

    def deposit(self, account_number: str, amount: AmountLike) -> Transaction:
        account = self.get_account(account_number)
        transaction = account.deposit(amount)
        self._log_transaction("deposit", transaction)
        return transaction

    def withdraw(self, account_number: str, amount: AmountLike) -> Transaction:
        account = self.get_account(account_number)
        transaction = account.withdraw(amount)
        self._log_transaction("withdraw", transaction)
        return transaction

    def transfer(
        self,
        from_account_number: str,
        to_account_number: str,
        amount: AmountLike
    ) -> List[Transaction]:
        """
        Move funds between two accounts

        The debit and the credit are two separate mutations. If the credit
        fails after the debit succeeded, the debit stands and the error is
        re-raised.

        Returns:
            [transfer-out transaction, transfer-in transaction]

        Raises:
            InvalidTransactionError: Same account, bad amount, or an
                inactive account on either side
            AccountNotFoundError: If either account does not exist
            InsufficientFundsError: If the source policy rejects the amount
        """
        if from_account_number == to_account_number:
            raise InvalidTransactionError("Cannot transfer to the same account")

        from_account = self.get_account(from_account_number)
        to_account = self.get_account(to_account_number)

        debit = from_account.transfer_out(amount, to_account_number)
        try:
            credit = to_account.transfer_in(amount, from_account_number)
        except InvalidTransactionError:
            log_action(
                self.logger, "warning",
                "Transfer credit failed after debit; funds debited but not credited",
                action="transfer", resource=f"account:{from_account_number}",
                extra={
                    "debit_transaction_id": debit.id,
                    "to_account": to_account_number,
                    "amount": str(debit.amount)
                }
            )
            raise

        log_action(
            self.logger, "info", "Transfer completed",
            action="transfer", resource=f"account:{from_account_number}",
            extra={
                "to_account": to_account_number,
                "amount": str(debit.amount),
                "debit_transaction_id": debit.id,
                "credit_transaction_id": credit.id
            }
        )
        return [debit, credit]

    def write_check(self, account_number: str, amount: AmountLike, payee: str) -> Transaction:
        """
        Raises:
            InvalidTransactionError: If the account is not a checking account
        """
        account = self.get_account(account_number)
        if not isinstance(account, CheckingAccount):
            raise InvalidTransactionError(
                "Check writing is only available for checking accounts"
            )
        transaction = account.write_check(amount, payee)
        self._log_transaction("write_check", transaction)
        return transaction

    def get_account_balance(self, account_number: str) -> Decimal:
        return self.get_account(account_number).balance

    def get_transaction_history(
        self,
        account_number: str,
        limit: Optional[int] = None
    ) -> List[Transaction]:
        account = self.get_account(account_number)
        if limit is None:
            return account.get_transaction_history()
        return account.get_recent_transactions(limit)

    def _log_transaction(self, action: str, transaction: Transaction) -> None:
        log_action(
            self.logger, "info", f"{transaction.transaction_type.label} posted",
            action=action, resource=f"account:{transaction.account_number}",
            extra={
                "transaction_id": transaction.id,
                "amount": str(transaction.amount),
                "balance_after": str(transaction.balance_after)
            }
        )

    # Maintenance

    def apply_monthly_maintenance_to_all_accounts(self) -> Dict[str, List[Transaction]]:
        """
        Run the monthly cycle on every active account; inactive accounts
        are skipped

        Returns:
            Account number -> transactions posted during maintenance
        """
        results: Dict[str, List[Transaction]] = {}
        for account in self._accounts.values():
            if account.is_active:
                results[account.account_number] = account.apply_monthly_maintenance()

        log_action(
            self.logger, "info", "Monthly maintenance applied",
            action="apply_monthly_maintenance", resource="bank",
            extra={
                "accounts_processed": len(results),
                "transactions_posted": sum(len(t) for t in results.values())
            }
        )
        return results

    def apply_monthly_maintenance_to_account(self, account_number: str) -> List[Transaction]:
        """
        Raises:
            InvalidTransactionError: If the account is inactive
        """
        account = self.get_account(account_number)
        posted = account.apply_monthly_maintenance()
        log_action(
            self.logger, "info", "Monthly maintenance applied",
            action="apply_monthly_maintenance", resource=f"account:{account_number}",
            extra={"transactions_posted": len(posted)}
        )
        return posted

    # Reporting

    def get_total_bank_balance(self) -> Decimal:
        return sum((a.balance for a in self._accounts.values()), ZERO)

    def get_total_customer_count(self) -> int:
        return len(self._customers)

    def get_active_customer_count(self) -> int:
        return len(self.get_active_customers())

    def get_total_account_count(self) -> int:
        return len(self._accounts)

    def get_active_account_count(self) -> int:
        return len(self.get_active_accounts())

    def get_account_type_counts(self) -> Dict[str, int]:
        """Account type display name -> number of accounts"""
        counts: Dict[str, int] = {}
        for account in self._accounts.values():
            counts[account.account_type] = counts.get(account.account_type, 0) + 1
        return counts

    def get_balance_by_product_type(self) -> Dict[ProductType, Decimal]:
        totals: Dict[ProductType, Decimal] = {}
        for account in self._accounts.values():
            totals[account.product_type] = totals.get(account.product_type, ZERO) + account.balance
        return totals

    def get_account_summary(self, account_number: str) -> str:
        return self.get_account(account_number).get_account_summary()

    def get_customer_summary(self, customer_id: str) -> str:
        return self.get_customer(customer_id).get_customer_summary()

    def get_bank_summary(self) -> str:
        lines = [
            "=== Bank Summary ===",
            f"Bank Name: {self.bank_name}",
            f"Bank Code: {self.bank_code}",
            f"Total Customers: {self.get_total_customer_count()}",
            f"Active Customers: {self.get_active_customer_count()}",
            f"Total Accounts: {self.get_total_account_count()}",
            f"Active Accounts: {self.get_active_account_count()}",
            f"Total Bank Balance: {format_amount(self.get_total_bank_balance())}",
        ]
        type_counts = self.get_account_type_counts()
        if type_counts:
            lines += ["", "--- Account Types ---"]
            lines += [f"• {name}: {count} accounts" for name, count in type_counts.items()]
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return (
            f"Bank: {self.bank_name} ({self.bank_code}) | Customers: {len(self._customers)} | "
            f"Accounts: {len(self._accounts)} | "
            f"Total Balance: {format_amount(self.get_total_bank_balance())}"
        )
