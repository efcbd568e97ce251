"""
Test suite for transactions module

Tests immutable transaction records, type metadata, and serialization.
"""

import dataclasses
import pytest
from decimal import Decimal

from retail_banking.transactions import Transaction, TransactionType


def make_transaction(**overrides):
    values = dict(
        id="TXN1001",
        account_number="100001",
        transaction_type=TransactionType.DEPOSIT,
        amount=Decimal('250.00'),
        description="Cash deposit",
        balance_after=Decimal('350.00'),
    )
    values.update(overrides)
    return Transaction(**values)


class TestTransactionType:
    """Test transaction type metadata"""

    def test_codes_and_labels(self):
        assert TransactionType.TRANSFER_OUT.code == "transfer_out"
        assert TransactionType.TRANSFER_OUT.label == "Transfer Out"
        assert str(TransactionType.FEE_DEBIT) == "Fee Debit"

    def test_credit_types(self):
        assert TransactionType.DEPOSIT.is_credit
        assert TransactionType.TRANSFER_IN.is_credit
        assert TransactionType.INTEREST_CREDIT.is_credit
        assert not TransactionType.WITHDRAWAL.is_credit
        assert not TransactionType.TRANSFER_OUT.is_credit
        assert not TransactionType.FEE_DEBIT.is_credit

    def test_from_code(self):
        assert TransactionType.from_code("interest_credit") is TransactionType.INTEREST_CREDIT
        with pytest.raises(ValueError, match="Unknown transaction type"):
            TransactionType.from_code("refund")


class TestTransaction:
    """Test Transaction record behavior"""

    def test_valid_transaction(self):
        txn = make_transaction()

        assert txn.id == "TXN1001"
        assert txn.account_number == "100001"
        assert txn.amount == Decimal('250.00')
        assert txn.balance_after == Decimal('350.00')
        assert txn.timestamp.tzinfo is not None

    def test_transaction_is_immutable(self):
        txn = make_transaction()

        with pytest.raises(dataclasses.FrozenInstanceError):
            txn.amount = Decimal('1.00')

    def test_amount_must_be_positive(self):
        with pytest.raises(ValueError, match="must be positive"):
            make_transaction(amount=Decimal('0'))
        with pytest.raises(ValueError, match="must be positive"):
            make_transaction(amount=Decimal('-5.00'))

    def test_signed_amount(self):
        assert make_transaction().signed_amount == Decimal('250.00')
        fee = make_transaction(transaction_type=TransactionType.FEE_DEBIT, amount=Decimal('35.00'))
        assert fee.signed_amount == Decimal('-35.00')

    def test_to_dict(self):
        data = make_transaction(transaction_type=TransactionType.WITHDRAWAL).to_dict()

        assert data["transaction_type"] == "withdrawal"
        assert data["amount"] == "250.00"
        assert data["balance_after"] == "350.00"
        assert data["description"] == "Cash deposit"
        assert "timestamp" in data

    def test_formatting(self):
        txn = make_transaction()

        assert "Deposit: $250.00 (Balance: $350.00) [Cash deposit]" in txn.format_line()
        assert str(txn).startswith("TXN1001")
