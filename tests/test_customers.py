"""
Test suite for customers module

Tests name/email validation on construction and update, account
collection handling, and activation cascades.
"""

import pytest
from decimal import Decimal

from retail_banking.accounts import SavingsAccount, CheckingAccount, ProductType
from retail_banking.customers import Customer, is_valid_email
from retail_banking.exceptions import InvalidAccountError
from retail_banking.identifiers import IdSequence


@pytest.fixture
def customer():
    return Customer("CUST1001", " Jane ", "Doe ", " Jane.Doe@Example.COM ")


@pytest.fixture
def ids():
    return IdSequence("TXN", 1000)


class TestEmailValidation:
    """Test email shape checks"""

    @pytest.mark.parametrize("email", [
        "jane@example.com",
        "jane.doe+bank@mail.example.co.uk",
        "j@e.io",
    ])
    def test_valid_emails(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", [
        "",
        "plainaddress",
        "@example.com",
        "jane@",
        "jane@example",
        "jane@.com",
        "jane@example.",
        "jane@@example.com",
        "jane@doe@example.com",
        "jane doe@example.com",
    ])
    def test_invalid_emails(self, email):
        assert not is_valid_email(email)


class TestCustomer:
    """Test Customer profile fields"""

    def test_construction_normalizes_fields(self, customer):
        assert customer.customer_id == "CUST1001"
        assert customer.first_name == "Jane"
        assert customer.last_name == "Doe"
        assert customer.full_name == "Jane Doe"
        assert customer.email == "jane.doe@example.com"
        assert customer.phone is None
        assert customer.address is None
        assert customer.is_active

    def test_construction_validation(self):
        with pytest.raises(InvalidAccountError, match="First name"):
            Customer("CUST1", "  ", "Doe", "jane@example.com")
        with pytest.raises(InvalidAccountError, match="Last name"):
            Customer("CUST1", "Jane", None, "jane@example.com")
        with pytest.raises(InvalidAccountError, match="email"):
            Customer("CUST1", "Jane", "Doe", "not-an-email")

    def test_setters_revalidate(self, customer):
        customer.first_name = "  Janet "
        customer.email = "JANET@example.org"

        assert customer.first_name == "Janet"
        assert customer.email == "janet@example.org"

        with pytest.raises(InvalidAccountError):
            customer.email = "janet.example.org"
        with pytest.raises(InvalidAccountError):
            customer.last_name = ""

        assert customer.email == "janet@example.org"
        assert customer.last_name == "Doe"

    def test_optional_contact_fields(self, customer):
        customer.phone = " 555-0100 "
        customer.address = " 1 Main St "

        assert customer.phone == "555-0100"
        assert customer.address == "1 Main St"

        customer.phone = None
        assert customer.phone is None
        assert "Address: 1 Main St" in customer.get_customer_summary()

    def test_contact_fields_must_be_text(self, customer):
        with pytest.raises(InvalidAccountError, match="Phone must be text"):
            Customer("CUST1", "Jane", "Doe", "jane@example.com", phone=5550100)
        with pytest.raises(InvalidAccountError, match="Address must be text"):
            customer.address = 42

        assert customer.address is None

    def test_equality_by_id(self, customer):
        twin = Customer("CUST1001", "Other", "Person", "other@example.com")
        stranger = Customer("CUST1002", "Jane", "Doe", "jane.doe@example.com")

        assert customer == twin
        assert customer != stranger
        assert len({customer, twin, stranger}) == 2


class TestCustomerAccounts:
    """Test the customer's account collection"""

    def test_add_account_is_idempotent(self, customer, ids):
        account = SavingsAccount("100001", customer.full_name, Decimal('500'), transaction_ids=ids)

        customer.add_account(account)
        customer.add_account(account)
        customer.add_account(None)

        assert customer.account_count == 1
        assert customer.get_account("100001") is account
        assert customer.get_account("999999") is None

    def test_accounts_are_returned_as_copies(self, customer, ids):
        customer.add_account(
            SavingsAccount("100001", customer.full_name, Decimal('500'), transaction_ids=ids)
        )

        customer.get_accounts().clear()
        customer.get_active_accounts().clear()

        assert customer.account_count == 1

    def test_balances_and_types(self, customer, ids):
        savings = SavingsAccount("100001", customer.full_name, Decimal('500.00'), transaction_ids=ids)
        checking = CheckingAccount("100002", customer.full_name, Decimal('120.50'), transaction_ids=ids)
        customer.add_account(savings)
        customer.add_account(checking)

        assert customer.total_balance == Decimal('620.50')
        assert customer.get_accounts_by_type(ProductType.CHECKING) == [checking]

        assert customer.remove_account(checking)
        assert not customer.remove_account(checking)
        assert customer.get_accounts() == [savings]

    def test_deactivation_cascades_but_activation_does_not(self, customer, ids):
        savings = SavingsAccount("100001", customer.full_name, Decimal('500'), transaction_ids=ids)
        checking = CheckingAccount("100002", customer.full_name, Decimal('100'), transaction_ids=ids)
        customer.add_account(savings)
        customer.add_account(checking)

        customer.deactivate_customer()

        assert not customer.is_active
        assert not savings.is_active
        assert not checking.is_active
        assert customer.active_account_count == 0

        customer.activate_customer()

        assert customer.is_active
        assert customer.get_active_accounts() == []

    def test_summary(self, customer, ids):
        customer.add_account(
            SavingsAccount("100001", customer.full_name, Decimal('500'), transaction_ids=ids)
        )

        summary = customer.get_customer_summary()

        assert "Customer ID: CUST1001" in summary
        assert "Total Balance: $500.00" in summary
        assert "--- Accounts ---" in summary
        assert "Accounts: 1" in str(customer)
