"""
Pydantic schemas for API requests and responses
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, Field

from ..accounts import Account, CheckingAccount, SavingsAccount
from ..customers import Customer


# Customer schemas
class CreateCustomerRequest(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None


# Account schemas
class OpenSavingsRequest(BaseModel):
    customer_id: str
    initial_balance: str = Field("0", description="Decimal amount as string")


class OpenCheckingRequest(BaseModel):
    customer_id: str
    initial_balance: str = Field("0", description="Decimal amount as string")
    overdraft_protection: Optional[bool] = None


# Transaction schemas
class DepositRequest(BaseModel):
    account_number: str
    amount: str = Field(..., description="Decimal amount as string")


class WithdrawRequest(BaseModel):
    account_number: str
    amount: str = Field(..., description="Decimal amount as string")


class TransferRequest(BaseModel):
    from_account_number: str
    to_account_number: str
    amount: str = Field(..., description="Decimal amount as string")


class CheckRequest(BaseModel):
    account_number: str
    amount: str = Field(..., description="Decimal amount as string")
    payee: str


def customer_to_dict(customer: Customer) -> Dict[str, Any]:
    return {
        "customer_id": customer.customer_id,
        "first_name": customer.first_name,
        "last_name": customer.last_name,
        "email": customer.email,
        "phone": customer.phone,
        "address": customer.address,
        "is_active": customer.is_active,
        "date_joined": customer.date_joined.isoformat(),
        "account_numbers": [a.account_number for a in customer.get_accounts()],
        "total_balance": str(customer.total_balance),
    }


def account_to_dict(account: Account) -> Dict[str, Any]:
    result = {
        "account_number": account.account_number,
        "product_type": account.product_type.value,
        "account_type": account.account_type,
        "holder_name": account.holder_name,
        "balance": str(account.balance),
        "minimum_balance": str(account.minimum_balance),
        "is_active": account.is_active,
        "date_opened": account.date_opened.isoformat(),
        "transaction_count": account.transaction_count,
    }
    if isinstance(account, SavingsAccount):
        result["withdrawals_this_month"] = account.withdrawals_this_month
        result["remaining_free_withdrawals"] = account.remaining_free_withdrawals
    elif isinstance(account, CheckingAccount):
        result["overdraft_protection"] = account.overdraft_protection
        result["available_overdraft"] = str(account.available_overdraft)
        result["checks_written_this_month"] = account.checks_written_this_month
    return result
