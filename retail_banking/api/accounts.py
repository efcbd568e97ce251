"""
Account management endpoints
"""

from typing import Optional
from fastapi import APIRouter, Depends, status

from .dependencies import get_banking_service, to_http_exception
from .schemas import OpenSavingsRequest, OpenCheckingRequest, account_to_dict
from ..exceptions import BankingError
from ..service import BankingService


router = APIRouter()


@router.post("/savings", status_code=status.HTTP_201_CREATED)
async def open_savings_account(
    request: OpenSavingsRequest,
    service: BankingService = Depends(get_banking_service)
):
    """Open a savings account"""
    try:
        account = service.create_savings_account(request.customer_id, request.initial_balance)
    except BankingError as e:
        raise to_http_exception(e)
    return account_to_dict(account)


@router.post("/checking", status_code=status.HTTP_201_CREATED)
async def open_checking_account(
    request: OpenCheckingRequest,
    service: BankingService = Depends(get_banking_service)
):
    """Open a checking account"""
    try:
        account = service.create_checking_account(
            request.customer_id,
            request.initial_balance,
            overdraft_protection=request.overdraft_protection
        )
    except BankingError as e:
        raise to_http_exception(e)
    return account_to_dict(account)


@router.get("/{account_number}")
async def get_account(
    account_number: str,
    service: BankingService = Depends(get_banking_service)
):
    """Get account details"""
    try:
        account = service.get_account(account_number)
    except BankingError as e:
        raise to_http_exception(e)
    return account_to_dict(account)


@router.get("/{account_number}/transactions")
async def get_account_transactions(
    account_number: str,
    limit: Optional[int] = None,
    service: BankingService = Depends(get_banking_service)
):
    """Get transaction history for account, oldest first"""
    try:
        transactions = service.get_transaction_history(account_number, limit)
    except BankingError as e:
        raise to_http_exception(e)
    return {"transactions": [t.to_dict() for t in transactions]}


@router.get("/{account_number}/summary")
async def get_account_summary(
    account_number: str,
    service: BankingService = Depends(get_banking_service)
):
    try:
        return {"summary": service.get_account_summary(account_number)}
    except BankingError as e:
        raise to_http_exception(e)


@router.post("/{account_number}/deactivate")
async def deactivate_account(
    account_number: str,
    service: BankingService = Depends(get_banking_service)
):
    try:
        account = service.deactivate_account(account_number)
    except BankingError as e:
        raise to_http_exception(e)
    return account_to_dict(account)


@router.post("/{account_number}/activate")
async def activate_account(
    account_number: str,
    service: BankingService = Depends(get_banking_service)
):
    try:
        account = service.activate_account(account_number)
    except BankingError as e:
        raise to_http_exception(e)
    return account_to_dict(account)


@router.post("/{account_number}/maintenance")
async def apply_account_maintenance(
    account_number: str,
    service: BankingService = Depends(get_banking_service)
):
    """Run the monthly cycle on one account"""
    try:
        posted = service.apply_monthly_maintenance_to_account(account_number)
    except BankingError as e:
        raise to_http_exception(e)
    return {"transactions": [t.to_dict() for t in posted]}
