"""
Transaction endpoints
"""

from fastapi import APIRouter, Depends

from .dependencies import get_banking_service, to_http_exception
from .schemas import DepositRequest, WithdrawRequest, TransferRequest, CheckRequest
from ..exceptions import BankingError
from ..service import BankingService


router = APIRouter()


@router.post("/deposit")
async def deposit(
    request: DepositRequest,
    service: BankingService = Depends(get_banking_service)
):
    """Make a deposit"""
    try:
        transaction = service.deposit(request.account_number, request.amount)
    except BankingError as e:
        raise to_http_exception(e)
    return {"transaction": transaction.to_dict(), "message": "Deposit processed successfully"}


@router.post("/withdraw")
async def withdraw(
    request: WithdrawRequest,
    service: BankingService = Depends(get_banking_service)
):
    """Make a withdrawal"""
    try:
        transaction = service.withdraw(request.account_number, request.amount)
    except BankingError as e:
        raise to_http_exception(e)
    return {"transaction": transaction.to_dict(), "message": "Withdrawal processed successfully"}


@router.post("/transfer")
async def transfer(
    request: TransferRequest,
    service: BankingService = Depends(get_banking_service)
):
    """Make a transfer between accounts"""
    try:
        debit, credit = service.transfer(
            request.from_account_number, request.to_account_number, request.amount
        )
    except BankingError as e:
        raise to_http_exception(e)
    return {
        "debit": debit.to_dict(),
        "credit": credit.to_dict(),
        "message": "Transfer processed successfully"
    }


@router.post("/check")
async def write_check(
    request: CheckRequest,
    service: BankingService = Depends(get_banking_service)
):
    """Write a check from a checking account"""
    try:
        transaction = service.write_check(request.account_number, request.amount, request.payee)
    except BankingError as e:
        raise to_http_exception(e)
    return {"transaction": transaction.to_dict(), "message": "Check processed successfully"}
