"""
Shared API dependencies and error translation
"""

from fastapi import HTTPException, status

from ..exceptions import (
    BankingError, EntityNotFoundError, InsufficientFundsError
)
from ..service import BankingService


banking_service = BankingService()


def get_banking_service() -> BankingService:
    return banking_service


def to_http_exception(error: BankingError) -> HTTPException:
    """Map a banking error to the HTTP response the client sees"""
    if isinstance(error, EntityNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, InsufficientFundsError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": str(error),
                "requested_amount": str(error.requested_amount),
                "available_balance": str(error.available_balance),
            }
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
