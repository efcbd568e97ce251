"""
Bank reporting and maintenance endpoints
"""

from fastapi import APIRouter, Depends

from .dependencies import get_banking_service
from ..service import BankingService


router = APIRouter()


@router.get("/bank")
async def get_bank_report(service: BankingService = Depends(get_banking_service)):
    """Bank-wide totals and counts"""
    return {
        "bank_name": service.bank_name,
        "bank_code": service.bank_code,
        "total_customers": service.get_total_customer_count(),
        "active_customers": service.get_active_customer_count(),
        "total_accounts": service.get_total_account_count(),
        "active_accounts": service.get_active_account_count(),
        "total_balance": str(service.get_total_bank_balance()),
        "account_type_counts": service.get_account_type_counts(),
        "summary": service.get_bank_summary(),
    }


@router.post("/maintenance")
async def apply_monthly_maintenance(service: BankingService = Depends(get_banking_service)):
    """Run the monthly cycle on every active account"""
    results = service.apply_monthly_maintenance_to_all_accounts()
    return {
        "accounts_processed": len(results),
        "transactions": {
            number: [t.to_dict() for t in posted] for number, posted in results.items()
        }
    }
