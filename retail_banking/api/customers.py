"""
Customer management endpoints
"""

from fastapi import APIRouter, Depends, status

from .dependencies import get_banking_service, to_http_exception
from .schemas import CreateCustomerRequest, customer_to_dict
from ..exceptions import BankingError
from ..service import BankingService


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_customer(
    request: CreateCustomerRequest,
    service: BankingService = Depends(get_banking_service)
):
    """Create a new customer"""
    try:
        customer = service.create_customer(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            phone=request.phone,
            address=request.address
        )
    except BankingError as e:
        raise to_http_exception(e)

    return {"customer_id": customer.customer_id, "message": "Customer created successfully"}


@router.get("")
async def list_customers(service: BankingService = Depends(get_banking_service)):
    """List all customers"""
    return {"customers": [customer_to_dict(c) for c in service.get_all_customers()]}


@router.get("/{customer_id}")
async def get_customer(
    customer_id: str,
    service: BankingService = Depends(get_banking_service)
):
    """Get customer by ID"""
    try:
        customer = service.get_customer(customer_id)
    except BankingError as e:
        raise to_http_exception(e)
    return customer_to_dict(customer)


@router.get("/{customer_id}/summary")
async def get_customer_summary(
    customer_id: str,
    service: BankingService = Depends(get_banking_service)
):
    try:
        return {"summary": service.get_customer_summary(customer_id)}
    except BankingError as e:
        raise to_http_exception(e)


@router.post("/{customer_id}/deactivate")
async def deactivate_customer(
    customer_id: str,
    service: BankingService = Depends(get_banking_service)
):
    """Deactivate a customer and all their accounts"""
    try:
        customer = service.deactivate_customer(customer_id)
    except BankingError as e:
        raise to_http_exception(e)
    return customer_to_dict(customer)


@router.post("/{customer_id}/activate")
async def activate_customer(
    customer_id: str,
    service: BankingService = Depends(get_banking_service)
):
    try:
        customer = service.activate_customer(customer_id)
    except BankingError as e:
        raise to_http_exception(e)
    return customer_to_dict(customer)
