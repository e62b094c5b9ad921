from typing import Any
from fastapi import APIRouter, Depends, Request, Response, status

from ....models.customer import Customer as CustomerModel
from ....schemas.customer import Customer, CustomerCreate, CustomerUpdate, CustomerCreated, CustomerList
from ....services.customer_service import CustomerService
from ...deps import get_customer_service

router = APIRouter()


def _serialize_customer(c: CustomerModel) -> dict:
    return {
        "id": c.id,
        "name": c.name,
        "email": c.email,
    }


@router.get("", response_model=CustomerList)
async def get_customers(
    service: CustomerService = Depends(get_customer_service),
) -> Any:
    """Get all customers"""
    customers = await service.list_customers()
    return [Customer.model_validate(_serialize_customer(c)) for c in customers]


@router.get("/{customer_id}", response_model=Customer, responses={404: {"description": "Customer not found"}})
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> Any:
    """Get a specific customer by ID"""
    customer = await service.get_customer(customer_id)
    return Customer.model_validate(_serialize_customer(customer))


@router.post("", response_model=CustomerCreated, status_code=status.HTTP_201_CREATED)
async def create_customer(
    customer_data: CustomerCreate,
    request: Request,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
) -> Any:
    """Create a new customer and return its ID"""
    customer = await service.create_customer(customer_data.name, customer_data.email)
    response.headers["Location"] = str(request.url_for("get_customer", customer_id=customer.id))
    return CustomerCreated(id=customer.id)


@router.put(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={404: {"description": "Customer not found"}},
)
async def update_customer(
    customer_id: str,
    customer_data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    """Overwrite a customer's name and email"""
    await service.update_customer(customer_id, customer_data.name, customer_data.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={404: {"description": "Customer not found"}},
)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
):
    """Delete a customer together with all of its attachments"""
    await service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
