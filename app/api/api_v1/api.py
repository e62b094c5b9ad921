from fastapi import APIRouter
from .endpoints import customers, customer_attachments

api_router = APIRouter()

api_router.include_router(customers.router, prefix="/customers", tags=["customers"])
api_router.include_router(customer_attachments.router, prefix="/customers", tags=["customer attachments"])
