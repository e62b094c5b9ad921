from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..db.database import get_db
from ..services.customer_service import CustomerService
from ..services.customer_attachment_service import CustomerAttachmentService


async def get_customer_service(db: AsyncSession = Depends(get_db)) -> CustomerService:
    """Dependency to get the customer access layer for this request"""
    return CustomerService(db)


async def get_customer_attachment_service(
    db: AsyncSession = Depends(get_db),
) -> CustomerAttachmentService:
    """Dependency to get the attachment access layer for this request"""
    return CustomerAttachmentService(db)
