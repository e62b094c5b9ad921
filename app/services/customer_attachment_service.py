import logging
from typing import List, Optional

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..core.exceptions import CustomerAttachmentNotFound
from ..models.base import normalize_id
from ..models.customer_attachment import CustomerAttachment
from .customer_service import CustomerService

logger = logging.getLogger(__name__)


class CustomerAttachmentService:
    """Reads and writes attachments of a customer.

    Every operation first checks that the customer exists. When ``scoped`` is
    true an attachment is only found if it belongs to that customer; when
    false it is looked up by its own id alone.
    """

    def __init__(self, db: AsyncSession, scoped: Optional[bool] = None):
        self.db = db
        self.customers = CustomerService(db)
        self.scoped = settings.ATTACHMENT_LOOKUP_SCOPED if scoped is None else scoped

    async def list_attachments(self, customer_id: str) -> List[CustomerAttachment]:
        customer = await self.customers.get_customer(customer_id)

        result = await self.db.execute(
            select(CustomerAttachment).where(CustomerAttachment.customer_id == customer.id)
        )
        return list(result.scalars().all())

    async def get_attachment(self, customer_id: str, attachment_id: str) -> CustomerAttachment:
        customer = await self.customers.get_customer(customer_id)

        conditions = [CustomerAttachment.id == normalize_id(attachment_id)]
        if self.scoped:
            conditions.append(CustomerAttachment.customer_id == customer.id)

        result = await self.db.execute(select(CustomerAttachment).where(and_(*conditions)))
        attachment = result.scalar_one_or_none()
        if attachment is None:
            logger.debug(f"Attachment {attachment_id} not found for customer {customer_id}")
            raise CustomerAttachmentNotFound(attachment_id)
        return attachment

    async def create_attachment(self, customer_id: str, file_name: str, content: bytes) -> CustomerAttachment:
        customer = await self.customers.get_customer(customer_id)

        attachment = CustomerAttachment(
            customer_id=customer.id,
            file_name=file_name,
            image_data=content,
        )
        self.db.add(attachment)
        await self.db.commit()
        await self.db.refresh(attachment)

        logger.info(f"Stored attachment {attachment.id} ({len(content)} bytes) for customer {customer_id}")
        return attachment

    async def delete_attachment(self, customer_id: str, attachment_id: str) -> None:
        attachment = await self.get_attachment(customer_id, attachment_id)

        await self.db.delete(attachment)
        await self.db.commit()

        logger.info(f"Deleted attachment {attachment_id} of customer {customer_id}")
