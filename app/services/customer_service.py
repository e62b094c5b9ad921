import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import CustomerNotFound
from ..models.base import normalize_id
from ..models.customer import Customer

logger = logging.getLogger(__name__)


class CustomerService:
    """Reads and writes customers within a request-scoped session"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_customers(self) -> List[Customer]:
        result = await self.db.execute(select(Customer))
        return list(result.scalars().all())

    async def get_customer(self, customer_id: str) -> Customer:
        """Return the customer or raise CustomerNotFound"""
        result = await self.db.execute(
            select(Customer).where(Customer.id == normalize_id(customer_id))
        )
        customer = result.scalar_one_or_none()
        if customer is None:
            logger.debug(f"Customer {customer_id} not found")
            raise CustomerNotFound(customer_id)
        return customer

    async def create_customer(self, name: str, email: str) -> Customer:
        customer = Customer(name=name, email=email)
        self.db.add(customer)
        await self.db.commit()
        await self.db.refresh(customer)

        logger.info(f"Created customer {customer.id}")
        return customer

    async def update_customer(self, customer_id: str, name: str, email: str) -> Customer:
        customer = await self.get_customer(customer_id)

        customer.name = name
        customer.email = email
        await self.db.commit()

        logger.info(f"Updated customer {customer_id}")
        return customer

    async def delete_customer(self, customer_id: str) -> None:
        """Delete the customer, its attachments go with it via the FK cascade"""
        customer = await self.get_customer(customer_id)

        await self.db.delete(customer)
        await self.db.commit()

        logger.info(f"Deleted customer {customer_id}")
