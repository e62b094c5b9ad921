import uuid

import pytest
from sqlalchemy import func, select

from app.models.customer import Customer
from app.models.customer_attachment import CustomerAttachment


@pytest.mark.asyncio
async def test_customer_and_attachments_persist(session_factory):
    async with session_factory() as session:
        customer = Customer(name="Acme", email="a@acme.com")
        session.add(customer)
        await session.commit()
        await session.refresh(customer)

        # Identifiers are generated on insert
        assert uuid.UUID(customer.id)

        session.add(CustomerAttachment(customer_id=customer.id, file_name="logo.png", image_data=b"\x89PNG"))
        session.add(CustomerAttachment(customer_id=customer.id, file_name="card.jpg", image_data=b"\xff\xd8"))
        await session.commit()

        result = await session.execute(
            select(CustomerAttachment).where(CustomerAttachment.customer_id == customer.id)
        )
        rows = result.scalars().all()
        assert sorted(r.file_name for r in rows) == ["card.jpg", "logo.png"]


@pytest.mark.asyncio
async def test_deleting_customer_cascades_to_attachments(session_factory):
    async with session_factory() as session:
        keep = Customer(name="Keep", email="keep@example.com")
        drop = Customer(name="Drop", email="drop@example.com")
        session.add_all([keep, drop])
        await session.commit()

        session.add(CustomerAttachment(customer_id=keep.id, file_name="a.bin", image_data=b"a"))
        session.add(CustomerAttachment(customer_id=drop.id, file_name="b.bin", image_data=b"b"))
        session.add(CustomerAttachment(customer_id=drop.id, file_name="c.bin", image_data=b"c"))
        await session.commit()
        drop_id = drop.id

    async with session_factory() as session:
        drop = await session.get(Customer, drop_id)
        await session.delete(drop)
        await session.commit()

    async with session_factory() as session:
        remaining = await session.execute(select(func.count()).select_from(CustomerAttachment))
        assert remaining.scalar() == 1
        orphans = await session.execute(
            select(func.count()).select_from(CustomerAttachment).where(CustomerAttachment.customer_id == drop_id)
        )
        assert orphans.scalar() == 0


@pytest.mark.asyncio
async def test_attachment_requires_existing_customer(session_factory):
    from sqlalchemy.exc import IntegrityError

    async with session_factory() as session:
        session.add(CustomerAttachment(customer_id=str(uuid.uuid4()), file_name="x", image_data=b"x"))
        with pytest.raises(IntegrityError):
            await session.commit()


def test_normalize_id():
    from app.models.base import normalize_id

    value = str(uuid.uuid4())
    assert normalize_id(value.upper()) == value
    assert normalize_id("not-a-uuid") == "not-a-uuid"
