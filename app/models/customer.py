from sqlalchemy import Column, String, Text
from sqlalchemy.orm import relationship
from .base import UUIDBaseModel

NAME_MAX_LENGTH = 150


class Customer(UUIDBaseModel):
    """Customer owning a collection of attachments"""
    __tablename__ = "customers"

    name = Column(String(NAME_MAX_LENGTH), nullable=False)
    email = Column(Text, nullable=False)

    # Relationships
    # Children are removed by the ON DELETE CASCADE foreign key, not by the ORM
    attachments = relationship(
        "CustomerAttachment",
        back_populates="customer",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
