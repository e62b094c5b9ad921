from sqlalchemy import Column, String, ForeignKey, LargeBinary, Text
from sqlalchemy.orm import relationship
from .base import UUIDBaseModel


class CustomerAttachment(UUIDBaseModel):
    """Attachment linked to a customer, file content stored in-row"""
    __tablename__ = "customer_attachments"

    customer_id = Column(
        String(36),
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
    )

    file_name = Column(Text, nullable=False)
    image_data = Column(LargeBinary, nullable=False)

    # Relationships
    customer = relationship("Customer", back_populates="attachments")
