from .customer import Customer
from .customer_attachment import CustomerAttachment
