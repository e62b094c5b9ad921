from .customer import Customer, CustomerCreate, CustomerUpdate, CustomerCreated, CustomerList
from .customer_attachment import CustomerAttachment, CustomerAttachmentCreated, CustomerAttachmentList
