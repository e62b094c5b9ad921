from typing import List
from pydantic import BaseModel, Field

from ..models.customer import NAME_MAX_LENGTH


class CustomerBase(BaseModel):
    """Base customer schema"""
    name: str = Field(..., max_length=NAME_MAX_LENGTH)
    email: str


class CustomerCreate(CustomerBase):
    """Schema for creating a customer"""
    pass


class CustomerUpdate(CustomerBase):
    """Schema for updating a customer, name and email are both overwritten"""
    pass


class Customer(CustomerBase):
    """Customer schema for responses"""
    id: str

    class Config:
        from_attributes = True


class CustomerCreated(BaseModel):
    """Identifier of a newly created customer"""
    id: str


CustomerList = List[Customer]
