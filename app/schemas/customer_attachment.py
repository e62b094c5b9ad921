from typing import List
import base64

from pydantic import BaseModel, field_serializer


class CustomerAttachment(BaseModel):
    id: str
    file_name: str
    image_data: bytes

    # JSON carries the raw file content as standard base64
    @field_serializer("image_data", when_used="json")
    def serialize_image_data(self, value: bytes) -> str:
        return base64.b64encode(value).decode("ascii")

    class Config:
        from_attributes = True


class CustomerAttachmentCreated(BaseModel):
    id: str


CustomerAttachmentList = List[CustomerAttachment]
