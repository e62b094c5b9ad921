from typing import Any
from fastapi import APIRouter, Depends, File, Request, Response, UploadFile, status

from ....models.customer_attachment import CustomerAttachment as CustomerAttachmentModel
from ....schemas.customer_attachment import CustomerAttachment, CustomerAttachmentCreated, CustomerAttachmentList
from ....services.customer_attachment_service import CustomerAttachmentService
from ...deps import get_customer_attachment_service

router = APIRouter()


def _serialize_attachment(a: CustomerAttachmentModel) -> dict:
    return {
        "id": a.id,
        "file_name": a.file_name,
        "image_data": a.image_data,
    }


@router.get(
    "/{customer_id}/attachments",
    response_model=CustomerAttachmentList,
    responses={404: {"description": "Customer not found"}},
)
async def list_customer_attachments(
    customer_id: str,
    service: CustomerAttachmentService = Depends(get_customer_attachment_service),
) -> Any:
    """Get all attachments of a customer"""
    attachments = await service.list_attachments(customer_id)
    return [CustomerAttachment.model_validate(_serialize_attachment(a)) for a in attachments]


@router.get(
    "/{customer_id}/attachments/{attachment_id}",
    response_model=CustomerAttachment,
    responses={404: {"description": "Customer or attachment not found"}},
)
async def get_customer_attachment(
    customer_id: str,
    attachment_id: str,
    service: CustomerAttachmentService = Depends(get_customer_attachment_service),
) -> Any:
    """Get a specific attachment by ID"""
    attachment = await service.get_attachment(customer_id, attachment_id)
    return CustomerAttachment.model_validate(_serialize_attachment(attachment))


@router.post(
    "/{customer_id}/attachments",
    response_model=CustomerAttachmentCreated,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"description": "Customer not found"}},
)
async def upload_customer_attachment(
    customer_id: str,
    request: Request,
    response: Response,
    file: UploadFile = File(...),
    service: CustomerAttachmentService = Depends(get_customer_attachment_service),
) -> Any:
    """Upload an attachment for a customer, the file content is stored in the database"""
    content = await file.read()
    attachment = await service.create_attachment(customer_id, file.filename or "", content)

    response.headers["Location"] = str(
        request.url_for("get_customer_attachment", customer_id=customer_id, attachment_id=attachment.id)
    )
    return CustomerAttachmentCreated(id=attachment.id)


@router.delete(
    "/{customer_id}/attachments/{attachment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses={404: {"description": "Customer or attachment not found"}},
)
async def delete_customer_attachment(
    customer_id: str,
    attachment_id: str,
    service: CustomerAttachmentService = Depends(get_customer_attachment_service),
):
    """Delete an attachment"""
    await service.delete_attachment(customer_id, attachment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
