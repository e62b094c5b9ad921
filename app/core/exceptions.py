"""Errors raised by the data access layer.

The application translates these into HTTP responses in ``app.main``.
"""


class NotFoundError(Exception):
    """A referenced customer or attachment does not exist"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CustomerNotFound(NotFoundError):
    def __init__(self, customer_id: str):
        super().__init__(f"Customer {customer_id} not found")


class CustomerAttachmentNotFound(NotFoundError):
    def __init__(self, attachment_id: str):
        super().__init__(f"Customer attachment {attachment_id} not found")
