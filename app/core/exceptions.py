"""
Exceções de domínio mapeadas para respostas HTTP
"""
from typing import Optional

from fastapi import status


class AppError(Exception):
    """Base para erros de negócio com status HTTP associado"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed."

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationFailedError(AppError):
    """Entrada ausente ou inválida"""

    default_message = "Invalid request data."

    def __init__(self, message: Optional[str] = None, field: Optional[str] = None):
        self.field = field
        super().__init__(message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found."


class PropertyNotFoundError(NotFoundError):
    default_message = "Property not found."


class DuplicateTitleError(AppError):
    """Violação da unicidade do slug"""

    default_message = "Property with this title already exists."


class ImageUploadError(ValidationFailedError):
    default_message = "Failed to upload image."
