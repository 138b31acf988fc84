import logging
from typing import Optional

from fastapi import UploadFile, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.config.file_config import (
    DEFAULT_MIME_TYPE,
    PDF_MIME_TYPE,
    PDF_PLACEHOLDER_CONTENT,
    PLAIN_TEXT_MIME_TYPE,
    UNSUPPORTED_PLACEHOLDER_CONTENT,
)
from app.dependencies import RequestContext
from app.models.document import Document
from app.schemas.document import DocumentCreate, DocumentUploadForm
from app.services.document_service import DocumentService
from app.services.file_validation_service import FileValidationService
from app.utils.errors import format_validation_errors

logger = logging.getLogger(__name__)


def base_mime_type(file_type: str) -> str:
    """``"text/plain; charset=utf-8"`` -> ``"text/plain"``"""
    return file_type.split(";", 1)[0].strip().lower()


class DocumentUploadService:
    def __init__(self, document_service: DocumentService):
        self.document_service = document_service

    @staticmethod
    def extract_content(file_type: str, data: bytes) -> str:
        mime_type = base_mime_type(file_type)
        if mime_type == PLAIN_TEXT_MIME_TYPE:
            return data.decode("utf-8", errors="replace")
        if mime_type == PDF_MIME_TYPE:
            return PDF_PLACEHOLDER_CONTENT
        return UNSUPPORTED_PLACEHOLDER_CONTENT

    @staticmethod
    def parse_form(
        title: Optional[str] = None,
        tags: Optional[str] = None,
        is_public: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> DocumentUploadForm:
        try:
            return DocumentUploadForm(
                title=title,
                tags=tags,
                is_public=is_public,
                user_id=user_id,
            )
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=format_validation_errors(e.errors())
            )

    async def upload_document(
        self,
        db: Session,
        context: RequestContext,
        file: Optional[UploadFile],
        title: Optional[str] = None,
        tags: Optional[str] = None,
        is_public: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> Document:
        """Validate an upload, extract its text and store the document.

        The owner is the numeric ``userId`` form field when present, otherwise
        the caller from ``context``.
        """
        FileValidationService.validate_file(file)
        form = self.parse_form(title=title, tags=tags, is_public=is_public, user_id=user_id)

        data = await file.read()
        file_type = file.content_type or DEFAULT_MIME_TYPE
        content = self.extract_content(file_type, data)

        document_data = DocumentCreate(
            title=form.title or file.filename,
            filename=file.filename,
            file_type=file_type,
            content=content,
            tags=form.tags,
            is_public=form.is_public,
        )
        owner_id = form.user_id if form.user_id is not None else context.user_id
        logger.info(f"Storing upload {file.filename!r} ({file_type}, {len(data)} bytes) for user {owner_id}")
        return self.document_service.create_document(db, document_data, owner_id)
