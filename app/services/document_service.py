import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.config.file_config import SHARE_CODE_MAX_ATTEMPTS
from app.models.document import Document
from app.schemas.document import DocumentCreate
from app.utils.share_codes import unused_share_code

logger = logging.getLogger(__name__)

# Columns a client may overwrite after upload
MUTABLE_FIELDS = {"title", "content", "tags", "is_public"}


class DocumentService:
    """Keyed storage for uploaded documents.

    Lookups return ``None`` and deletes return ``False`` for unknown ids so the
    HTTP layer decides how to report a miss. Storage failures roll the
    session back and propagate.
    """

    def list_documents(self, db: Session, user_id: Optional[int] = None) -> List[Document]:
        query = db.query(Document)
        if user_id is not None:
            query = query.filter(Document.user_id == user_id)
        return query.order_by(Document.id).all()

    def get_document(self, db: Session, document_id: int) -> Optional[Document]:
        return db.query(Document).filter(Document.id == document_id).first()

    def get_document_by_share_code(self, db: Session, share_code: str) -> Optional[Document]:
        return db.query(Document).filter(Document.share_code == share_code).first()

    def get_shared_document(self, db: Session, share_code: str) -> Optional[Document]:
        """Resolve a share link. Private documents are treated as missing."""
        document = self.get_document_by_share_code(db, share_code)
        if document is None or not document.is_public:
            return None
        return document

    def create_document(self, db: Session, document_data: DocumentCreate, user_id: Optional[int]) -> Document:
        try:
            document = Document(
                title=document_data.title,
                filename=document_data.filename,
                file_type=document_data.file_type,
                content=document_data.content,
                tags=list(document_data.tags),
                is_public=document_data.is_public,
                user_id=user_id,
            )
            db.add(document)
            db.commit()
            db.refresh(document)
            logger.info(f"Created document {document.id} for user {user_id}")
            return document
        except IntegrityError:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"User {user_id} does not exist"
            )
        except SQLAlchemyError:
            db.rollback()
            raise

    def update_document(self, db: Session, document_id: int, fields: Dict[str, Any]) -> Optional[Document]:
        unknown = set(fields) - MUTABLE_FIELDS
        if unknown:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Fields cannot be updated: {', '.join(sorted(unknown))}"
            )

        document = self.get_document(db, document_id)
        if document is None:
            return None
        try:
            for key, value in fields.items():
                setattr(document, key, list(value) if key == "tags" else value)
            document.updated_at = datetime.utcnow()
            db.commit()
            db.refresh(document)
            logger.info(f"Updated document {document_id}: {', '.join(sorted(fields)) or 'no fields'}")
            return document
        except SQLAlchemyError:
            db.rollback()
            raise

    def delete_document(self, db: Session, document_id: int) -> bool:
        document = self.get_document(db, document_id)
        if document is None:
            return False
        try:
            db.delete(document)
            db.commit()
            logger.info(f"Deleted document {document_id}")
            return True
        except SQLAlchemyError:
            db.rollback()
            raise

    def generate_share_code(self, db: Session, document_id: int) -> Optional[Document]:
        """Attach a unique share code, keeping an existing one."""
        document = self.get_document(db, document_id)
        if document is None or document.share_code:
            return document

        for attempt in range(SHARE_CODE_MAX_ATTEMPTS):
            share_code = unused_share_code(db, Document)
            try:
                document.share_code = share_code
                document.updated_at = datetime.utcnow()
                db.commit()
                db.refresh(document)
                logger.info(f"Generated share code for document {document_id}")
                return document
            except IntegrityError:
                # Lost a race for the same code
                db.rollback()
                logger.warning(f"Share code collision for document {document_id} (attempt {attempt + 1})")
            except SQLAlchemyError:
                db.rollback()
                raise
        raise RuntimeError(f"Could not allocate a unique share code for document {document_id}")

    def revoke_share_code(self, db: Session, document_id: int) -> Optional[Document]:
        document = self.get_document(db, document_id)
        if document is None or document.share_code is None:
            return document
        try:
            document.share_code = None
            document.updated_at = datetime.utcnow()
            db.commit()
            db.refresh(document)
            logger.info(f"Revoked share code for document {document_id}")
            return document
        except SQLAlchemyError:
            db.rollback()
            raise
