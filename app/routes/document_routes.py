from fastapi import APIRouter, Depends, HTTPException, status, File, Form, UploadFile, Body, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

# App imports
from app.db.session import get_db
from app.dependencies import RequestContext, get_request_context
from app.schemas.document import DeleteResponse, DocumentResponse, DocumentUpdate
from app.services.document_service import DocumentService
from app.services.upload_service import DocumentUploadService

logger = logging.getLogger(__name__)

document_router = APIRouter(prefix="/api/documents", tags=["documents"])
shared_router = APIRouter(prefix="/api/shared", tags=["shared"])

# Initialize services
document_service = DocumentService()
upload_service = DocumentUploadService(document_service)


def _not_found(detail: str = "Document not found") -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@document_router.get("", response_model=List[DocumentResponse])
async def list_documents(
    user_id: Optional[int] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    """List documents, optionally only those owned by ``userId``"""
    try:
        return document_service.list_documents(db, user_id)
    except Exception:
        logger.exception("Failed to fetch documents")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch documents"
        )


@document_router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int,
    db: Session = Depends(get_db)
):
    try:
        document = document_service.get_document(db, document_id)
        if not document:
            raise _not_found()
        return document

    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to fetch document {document_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch document"
        )


@document_router.post("", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    file: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    is_public: Optional[str] = Form(None, alias="isPublic"),
    user_id: Optional[str] = Form(None, alias="userId"),
    db: Session = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Upload a file and store it as a document with its extracted text"""
    try:
        return await upload_service.upload_document(
            db,
            context,
            file,
            title=title,
            tags=tags,
            is_public=is_public,
            user_id=user_id,
        )

    except HTTPException as e:
        raise e
    except Exception:
        logger.exception("Upload error")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to upload document"
        )


@document_router.put("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: int,
    updates: DocumentUpdate = Body(...),
    db: Session = Depends(get_db)
):
    """Overwrite the supplied fields; omitted fields stay as they are"""
    try:
        document = document_service.update_document(
            db, document_id, updates.dict(exclude_unset=True)
        )
        if not document:
            raise _not_found()
        return document

    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to update document {document_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update document"
        )


@document_router.delete("/{document_id}", response_model=DeleteResponse)
async def delete_document(
    document_id: int,
    db: Session = Depends(get_db)
):
    try:
        if not document_service.delete_document(db, document_id):
            raise _not_found()
        return {"success": True}

    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to delete document {document_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete document"
        )


@document_router.post("/{document_id}/share", response_model=DocumentResponse)
async def share_document(
    document_id: int,
    db: Session = Depends(get_db)
):
    """Generate a share code; the link only resolves while the document is public"""
    try:
        document = document_service.generate_share_code(db, document_id)
        if not document:
            raise _not_found()
        return document

    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to share document {document_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to share document"
        )


@document_router.delete("/{document_id}/share", response_model=DocumentResponse)
async def revoke_document_share(
    document_id: int,
    db: Session = Depends(get_db)
):
    try:
        document = document_service.revoke_share_code(db, document_id)
        if not document:
            raise _not_found()
        return document

    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to revoke share code of document {document_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to revoke share link"
        )


@shared_router.get("/{share_code}", response_model=DocumentResponse)
async def get_shared_document(
    share_code: str,
    db: Session = Depends(get_db)
):
    try:
        document = document_service.get_shared_document(db, share_code)
        if not document:
            raise _not_found("Shared document not found")
        return document

    except HTTPException as e:
        raise e
    except Exception:
        logger.exception("Failed to fetch shared document")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch shared document"
        )
