from fastapi import APIRouter, Depends, HTTPException, status, Body, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from app.db.session import get_db
from app.dependencies import RequestContext, get_request_context
from app.schemas.document import DeleteResponse
from app.schemas.note import NoteCreate, NoteResponse, NoteUpdate
from app.services.note_service import NoteService

logger = logging.getLogger(__name__)

note_router = APIRouter(prefix="/api/notes", tags=["notes"])
shared_note_router = APIRouter(prefix="/api/shared/notes", tags=["shared"])
note_service = NoteService()


@note_router.get("", response_model=List[NoteResponse])
async def list_notes(
    user_id: Optional[int] = Query(None, alias="userId"),
    db: Session = Depends(get_db)
):
    try:
        return note_service.list_notes(db, user_id)
    except Exception:
        logger.exception("Failed to fetch notes")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch notes"
        )


@note_router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: int,
    db: Session = Depends(get_db)
):
    try:
        note = note_service.get_note(db, note_id)
        if not note:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
        return note
    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to fetch note {note_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch note"
        )


@note_router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    note_data: NoteCreate = Body(...),
    db: Session = Depends(get_db),
    context: RequestContext = Depends(get_request_context)
):
    """Create a note owned by the calling user"""
    try:
        return note_service.create_note(db, note_data, context.user_id)
    except HTTPException as e:
        raise e
    except Exception:
        logger.exception("Failed to create note")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create note"
        )


@note_router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: int,
    note_data: NoteUpdate = Body(...),
    db: Session = Depends(get_db)
):
    try:
        note = note_service.update_note(db, note_id, note_data)
        if not note:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
        return note
    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to update note {note_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update note"
        )


@note_router.delete("/{note_id}", response_model=DeleteResponse)
async def delete_note(
    note_id: int,
    db: Session = Depends(get_db)
):
    try:
        if not note_service.delete_note(db, note_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
        return {"success": True}
    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to delete note {note_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete note"
        )


@note_router.post("/{note_id}/share", response_model=NoteResponse)
async def share_note(
    note_id: int,
    db: Session = Depends(get_db)
):
    """Generate a share code; the link only resolves while the note is public"""
    try:
        note = note_service.generate_share_code(db, note_id)
        if not note:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
        return note
    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to share note {note_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to share note"
        )


@note_router.delete("/{note_id}/share", response_model=NoteResponse)
async def revoke_note_share(
    note_id: int,
    db: Session = Depends(get_db)
):
    try:
        note = note_service.revoke_share_code(db, note_id)
        if not note:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")
        return note
    except HTTPException as e:
        raise e
    except Exception:
        logger.exception(f"Failed to revoke share code of note {note_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to revoke share link"
        )


@shared_note_router.get("/{share_code}", response_model=NoteResponse)
async def get_shared_note(
    share_code: str,
    db: Session = Depends(get_db)
):
    try:
        note = note_service.get_shared_note(db, share_code)
        if not note:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Shared note not found")
        return note
    except HTTPException as e:
        raise e
    except Exception:
        logger.exception("Failed to fetch shared note")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch shared note"
        )
