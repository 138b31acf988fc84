import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.models.note import Note
from app.config.file_config import SHARE_CODE_MAX_ATTEMPTS
from app.schemas.note import NoteCreate, NoteUpdate
from app.utils.share_codes import unused_share_code

logger = logging.getLogger(__name__)


class NoteService:
    def list_notes(self, db: Session, user_id: Optional[int] = None) -> List[Note]:
        query = db.query(Note)
        if user_id is not None:
            query = query.filter(Note.user_id == user_id)
        return query.order_by(Note.id).all()

    def get_note(self, db: Session, note_id: int) -> Optional[Note]:
        return db.query(Note).filter(Note.id == note_id).first()

    def create_note(self, db: Session, note_data: NoteCreate, user_id: int) -> Note:
        try:
            note = Note(
                title=note_data.title,
                content=note_data.content,
                tags=list(note_data.tags),
                category=note_data.category,
                is_public=note_data.is_public,
                user_id=user_id,
            )
            db.add(note)
            db.commit()
            db.refresh(note)
            logger.info(f"Created note {note.id} for user {user_id}")
            return note
        except IntegrityError:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"User {user_id} does not exist"
            )
        except SQLAlchemyError:
            db.rollback()
            raise

    def update_note(self, db: Session, note_id: int, note_data: NoteUpdate) -> Optional[Note]:
        note = self.get_note(db, note_id)
        if note is None:
            return None
        try:
            update_data = note_data.dict(exclude_unset=True)
            for key, value in update_data.items():
                setattr(note, key, value)
            note.updated_at = datetime.utcnow()
            db.commit()
            db.refresh(note)
            logger.info(f"Updated note {note_id}")
            return note
        except SQLAlchemyError:
            db.rollback()
            raise

    def delete_note(self, db: Session, note_id: int) -> bool:
        note = self.get_note(db, note_id)
        if note is None:
            return False
        try:
            db.delete(note)
            db.commit()
            logger.info(f"Deleted note {note_id}")
            return True
        except SQLAlchemyError:
            db.rollback()
            raise

    def get_shared_note(self, db: Session, share_code: str) -> Optional[Note]:
        """Resolve a share link. Private notes are treated as missing."""
        note = db.query(Note).filter(Note.share_code == share_code).first()
        if note is None or not note.is_public:
            return None
        return note

    def generate_share_code(self, db: Session, note_id: int) -> Optional[Note]:
        note = self.get_note(db, note_id)
        if note is None or note.share_code:
            return note

        for attempt in range(SHARE_CODE_MAX_ATTEMPTS):
            try:
                note.share_code = unused_share_code(db, Note)
                note.updated_at = datetime.utcnow()
                db.commit()
                db.refresh(note)
                logger.info(f"Generated share code for note {note_id}")
                return note
            except IntegrityError:
                db.rollback()
                logger.warning(f"Share code collision for note {note_id} (attempt {attempt + 1})")
            except SQLAlchemyError:
                db.rollback()
                raise
        raise RuntimeError(f"Could not allocate a unique share code for note {note_id}")

    def revoke_share_code(self, db: Session, note_id: int) -> Optional[Note]:
        note = self.get_note(db, note_id)
        if note is None or note.share_code is None:
            return note
        try:
            note.share_code = None
            note.updated_at = datetime.utcnow()
            db.commit()
            db.refresh(note)
            logger.info(f"Revoked share code for note {note_id}")
            return note
        except SQLAlchemyError:
            db.rollback()
            raise
