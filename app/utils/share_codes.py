import secrets

from sqlalchemy.orm import Session

from app.config.file_config import SHARE_CODE_BYTES, SHARE_CODE_MAX_ATTEMPTS


def unused_share_code(db: Session, model) -> str:
    """Random URL-safe token not yet held by any row of ``model``."""
    for _ in range(SHARE_CODE_MAX_ATTEMPTS):
        share_code = secrets.token_urlsafe(SHARE_CODE_BYTES)
        if db.query(model).filter(model.share_code == share_code).first() is None:
            return share_code
    raise RuntimeError(f"Could not allocate a unique share code for {model.__tablename__}")
