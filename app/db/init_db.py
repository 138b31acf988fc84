import logging
from sqlalchemy.orm import Session
from app.config.app_config import DEFAULT_USER_ID, DEMO_USERNAME
from app.db.session import engine, Base, SessionLocal
from app.models.user import User
from app.models.document import Document
from app.models.note import Note

logger = logging.getLogger(__name__)

def seed_demo_user(db: Session) -> None:
    """Make sure the fallback identity exists so its uploads satisfy the owner foreign key."""
    if db.query(User).filter(User.id == DEFAULT_USER_ID).first():
        return
    if db.query(User).first() is not None:
        logger.warning(f"Demo user {DEFAULT_USER_ID} is missing and users already exist; not seeding")
        return
    # Let the database assign the id so its sequence stays in step
    user = User(username=DEMO_USERNAME, password="")
    db.add(user)
    db.commit()
    db.refresh(user)
    if user.id != DEFAULT_USER_ID:
        logger.warning(f"Seeded demo user got id {user.id}, expected {DEFAULT_USER_ID}")
    else:
        logger.info(f"Seeded demo user {user.id}")

def init_db():
    logger.info("creating tables")
    Base.metadata.create_all(bind=engine)
    logger.info("created tables successfully")
    db = SessionLocal()
    try:
        seed_demo_user(db)
    finally:
        db.close()

def close_db_connection():
    logger.info("closing database connections")
    if engine:
        engine.dispose()
    logger.info("database connections closed")
