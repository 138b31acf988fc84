import logging
from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from fastapi import HTTPException, status
from app.models.user import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)

class UserService:
    def create_user(self, db: Session, user_data: UserCreate) -> User:
        if self.get_user_by_username(db, user_data.username) is not None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User with this username already exists"
            )
        try:
            user = User(
                username=user_data.username,
                password=user_data.password
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"Created user {user.id}")
            return user
        except IntegrityError:
            db.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="User with this username already exists"
            )
        except SQLAlchemyError:
            db.rollback()
            raise

    def get_user_by_id(self, db: Session, user_id: int) -> User:
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User not found"
            )
        return user

    def get_user_by_username(self, db: Session, username: str) -> Optional[User]:
        return db.query(User).filter(User.username == username).first()
