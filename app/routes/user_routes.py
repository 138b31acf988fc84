from fastapi import APIRouter, Depends, Body, HTTPException, status
from sqlalchemy.orm import Session
import logging
from app.db.session import get_db
from app.services.user_service import UserService
from app.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)

user_router = APIRouter(prefix="/api/users", tags=["users"])
user_service = UserService()

@user_router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate = Body(...),
    db: Session = Depends(get_db)
):
    """
    Register a user. The password is stored as given and never returned.
    """
    try:
        return user_service.create_user(db, user_data)
    except HTTPException as e:
        raise e  # Re-raise HTTPException (e.g., duplicate username)
    except Exception:
        logger.exception("Failed to create user")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user"
        )

@user_router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    db: Session = Depends(get_db)
):
    """
    Fetch a user's public profile.
    """
    try:
        return user_service.get_user_by_id(db, user_id)
    except HTTPException as e:
        raise e  # Re-raise HTTPException (e.g., user not found)
    except Exception:
        logger.exception(f"Failed to fetch user {user_id}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch user"
        )
