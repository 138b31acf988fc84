from sqlalchemy import Column, String, DateTime, Integer
from datetime import datetime
from app.db.session import Base

class User(Base):
    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)  # opaque, never returned by the API
    created_at = Column(DateTime, default=datetime.utcnow)
