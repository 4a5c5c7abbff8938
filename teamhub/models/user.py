# teamhub/models/user.py
from sqlalchemy import Column, Integer, String, DateTime, JSON, func

from teamhub.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    fullname = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    skills = Column(JSON, nullable=False, default=list)
    git_token = Column(String, nullable=True)
    # Only one refresh token is valid per user at a time
    refresh_token = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
