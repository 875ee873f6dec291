from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from .auth import UserPublic


class UserCreate(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None
    nickname: Optional[str] = None


class NicknameUpdate(BaseModel):
    email: Optional[str] = None
    nickname: Optional[str] = None


class AdminUserResponse(UserPublic):
    created_at: datetime = Field(alias="createdAt")

    class Config:
        populate_by_name = True


class UserListResponse(BaseModel):
    success: bool = True
    data: List[AdminUserResponse]


class UserCreatedResponse(BaseModel):
    success: bool = True
    user: UserPublic


class MessageResponse(BaseModel):
    success: bool = True
    message: str
