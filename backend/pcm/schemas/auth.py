from pydantic import BaseModel
from typing import Optional
from pcm.models.user import UserRole


class LoginRequest(BaseModel):
    email: Optional[str] = None
    senha: Optional[str] = None


class RegisterRequest(LoginRequest):
    nickname: Optional[str] = None


class UserPublic(BaseModel):
    email: str
    role: UserRole
    nickname: str


class AuthResponse(BaseModel):
    success: bool = True
    user: UserPublic
    token: str
