from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
import enum

from .room import utcnow


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    email: str
    password: str = Field(alias="senha")
    role: UserRole = UserRole.USER
    nickname: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

    class Config:
        populate_by_name = True

    @property
    def display_name(self) -> str:
        return self.nickname or self.email.split("@")[0]

    def public_view(self) -> dict:
        return {"email": self.email, "role": self.role.value, "nickname": self.display_name}

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)
