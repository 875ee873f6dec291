from .room import (
    RoomStatusUpdate, RoomChecklistUpdate, RoomListResponse, FloorRoomsResponse,
    RoomResponse, RoomResetResponse, RoomStatusSummaryResponse
)
from .auth import LoginRequest, RegisterRequest, UserPublic, AuthResponse
from .user import (
    UserCreate, NicknameUpdate, AdminUserResponse, UserListResponse,
    UserCreatedResponse, MessageResponse
)

__all__ = [
    "RoomStatusUpdate", "RoomChecklistUpdate", "RoomListResponse", "FloorRoomsResponse",
    "RoomResponse", "RoomResetResponse", "RoomStatusSummaryResponse",
    "LoginRequest", "RegisterRequest", "UserPublic", "AuthResponse",
    "UserCreate", "NicknameUpdate", "AdminUserResponse", "UserListResponse",
    "UserCreatedResponse", "MessageResponse"
]
