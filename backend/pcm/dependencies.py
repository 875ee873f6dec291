from typing import Optional

from fastapi import Depends, Header, Request

from pcm.database import JsonStore, get_store
from pcm.models.user import User
from pcm.services import Authenticator, AuthService, RoomService, UserService


def get_authenticator(request: Request) -> Authenticator:
    return request.app.state.authenticator


def get_auth_service(
    store: JsonStore = Depends(get_store),
    authenticator: Authenticator = Depends(get_authenticator)
) -> AuthService:
    return AuthService(store, authenticator)


def get_room_service(store: JsonStore = Depends(get_store)) -> RoomService:
    return RoomService(store)


def get_user_service(store: JsonStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_current_user(
    authorization: Optional[str] = Header(default=None),
    auth: AuthService = Depends(get_auth_service)
) -> User:
    return auth.authenticate(authorization)


def require_admin(user: User = Depends(get_current_user)) -> User:
    return AuthService.require_admin(user)
