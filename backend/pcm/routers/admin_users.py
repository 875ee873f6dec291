from fastapi import APIRouter, Depends
from pcm.dependencies import get_user_service, require_admin
from pcm.schemas.user import (
    UserCreate, NicknameUpdate, UserListResponse, UserCreatedResponse, MessageResponse
)
from pcm.services.user_service import UserService

router = APIRouter(prefix="/admin/users", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("", response_model=UserListResponse)
def list_users(service: UserService = Depends(get_user_service)):
    return UserListResponse(data=service.list_users())


@router.post("", response_model=UserCreatedResponse)
def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    user = service.create_user(payload.email, payload.password, payload.role, payload.nickname)
    return UserCreatedResponse(user=user.public_view())


@router.post("/update-nickname", response_model=MessageResponse)
def update_nickname(payload: NicknameUpdate, service: UserService = Depends(get_user_service)):
    user = service.update_nickname(payload.email, payload.nickname)
    return MessageResponse(message=f'Apelido de {user.email} atualizado para "{user.nickname}"')


@router.delete("/{email}", response_model=MessageResponse)
def delete_user(email: str, service: UserService = Depends(get_user_service)):
    service.delete_user(email)
    return MessageResponse(message=f"Usuário {email} removido com sucesso")
