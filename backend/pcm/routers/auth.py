from fastapi import APIRouter, Depends
from pcm.dependencies import get_auth_service
from pcm.schemas.auth import LoginRequest, RegisterRequest, AuthResponse
from pcm.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=AuthResponse)
def login(credentials: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    user, token = auth.login(credentials.email, credentials.senha)
    return AuthResponse(user=user.public_view(), token=token)


@router.post("/register", response_model=AuthResponse)
def register(payload: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    user, token = auth.register(payload.email, payload.senha, payload.nickname)
    return AuthResponse(user=user.public_view(), token=token)
