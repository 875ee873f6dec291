import abc
import logging
from typing import Iterable, Optional, Tuple

from pcm.database import JsonStore
from pcm.exceptions import Forbidden, Unauthenticated, Unauthorized
from pcm.models.user import User, UserRole
from .user_service import UserService

logger = logging.getLogger(__name__)


class Authenticator(abc.ABC):
    """Estratégia de emissão e resolução de tokens de acesso."""

    @abc.abstractmethod
    def issue_token(self, user: User) -> str:
        ...

    @abc.abstractmethod
    def resolve(self, token: str, users: Iterable[User]) -> Optional[User]:
        ...


class EmailTokenAuthenticator(Authenticator):
    """
    O token é o próprio e-mail do usuário.

    Não expira e não é assinado: quem conhece o e-mail consegue se passar
    pelo usuário. Serve apenas para o mock.
    """

    def issue_token(self, user: User) -> str:
        return user.email

    def resolve(self, token: str, users: Iterable[User]) -> Optional[User]:
        return next((u for u in users if u.email == token), None)


class AuthService:
    def __init__(self, store: JsonStore, authenticator: Authenticator):
        self.store = store
        self.authenticator = authenticator

    def login(self, email: Optional[str], password: Optional[str]) -> Tuple[User, str]:
        user = next(
            (u for u in self.store.users if u.email == email and u.password == password),
            None
        )
        if user is None:
            logger.warning("Falha de login para %s", email)
            raise Unauthorized("Credenciais inválidas")
        return user, self.authenticator.issue_token(user)

    def register(
        self, email: Optional[str], password: Optional[str], nickname: Optional[str] = None
    ) -> Tuple[User, str]:
        user = UserService(self.store).create_user(
            email,
            password,
            role=UserRole.USER.value,
            nickname=nickname,
            missing_message="E-mail e senha são obrigatórios"
        )
        return user, self.authenticator.issue_token(user)

    def authenticate(self, token: Optional[str]) -> User:
        if not token:
            raise Unauthenticated("Token não fornecido")
        user = self.authenticator.resolve(token, self.store.users)
        if user is None:
            raise Forbidden("Token inválido")
        return user

    @staticmethod
    def require_admin(user: User) -> User:
        if user.role != UserRole.ADMIN:
            raise Forbidden("Acesso negado")
        return user
