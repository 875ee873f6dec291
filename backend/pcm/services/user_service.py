import logging
from typing import List, Optional

from pcm.database import JsonStore
from pcm.exceptions import BadRequest, Conflict, NotFound
from pcm.models.room import utcnow
from pcm.models.user import User, UserRole

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, store: JsonStore):
        self.store = store

    def list_users(self) -> List[dict]:
        listed_at = utcnow()
        return [
            {**u.public_view(), "created_at": u.created_at or listed_at}
            for u in self.store.users
        ]

    def get_user(self, email: Optional[str]) -> User:
        user = self.store.find_user(email)
        if user is None:
            raise NotFound("Usuário não encontrado")
        return user

    def create_user(
        self,
        email: Optional[str],
        password: Optional[str],
        role: Optional[str] = UserRole.USER.value,
        nickname: Optional[str] = None,
        missing_message: str = "Todos os campos são obrigatórios"
    ) -> User:
        if not email or not password or not role:
            raise BadRequest(missing_message)
        if role not in [r.value for r in UserRole]:
            raise BadRequest("Perfil inválido", validRoles=[r.value for r in UserRole])

        with self.store.lock:
            if self.store.find_user(email) is not None:
                raise Conflict("E-mail já cadastrado")
            user = User(
                email=email,
                password=password,
                role=UserRole(role),
                nickname=nickname or email.split("@")[0],
                created_at=utcnow()
            )
            self.store.users.append(user)
            self.store.flush_users()
        logger.info("Usuário %s criado com perfil %s", email, role)
        return user

    def update_nickname(self, email: Optional[str], nickname: Optional[str]) -> User:
        if not nickname:
            raise BadRequest("Apelido é obrigatório")
        with self.store.lock:
            user = self.get_user(email)
            user.nickname = nickname
            self.store.flush_users()
        logger.info("Apelido de %s atualizado", email)
        return user

    def delete_user(self, email: str) -> None:
        with self.store.lock:
            user = self.get_user(email)
            self.store.users.remove(user)
            self.store.flush_users()
        logger.info("Usuário %s removido", email)
