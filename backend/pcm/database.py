import contextlib
import json
import logging
import os
import shutil
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fastapi import Request

from pcm.config import Settings
from pcm.models import FLOORS, ROOMS_PER_FLOOR, Room, User
from pcm.models.room import utcnow

logger = logging.getLogger(__name__)

DEFAULT_USERS = [
    {"email": "admin@goinn.com", "senha": "admin123", "role": "admin", "nickname": "Administrador"},
    {"email": "user@goinn.com", "senha": "user123", "role": "user", "nickname": "Usuário"},
    {"email": "carlos@goinn.com", "senha": "carlos123", "role": "user", "nickname": "Carlos"},
    {"email": "douglas@goinn.com", "senha": "123", "role": "user", "nickname": "Douglas"},
]


def backup(path: Path) -> None:
    """Copia o documento atual para `<arquivo>.corrupt` antes de ele ser sobrescrito."""
    target = path.with_name(path.name + ".corrupt")
    try:
        shutil.copyfile(path, target)
        logger.warning("Cópia de %s guardada em %s", path, target)
    except OSError as e:
        logger.error("Erro ao copiar %s para %s: %s", path, target, e)


def load(path: Path, seed_fn: Callable[[], Any], parse: Optional[Callable[[Any, Path], Any]] = None) -> Any:
    """
    Lê um documento JSON do disco.

    Se o arquivo não existir, não puder ser lido ou não for JSON com o
    formato esperado por `parse`, registra o problema e devolve o resultado
    de `seed_fn()`, que gera e persiste o conteúdo padrão. Um arquivo
    existente é copiado para `<arquivo>.corrupt` antes de ser substituído.
    """
    if path.exists():
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return parse(data, path) if parse else data
        except (OSError, TypeError, ValueError) as e:
            logger.error("Erro ao carregar %s: %s", path, e)
            backup(path)
    else:
        logger.info("Arquivo %s não encontrado, usando dados padrão", path)
    return seed_fn()


def save(path: Path, data: Any) -> bool:
    """Grava `data` como JSON formatado. Falhas são registradas e nunca propagadas."""
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, path)
    except (OSError, TypeError, ValueError) as e:
        logger.error("Erro ao salvar %s: %s", path, e)
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        return False
    logger.debug("Dados salvos em %s", path)
    return True


def default_rooms() -> Dict[int, Room]:
    rooms = {}
    for floor in FLOORS:
        for number in ROOMS_PER_FLOOR:
            room = Room.seed(floor, number)
            rooms[room.id] = room
    return rooms


def default_users() -> List[User]:
    return [User(**u, created_at=utcnow()) for u in DEFAULT_USERS]


def parse_rooms(data: Any, path: Path) -> Dict[int, Room]:
    """
    Converte o documento de quartos, registro a registro.

    Registros inválidos ou fora da grade 1-9 x 01-22 são descartados e o
    arquivo original é copiado antes de ser regravado. Quartos ausentes da
    grade são recriados como "Vago limpo".
    """
    if not isinstance(data, dict):
        raise TypeError("esperado um objeto indexado pelo ID do quarto")
    grid = default_rooms()
    rooms = {}
    rejected = 0
    for key, value in data.items():
        try:
            room = Room.model_validate(value)
            if str(room.id) != str(key) or room.id not in grid:
                raise ValueError(f"ID {room.id} fora da grade de quartos")
        except ValueError as e:
            logger.warning("Quarto %s ignorado em %s: %s", key, path, e)
            rejected += 1
            continue
        room.floor = room.id // 100
        rooms[room.id] = room
    if rejected:
        backup(path)
    missing = [room_id for room_id in grid if room_id not in rooms]
    if missing:
        logger.warning("%d quartos ausentes em %s recriados como vagos limpos", len(missing), path)
        for room_id in missing:
            rooms[room_id] = grid[room_id]
    return dict(sorted(rooms.items()))


def parse_users(data: Any, path: Path) -> List[User]:
    if not isinstance(data, list):
        raise TypeError("esperada uma lista de usuários")
    users = []
    rejected = 0
    for index, value in enumerate(data):
        try:
            user = User.model_validate(value)
        except ValueError as e:
            logger.warning("Usuário na posição %d ignorado em %s: %s", index, path, e)
            rejected += 1
            continue
        if any(u.email == user.email for u in users):
            logger.warning("E-mail duplicado %s ignorado em %s", user.email, path)
            rejected += 1
            continue
        users.append(user)
    if rejected:
        backup(path)
    return users


class JsonStore:
    """Estado em memória dos quartos e usuários, espelhado em dois arquivos JSON."""

    def __init__(self, rooms_path: Path, users_path: Path):
        self.rooms_path = Path(rooms_path)
        self.users_path = Path(users_path)
        self.rooms: Dict[int, Room] = {}
        self.users: List[User] = []
        self.lock = threading.RLock()

    @classmethod
    def open(cls, settings: Settings) -> "JsonStore":
        store = cls(settings.rooms_path, settings.users_path)
        store.load_rooms()
        store.load_users()
        return store

    def load_rooms(self) -> None:
        self.rooms = load(self.rooms_path, self._seed_rooms, parse_rooms)
        logger.info("%d quartos carregados de %s", len(self.rooms), self.rooms_path)

    def load_users(self) -> None:
        self.users = load(self.users_path, self._seed_users, parse_users)
        logger.info("%d usuários carregados de %s", len(self.users), self.users_path)

    def _seed_rooms(self) -> Dict[int, Room]:
        self.rooms = default_rooms()
        self.flush_rooms()
        return self.rooms

    def _seed_users(self) -> List[User]:
        self.users = default_users()
        self.flush_users()
        return self.users

    def find_user(self, email: Optional[str]) -> Optional[User]:
        return next((u for u in self.users if u.email == email), None)

    def flush_rooms(self) -> bool:
        with self.lock:
            data = {str(room_id): room.to_json() for room_id, room in self.rooms.items()}
            return save(self.rooms_path, data)

    def flush_users(self) -> bool:
        with self.lock:
            return save(self.users_path, [u.to_json() for u in self.users])

    def flush(self) -> bool:
        rooms_ok = self.flush_rooms()
        users_ok = self.flush_users()
        return rooms_ok and users_ok


def get_store(request: Request) -> JsonStore:
    return request.app.state.store
