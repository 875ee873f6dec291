import logging
from typing import Any, Dict, List, Optional, Union

from pcm.database import JsonStore
from pcm.exceptions import BadRequest, NotFound
from pcm.models.room import FLOORS, Room, RoomStatus

logger = logging.getLogger(__name__)

VALID_ID_HINT = "IDs válidos vão de 101-122, 201-222, ..., 901-922"
FLOOR_RANGE_HINT = {"validFloors": "1-9", "validRooms": "01-22 por andar"}


class RoomService:
    """
    Consulta e atualização dos quartos do PCM.

    O conjunto de quartos é fixo (andares 1-9, quartos 01-22); nenhuma
    operação cria ou remove quartos. Toda alteração bem-sucedida é gravada
    em disco antes de retornar.
    """

    def __init__(self, store: JsonStore):
        self.store = store

    @staticmethod
    def _parse_id(room_id: Any) -> Optional[int]:
        # o corpo JSON pode trazer o ID como número ou texto
        if isinstance(room_id, bool):
            return None
        if isinstance(room_id, int):
            return room_id
        if isinstance(room_id, float) and room_id.is_integer():
            return int(room_id)
        if isinstance(room_id, str) and room_id.strip().isdecimal():
            return int(room_id)
        return None

    def list_rooms(self, status: Optional[str] = None, floor: Optional[int] = None) -> List[Room]:
        rooms = list(self.store.rooms.values())
        if status:
            rooms = [r for r in rooms if r.status.value == status]
        if floor is not None:
            rooms = [r for r in rooms if r.floor == floor]
        return rooms

    def list_by_floor(self, floor: Union[int, str]) -> List[Room]:
        parsed = self._parse_id(floor)
        if parsed is None or parsed not in FLOORS:
            raise BadRequest("Andar inválido. Deve ser entre 1 e 9")
        return self.list_rooms(floor=parsed)

    def get_room(self, room_id: Union[int, str]) -> Room:
        room = self.store.rooms.get(self._parse_id(room_id))
        if room is None:
            raise NotFound(f"Quarto {room_id} não encontrado", suggestion=VALID_ID_HINT)
        return room

    def _get_for_update(self, room_id: Union[int, str]) -> Room:
        room = self.store.rooms.get(self._parse_id(room_id))
        if room is None:
            raise NotFound(f"Quarto {room_id} não existe", **FLOOR_RANGE_HINT)
        return room

    def update_status(self, room_id: Union[int, str], status: Any) -> Room:
        with self.store.lock:
            room = self._get_for_update(room_id)
            if status not in RoomStatus.values():
                raise BadRequest("Status inválido", validStatus=RoomStatus.values())
            room.status = RoomStatus(status)
            room.touch()
            self.store.flush_rooms()
        logger.info("Quarto %s atualizado para %s", room.id, room.status.value)
        return room

    def update_checklist(self, room_id: Union[int, str], checklist: Any) -> Room:
        with self.store.lock:
            room = self._get_for_update(room_id)
            if not isinstance(checklist, list):
                raise BadRequest("Checklist deve ser um array")
            room.checklist = list(checklist)
            room.touch()
            self.store.flush_rooms()
        logger.info("Checklist do quarto %s atualizado (%d itens)", room.id, len(room.checklist))
        return room

    def reset_all(self) -> int:
        with self.store.lock:
            for room in self.store.rooms.values():
                room.status = RoomStatus.VACANT_CLEAN
                room.touch()
            self.store.flush_rooms()
        count = len(self.store.rooms)
        logger.info("%d quartos resetados para %s", count, RoomStatus.VACANT_CLEAN.value)
        return count

    def status_summary(self) -> Dict[str, int]:
        summary = {status.value: 0 for status in RoomStatus}
        for room in self.store.rooms.values():
            summary[room.status.value] += 1
        return summary
