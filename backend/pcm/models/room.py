from pydantic import BaseModel, Field, field_validator
from typing import Any, List
from datetime import datetime, timezone
import enum


FLOORS = range(1, 10)
ROOMS_PER_FLOOR = range(1, 23)


class RoomStatus(str, enum.Enum):
    VACANT_CLEAN = "Vago limpo"
    VACANT_DIRTY = "Vago sujo"
    OCCUPIED = "Ocupado"

    @classmethod
    def values(cls) -> List[str]:
        return [s.value for s in cls]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Room(BaseModel):
    id: int = Field(alias="ID_QUARTO")
    status: RoomStatus = Field(default=RoomStatus.VACANT_CLEAN, alias="STATUS")
    checklist: List[Any] = Field(default_factory=list, alias="CHECKLIST")
    floor: int = Field(alias="ANDAR")
    last_updated: datetime = Field(default_factory=utcnow, alias="ULTIMA_ATUALIZACAO")

    class Config:
        populate_by_name = True

    @field_validator("checklist", mode="before")
    @classmethod
    def checklist_default(cls, v: Any) -> Any:
        # registros antigos podem ter CHECKLIST ausente ou null
        return [] if v is None else v

    @classmethod
    def seed(cls, floor: int, number: int) -> "Room":
        return cls(id=floor * 100 + number, floor=floor)

    def touch(self) -> None:
        self.last_updated = utcnow()

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
