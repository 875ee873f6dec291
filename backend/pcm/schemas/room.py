from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime
from pcm.models.room import Room


class RoomStatusUpdate(BaseModel):
    # quarto inexistente responde 404 antes da validação do status
    id: Optional[Any] = None
    status: Optional[Any] = None


class RoomChecklistUpdate(BaseModel):
    id: Optional[Any] = None
    checklist: Optional[Any] = None


class RoomListResponse(BaseModel):
    success: bool = True
    data: List[Room]
    total: int
    last_updated: datetime = Field(alias="lastUpdated")

    class Config:
        populate_by_name = True


class FloorRoomsResponse(BaseModel):
    success: bool = True
    data: List[Room]
    total: int
    andar: int


class RoomResponse(BaseModel):
    success: bool = True
    message: str
    data: Room


class RoomResetResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: datetime


class RoomStatusSummaryResponse(BaseModel):
    success: bool = True
    data: Dict[str, int]
    total: int
