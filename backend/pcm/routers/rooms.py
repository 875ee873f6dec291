from fastapi import APIRouter, Depends
from typing import Optional
from pcm.dependencies import get_room_service
from pcm.models.room import utcnow
from pcm.schemas.room import (
    RoomStatusUpdate, RoomChecklistUpdate, RoomListResponse, FloorRoomsResponse,
    RoomResponse, RoomResetResponse, RoomStatusSummaryResponse
)
from pcm.services.room_service import RoomService

router = APIRouter(prefix="/quartos", tags=["Quartos"])


@router.get("", response_model=RoomListResponse)
def list_rooms(
    status: Optional[str] = None,
    andar: Optional[int] = None,
    service: RoomService = Depends(get_room_service)
):
    rooms = service.list_rooms(status=status, floor=andar)
    return RoomListResponse(data=rooms, total=len(rooms), last_updated=utcnow())


@router.get("/resumo", response_model=RoomStatusSummaryResponse)
def get_rooms_status_summary(service: RoomService = Depends(get_room_service)):
    summary = service.status_summary()
    return RoomStatusSummaryResponse(data=summary, total=sum(summary.values()))


@router.get("/andar/{numero}", response_model=FloorRoomsResponse)
def list_rooms_by_floor(numero: str, service: RoomService = Depends(get_room_service)):
    rooms = service.list_by_floor(numero)
    return FloorRoomsResponse(data=rooms, total=len(rooms), andar=int(numero))


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: str, service: RoomService = Depends(get_room_service)):
    room = service.get_room(room_id)
    return RoomResponse(data=room, message=f"Quarto {room_id} encontrado")


@router.post("/atualizar", response_model=RoomResponse)
def update_room_status(payload: RoomStatusUpdate, service: RoomService = Depends(get_room_service)):
    room = service.update_status(payload.id, payload.status)
    return RoomResponse(data=room, message=f"Quarto {room.id} atualizado para: {room.status.value}")


@router.post("/atualizar-checklist", response_model=RoomResponse)
def update_room_checklist(payload: RoomChecklistUpdate, service: RoomService = Depends(get_room_service)):
    room = service.update_checklist(payload.id, payload.checklist)
    return RoomResponse(data=room, message=f"Checklist do quarto {room.id} atualizado")


@router.post("/reset", response_model=RoomResetResponse)
def reset_rooms(service: RoomService = Depends(get_room_service)):
    count = service.reset_all()
    return RoomResetResponse(
        message=f'Todos os {count} quartos resetados para "Vago limpo"',
        timestamp=utcnow()
    )
