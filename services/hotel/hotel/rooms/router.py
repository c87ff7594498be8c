from fastapi import APIRouter, Depends

from hotel.rooms.repository import RoomRepository, get_room_repository
from hotel.rooms.schemas import SRooms, SRoomCreate, SRoomUpdate


router = APIRouter(
    prefix="/rooms",
    tags=["Rooms"]
)


@router.get("")
async def get_rooms(repo: RoomRepository = Depends(get_room_repository)) -> list[SRooms]:
    return await repo.find_all()


@router.post("", status_code=201)
async def add_room(data: SRoomCreate, repo: RoomRepository = Depends(get_room_repository)) -> SRooms:
    return await repo.create(data)


@router.get("/{room_id}")
async def get_room(room_id: int, repo: RoomRepository = Depends(get_room_repository)) -> SRooms:
    return await repo.get_room(room_id)


@router.patch("/{room_id}")
async def update_room(
    room_id: int,
    data: SRoomUpdate,
    repo: RoomRepository = Depends(get_room_repository)
) -> SRooms:
    return await repo.update(room_id, data)
