from .room import Room, RoomStatus, FLOORS, ROOMS_PER_FLOOR
from .user import User, UserRole
