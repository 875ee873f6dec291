from .auth import Authenticator, EmailTokenAuthenticator, AuthService
from .room_service import RoomService
from .user_service import UserService
