from .auth import router as auth_router
from .rooms import router as rooms_router
from .admin_users import router as admin_users_router

__all__ = [
    "auth_router",
    "rooms_router",
    "admin_users_router"
]
