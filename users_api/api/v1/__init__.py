from .user_controller import USERS_ROUTE_PREFIX, router as user_router


__all__ = ["user_router", "USERS_ROUTE_PREFIX"]
