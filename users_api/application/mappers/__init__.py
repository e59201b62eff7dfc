from .user_mapper import to_user_response

__all__ = ["to_user_response"]
