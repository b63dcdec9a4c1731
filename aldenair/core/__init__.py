# Core modules

from .config import settings
from .session import CartSessionManager, CartSession, session_manager

__all__ = ["settings", "CartSessionManager", "CartSession", "session_manager"]
