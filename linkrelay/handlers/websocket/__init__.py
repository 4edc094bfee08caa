from .session import ConnectionSession
from .manager import handle_websocket_connection
from .connection import ClientConnection

__all__ = ["ClientConnection", "ConnectionSession", "handle_websocket_connection"]
