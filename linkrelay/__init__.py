"""WebSocket relay that fetches addresses found in client messages."""

__version__ = "0.1.0"

__all__ = ["__version__"]
