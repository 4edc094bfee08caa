from .probe import ProbeState
from .address import AddressMatch
from .runtime import RuntimeDeps
from .settings import AppSettings
from .connection import ConnectionState

__all__ = ["AddressMatch", "AppSettings", "ConnectionState", "ProbeState", "RuntimeDeps"]
