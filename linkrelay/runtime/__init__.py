"""Runtime package.

Keep this module dependency-light: importing `linkrelay.runtime.*` from unit
tests should not open sockets or HTTP clients.
"""

__all__: list[str] = []
