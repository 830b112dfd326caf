"""Load-time error types."""
from __future__ import annotations


class WorldLoadError(ValueError):
    """Raised when raw world data cannot become a WorldModel."""


class DuplicateRoomNameError(WorldLoadError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"room name must be unique: {name!r}")


class WorldDataError(WorldLoadError):
    """World data is not valid JSON or does not match the expected shape."""
