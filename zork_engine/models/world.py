"""Canonical data contracts for raw world data."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Direction(str, Enum):
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    @classmethod
    def parse(cls, text: Any) -> Optional["Direction"]:
        """Return the direction named by text (case-insensitive), or None."""
        if isinstance(text, Direction):
            return text
        if not isinstance(text, str):
            return None
        key = text.strip().lower()
        for direction in cls:
            if direction.value.lower() == key:
                return direction
        return None

    def __str__(self) -> str:
        return self.value


class RoomData(BaseModel):
    """One room record as it appears in a world file."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    name: str = Field(..., alias="Name")
    description: str = Field("", alias="Description")
    neighbors: Dict[Direction, str] = Field(default_factory=dict, alias="Neighbors")

    @field_validator("description", mode="before")
    @classmethod
    def _none_description(cls, value):
        if value is None:
            return ""
        return value

    @field_validator("neighbors", mode="before")
    @classmethod
    def _normalize_neighbors(cls, value):
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        result: Dict[Direction, str] = {}
        for key, target in value.items():
            direction = Direction.parse(key)
            if direction is None:
                raise ValueError(f"unknown direction: {key!r}")
            if direction in result:
                raise ValueError(f"direction listed twice: {direction.value}")
            result[direction] = target
        return result


class WorldData(BaseModel):
    """World file contents: a starting location plus room records."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    starting_location: str = Field(..., alias="StartingLocation")
    rooms: List[RoomData] = Field(default_factory=list, alias="Rooms")

    def room_names(self) -> List[str]:
        return [room.name for room in self.rooms]

    @classmethod
    def from_dict(cls, data: Dict) -> "WorldData":
        return cls.model_validate(data)
