"""Result containers returned by the world and player."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from zork_engine.models.world import Direction

if TYPE_CHECKING:
    from zork_engine.world.room import Room


class MoveOutcome(str, Enum):
    MOVED = "moved"
    BLOCKED = "blocked"
    INVALID_STATE = "invalid_state"


class AssignmentOutcome(str, Enum):
    ASSIGNED = "assigned"
    ROOM_NOT_FOUND = "room_not_found"


@dataclass(frozen=True)
class MoveResult:
    outcome: MoveOutcome
    direction: Direction
    room: Optional["Room"] = None

    @property
    def moved(self) -> bool:
        return self.outcome is MoveOutcome.MOVED

    @property
    def description(self) -> Optional[str]:
        """Description of the room entered, only set for MOVED."""
        return self.room.description if self.room is not None else None


@dataclass(frozen=True)
class AssignmentResult:
    outcome: AssignmentOutcome
    requested_name: str
    room: Optional["Room"] = None

    @property
    def ok(self) -> bool:
        return self.outcome is AssignmentOutcome.ASSIGNED


@dataclass(frozen=True)
class DanglingNeighborReference:
    """A raw edge dropped during load because its target room does not exist."""

    room_name: str
    direction: Direction
    target_name: str

    def __str__(self) -> str:
        return f"{self.room_name} -{self.direction.value}-> {self.target_name} (missing)"
