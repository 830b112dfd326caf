"""Player cursor and its movement state machine."""
from __future__ import annotations

import logging
from typing import Optional

from zork_engine.models.results import (
    AssignmentOutcome,
    AssignmentResult,
    MoveOutcome,
    MoveResult,
)
from zork_engine.models.world import Direction
from zork_engine.world.room import Room
from zork_engine.world.world_model import WorldModel

logger = logging.getLogger(__name__)

UNRESOLVED_DESCRIPTION = "You are nowhere."


class Player:
    """The single mutable cursor over one WorldModel.

    ``location`` is either a Room of the bound world or None, which is the
    explicit unresolved state (see ``is_resolved``). It only changes through
    ``move`` and ``set_location_by_name``. Not safe for concurrent mutation.
    """

    def __init__(self, world: WorldModel, starting_location: Optional[str] = None):
        self._world = world
        name = world.starting_location if starting_location is None else starting_location
        self._location: Optional[Room] = world.get_room(name)
        if self._location is None:
            logger.warning("Starting location %r does not exist; player is unresolved", name)

    @property
    def world(self) -> WorldModel:
        return self._world

    @property
    def location(self) -> Optional[Room]:
        return self._location

    @property
    def is_resolved(self) -> bool:
        return self._location is not None

    @property
    def location_name(self) -> Optional[str]:
        return self._location.name if self._location is not None else None

    def current_description(self) -> str:
        if self._location is None:
            return UNRESOLVED_DESCRIPTION
        return self._location.description

    def move(self, direction: Direction) -> MoveResult:
        parsed = Direction.parse(direction)
        if parsed is None:
            raise ValueError(f"unknown direction: {direction!r}")
        direction = parsed
        if self._location is None:
            return MoveResult(MoveOutcome.INVALID_STATE, direction)
        destination = self._location.neighbors.get(direction)
        if destination is None:
            logger.debug("Blocked moving %s from %s", direction, self._location.name)
            return MoveResult(MoveOutcome.BLOCKED, direction)
        logger.debug("Moved %s from %s to %s", direction, self._location.name, destination.name)
        self._location = destination
        return MoveResult(MoveOutcome.MOVED, direction, destination)

    def set_location_by_name(self, name: str) -> AssignmentResult:
        room = self._world.get_room(name)
        if room is None:
            logger.debug("Room %r does not exist; location unchanged", name)
            return AssignmentResult(AssignmentOutcome.ROOM_NOT_FOUND, name)
        self._location = room
        return AssignmentResult(AssignmentOutcome.ASSIGNED, name, room)

    def __repr__(self) -> str:
        return f"Player(location={self.location_name!r})"
