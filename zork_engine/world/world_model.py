"""Immutable, name-indexed and edge-resolved location graph."""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from zork_engine.errors import DuplicateRoomNameError
from zork_engine.models.results import DanglingNeighborReference
from zork_engine.models.world import RoomData, WorldData
from zork_engine.world.room import Room

logger = logging.getLogger(__name__)


class WorldModel:
    """All rooms of one loaded world plus its starting location.

    Construction indexes rooms by name (a repeated name rejects the whole
    world), resolves every room's raw edges against that index, and binds the
    result once. Edges naming missing rooms are dropped and kept in
    ``dangling_edges``. Nothing mutates the model afterwards, so it can be
    shared by any number of readers.
    """

    def __init__(self, starting_location: str, rooms: Iterable[RoomData]):
        index = {}
        for record in rooms:
            if record.name in index:
                raise DuplicateRoomNameError(record.name)
            index[record.name] = Room.from_data(record)

        self._starting_location = starting_location
        self._index: Mapping[str, Room] = MappingProxyType(index)
        self._rooms: FrozenSet[Room] = frozenset(index.values())

        dangling: List[DanglingNeighborReference] = []
        resolved = {}
        for name, room in index.items():
            resolved[name] = room.resolve_edges(self)
            dangling.extend(room.unresolved_edges(self))
        for name, room in index.items():
            room._bind_neighbors(resolved[name])

        self._dangling: Tuple[DanglingNeighborReference, ...] = tuple(dangling)
        for ref in self._dangling:
            logger.warning("Dropped neighbor reference %s", ref)

    @classmethod
    def from_data(cls, data: WorldData) -> "WorldModel":
        return cls(data.starting_location, data.rooms)

    @property
    def starting_location(self) -> str:
        return self._starting_location

    @property
    def rooms(self) -> FrozenSet[Room]:
        return self._rooms

    @property
    def index(self) -> Mapping[str, Room]:
        return self._index

    @property
    def dangling_edges(self) -> Tuple[DanglingNeighborReference, ...]:
        return self._dangling

    @property
    def has_starting_location(self) -> bool:
        return self._starting_location in self._index

    def get_room(self, name: str) -> Optional[Room]:
        """Return the room with this name, or None when there is none."""
        return self._index.get(name)

    def room_names(self) -> List[str]:
        return list(self._index)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __iter__(self) -> Iterator[Room]:
        return iter(self._index.values())

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"WorldModel(starting_location={self._starting_location!r}, rooms={len(self)})"
