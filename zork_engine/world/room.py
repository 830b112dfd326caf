"""Room entity and edge resolution."""
from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional

from zork_engine.models.results import DanglingNeighborReference
from zork_engine.models.world import Direction, RoomData

if TYPE_CHECKING:
    from zork_engine.world.world_model import WorldModel


_EMPTY: Mapping[Direction, "Room"] = MappingProxyType({})


class Room:
    """A named location with raw exits by name and resolved exits by Room.

    Identity is the name alone: two rooms are equal iff their names are equal.
    """

    def __init__(self, name: str, description: str = "", raw_edges: Optional[Mapping[Direction, str]] = None):
        self._name = name
        self._description = description
        self._raw_edges: Mapping[Direction, str] = MappingProxyType(dict(raw_edges or {}))
        self._neighbors: Mapping[Direction, Room] = _EMPTY
        self._bound = False

    @classmethod
    def from_data(cls, data: RoomData) -> "Room":
        return cls(data.name, data.description, data.neighbors)

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def raw_edges(self) -> Mapping[Direction, str]:
        return self._raw_edges

    @property
    def neighbors(self) -> Mapping[Direction, "Room"]:
        """Resolved edges; empty until the owning world binds them."""
        return self._neighbors

    def resolve_edges(self, world: "WorldModel") -> Dict[Direction, "Room"]:
        """Map each raw edge to the world's room of that name, dropping missing targets."""
        resolved: Dict[Direction, Room] = {}
        for direction, target_name in self._raw_edges.items():
            target = world.get_room(target_name)
            if target is not None:
                resolved[direction] = target
        return resolved

    def unresolved_edges(self, world: "WorldModel") -> List[DanglingNeighborReference]:
        return [
            DanglingNeighborReference(self._name, direction, target_name)
            for direction, target_name in self._raw_edges.items()
            if world.get_room(target_name) is None
        ]

    def get_exit(self, direction: Direction) -> Optional["Room"]:
        return self._neighbors.get(direction)

    def describe(self) -> str:
        """Name, description and exits as display text."""
        exit_list = ", ".join(d.value for d in self._neighbors) if self._neighbors else "none"
        return f"{self._name}\n\n{self._description}\n\nExits: {exit_list}"

    def _bind_neighbors(self, neighbors: Mapping[Direction, "Room"]) -> None:
        # called once by WorldModel during construction
        if self._bound:
            raise RuntimeError(f"neighbors already bound for room {self._name!r}")
        self._neighbors = MappingProxyType(dict(neighbors))
        self._bound = True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Room(name={self._name!r})"
