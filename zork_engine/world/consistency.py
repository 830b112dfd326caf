"""World consistency checks over a loaded WorldModel."""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Set

from zork_engine.world.world_model import WorldModel


class WorldConsistencyError(Exception):
    pass


def build_graph(world: WorldModel) -> Dict[str, Set[str]]:
    graph: Dict[str, Set[str]] = {}
    for room in world:
        graph[room.name] = {target.name for target in room.neighbors.values()}
    return graph


def reachable_rooms(world: WorldModel, start: str) -> Set[str]:
    """Names of rooms reachable from start by resolved edges, start included."""
    graph = build_graph(world)
    if start not in graph:
        return set()
    visited = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbor in graph.get(node, set()):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return visited


def find_world_issues(world: WorldModel) -> List[str]:
    issues: List[str] = []
    for ref in world.dangling_edges:
        issues.append(
            f"Room '{ref.room_name}' exit {ref.direction.value} points to missing room '{ref.target_name}'"
        )
    if not world.has_starting_location:
        issues.append(f"Starting location '{world.starting_location}' does not exist")
        return issues
    reachable = reachable_rooms(world, world.starting_location)
    for name in world.room_names():
        if name not in reachable:
            issues.append(f"Room '{name}' is unreachable from '{world.starting_location}'")
    return issues


def validate_world(world: WorldModel, *, strict: bool = False) -> List[str]:
    """Return consistency issues; raise WorldConsistencyError if strict and any exist."""
    issues = find_world_issues(world)
    if strict and issues:
        raise WorldConsistencyError("; ".join(issues))
    return issues
