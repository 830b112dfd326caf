import pytest

from zork_engine.errors import DuplicateRoomNameError, WorldLoadError
from zork_engine.models.world import Direction, RoomData, WorldData
from zork_engine.world.room import Room
from zork_engine.world.world_model import WorldModel


def make_records():
    return [
        RoomData(name="Hall", description="A hall.", neighbors={Direction.NORTH: "Kitchen", Direction.EAST: "Cellar"}),
        RoomData(name="Kitchen", description="A kitchen.", neighbors={Direction.SOUTH: "Hall"}),
    ]


def test_index_and_get_room():
    world = WorldModel("Hall", make_records())
    assert len(world) == 2
    assert world.get_room("Hall").description == "A hall."
    assert "Kitchen" in world
    assert world.room_names() == ["Hall", "Kitchen"]


def test_get_room_missing_returns_none():
    world = WorldModel("Hall", make_records())
    assert world.get_room("Attic") is None


def test_duplicate_room_name_rejected():
    records = make_records() + [RoomData(name="Hall", description="Another hall.")]
    with pytest.raises(DuplicateRoomNameError) as excinfo:
        WorldModel("Hall", records)
    assert excinfo.value.name == "Hall"
    assert isinstance(excinfo.value, WorldLoadError)


def test_dangling_edge_dropped_and_recorded():
    world = WorldModel("Hall", make_records())
    hall = world.get_room("Hall")
    assert Direction.EAST not in hall.neighbors
    assert hall.raw_edges[Direction.EAST] == "Cellar"
    assert len(world.dangling_edges) == 1
    ref = world.dangling_edges[0]
    assert (ref.room_name, ref.direction, ref.target_name) == ("Hall", Direction.EAST, "Cellar")


def test_resolved_edges_point_into_world():
    world = WorldModel("Hall", make_records())
    for room in world.rooms:
        for target in room.neighbors.values():
            assert target in world.rooms
            assert world.get_room(target.name) is target


def test_resolve_edges_is_pure_and_idempotent():
    world = WorldModel("Hall", make_records())
    hall = world.get_room("Hall")
    first = hall.resolve_edges(world)
    second = hall.resolve_edges(world)
    assert first == second == dict(hall.neighbors)
    assert first is not second
    assert len(world) == 2


def test_neighbors_are_read_only():
    world = WorldModel("Hall", make_records())
    hall = world.get_room("Hall")
    with pytest.raises(TypeError):
        hall.neighbors[Direction.WEST] = hall
    with pytest.raises(TypeError):
        world.index["Attic"] = hall


def test_neighbors_bound_once():
    world = WorldModel("Hall", make_records())
    with pytest.raises(RuntimeError):
        world.get_room("Hall")._bind_neighbors({})


def test_empty_world_is_constructible():
    world = WorldModel("Nowhere", [])
    assert len(world) == 0
    assert not world.has_starting_location
    assert world.get_room("Nowhere") is None


def test_room_identity_is_name():
    a = Room("Hall", "A hall.")
    b = Room("Hall", "A different text.")
    assert a == b
    assert hash(a) == hash(b)
    assert a != Room("Kitchen")
    assert len({a, b}) == 1


def test_room_describe_lists_exits():
    world = WorldModel("Hall", make_records())
    text = world.get_room("Hall").describe()
    assert "A hall." in text
    assert "Exits: North" in text
    assert world.get_room("Kitchen").describe().endswith("Exits: South")


def test_room_describe_without_exits():
    assert Room("Void", "Empty.").describe().endswith("Exits: none")


def test_self_loop_resolves_to_same_room():
    world = WorldModel("Loop", [RoomData(name="Loop", neighbors={Direction.WEST: "Loop"})])
    loop = world.get_room("Loop")
    assert loop.neighbors[Direction.WEST] is loop


def test_from_data():
    data = WorldData(starting_location="Hall", rooms=make_records())
    world = WorldModel.from_data(data)
    assert world.starting_location == "Hall"
    assert world.has_starting_location
