import pytest

from zork_engine.models.world import Direction, RoomData, WorldData


def test_direction_parse_case_insensitive():
    assert Direction.parse("north") is Direction.NORTH
    assert Direction.parse("  WEST ") is Direction.WEST
    assert Direction.parse(Direction.EAST) is Direction.EAST


def test_direction_parse_rejects_unknown():
    assert Direction.parse("up") is None
    assert Direction.parse("") is None
    assert Direction.parse(None) is None
    assert Direction.parse(3) is None


def test_room_data_from_file_shape():
    room = RoomData.model_validate(
        {"Name": "Hall", "Description": "A hall.", "Neighbors": {"North": "Kitchen", "east": "Yard"}}
    )
    assert room.name == "Hall"
    assert room.neighbors == {Direction.NORTH: "Kitchen", Direction.EAST: "Yard"}


def test_room_data_defaults():
    room = RoomData.model_validate({"Name": "Void", "Description": None})
    assert room.description == ""
    assert room.neighbors == {}


def test_room_data_unknown_direction():
    with pytest.raises(ValueError):
        RoomData.model_validate({"Name": "Hall", "Neighbors": {"Up": "Attic"}})


def test_room_data_repeated_direction():
    with pytest.raises(ValueError):
        RoomData.model_validate({"Name": "Hall", "Neighbors": {"North": "A", "north": "B"}})


def test_world_data_requires_starting_location():
    with pytest.raises(ValueError):
        WorldData.model_validate({"Rooms": []})


def test_world_data_room_names_keep_duplicates():
    data = WorldData.from_dict(
        {"StartingLocation": "Hall", "Rooms": [{"Name": "Hall"}, {"Name": "Hall"}]}
    )
    assert data.room_names() == ["Hall", "Hall"]
