"""Turn parsed world data (or a world file) into a WorldModel."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from pydantic import ValidationError

from zork_engine.errors import WorldDataError
from zork_engine.models.world import WorldData
from zork_engine.world.world_model import WorldModel

logger = logging.getLogger(__name__)

_WRAPPER_KEY = "World"


def parse_world_data(data: Union[Mapping[str, Any], WorldData]) -> WorldData:
    """Validate raw data, accepting both the bare and the {"World": {...}} shape."""
    if isinstance(data, WorldData):
        return data
    if not isinstance(data, Mapping):
        raise WorldDataError("world data root must be a mapping")
    raw: Dict[str, Any] = dict(data)
    if _WRAPPER_KEY in raw and "StartingLocation" not in raw:
        raw = raw[_WRAPPER_KEY]
        if not isinstance(raw, Mapping):
            raise WorldDataError(f"{_WRAPPER_KEY!r} must be a mapping")
    try:
        return WorldData.model_validate(raw)
    except ValidationError as exc:
        raise WorldDataError(f"invalid world data: {exc}") from exc


def load_world(data: Union[Mapping[str, Any], WorldData]) -> WorldModel:
    """Build a WorldModel from already-structured data.

    Raises DuplicateRoomNameError or WorldDataError; every call builds fresh
    rooms, so two loads of the same data share no state.
    """
    world_data = parse_world_data(data)
    world = WorldModel.from_data(world_data)
    logger.info(
        "Loaded world with %d rooms (start=%s, dropped edges=%d)",
        len(world),
        world.starting_location,
        len(world.dangling_edges),
    )
    return world


def load_world_file(path: Union[str, Path]) -> WorldModel:
    """Read a JSON world file and load it. Raise FileNotFoundError if missing."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"world file not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise WorldDataError(f"world file is not valid UTF-8 JSON: {path}") from exc
    return load_world(raw)
