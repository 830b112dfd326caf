"""A loaded world bundled with its player."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from zork_engine.engine.player import Player
from zork_engine.engine.turn import TurnResult
from zork_engine.models.results import MoveResult
from zork_engine.models.world import Direction, WorldData
from zork_engine.world.loader import load_world, load_world_file
from zork_engine.world.world_model import WorldModel


@dataclass
class Game:
    world: WorldModel
    player: Player

    @classmethod
    def new(cls, world: WorldModel, starting_location: Optional[str] = None) -> "Game":
        return cls(world=world, player=Player(world, starting_location))

    @classmethod
    def from_data(cls, data: Union[Mapping[str, Any], WorldData]) -> "Game":
        return cls.new(load_world(data))

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Game":
        return cls.new(load_world_file(path))

    def current_description(self) -> str:
        return self.player.current_description()

    def move(self, direction: Direction) -> MoveResult:
        return self.player.move(direction)

    def command(self, text: str) -> TurnResult:
        """Interpret one line of player input as a direction and move."""
        direction = Direction.parse(text)
        if direction is None:
            return TurnResult(text=text)
        return TurnResult(text=text, move=self.player.move(direction))
