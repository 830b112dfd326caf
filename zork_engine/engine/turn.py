"""Turn result container."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from zork_engine.models.results import MoveResult


@dataclass(frozen=True)
class TurnResult:
    text: str
    move: Optional[MoveResult] = None

    @property
    def recognized(self) -> bool:
        """False when the text did not name a direction."""
        return self.move is not None
