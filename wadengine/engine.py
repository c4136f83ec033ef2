"""Game state and its per-frame update."""

from __future__ import annotations

from dataclasses import dataclass, field

from wadengine.entities import Transform, World
from wadengine.mapdata import Map


@dataclass
class GameState:
    """The loaded level, its entities and the time played so far in seconds."""

    current_map: Map | None = None
    world: World = field(default_factory=World)
    game_time: float = 0.0

    def update(self, delta_time: float, player_transform: Transform | None) -> None:
        """Advance the clock and move the entities by delta_time seconds."""
        if delta_time < 0:
            raise ValueError("delta_time must not be negative")
        self.game_time += delta_time
        self.world.update(player_transform, delta_time)