"""Per-player game state.

Everything here is frozen: every action produces a new PlayerState and a
new GameState instead of mutating the old ones. Positions hold level ids
and directions only, never World references.
"""

from dataclasses import dataclass, replace
from enum import StrEnum

# Items the player can carry
SMALL_KEY = "Small Key"
SPIDER_MASK = "Spider Mask"
GREEN_GEM = "Green Gem"

GAME_ITEMS = (SMALL_KEY, SPIDER_MASK, GREEN_GEM)

START_HEALTH = 2


class GameStatus(StrEnum):
    PLAYING = "playing"
    WON = "won"
    DEAD = "dead"


@dataclass(frozen=True)
class Position:
    """Where the player is: at a level, or inside one of its slots."""

    level: int
    direction: str | None = None

    @property
    def at_level(self) -> bool:
        return self.direction is None

    def leave(self) -> "Position":
        return Position(self.level)


@dataclass(frozen=True)
class PlayerState:
    health: int
    position: Position
    inventory: tuple[str, ...] = ()

    def move_to(self, position: Position) -> "PlayerState":
        return replace(self, position=position)

    def hurt(self, amount: int = 1) -> "PlayerState":
        return replace(self, health=max(self.health - amount, 0))

    def pick_up(self, item: str) -> "PlayerState":
        # Newest item first
        return replace(self, inventory=(item, *self.inventory))

    def has(self, item: str | None) -> bool:
        return item is None or item in self.inventory


@dataclass(frozen=True)
class GameState:
    """Narration plus the player state it leads to.

    `player` is None exactly when the player died.
    """

    narration: str
    player: PlayerState | None
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_finished(self) -> bool:
        return self.status != GameStatus.PLAYING


def new_player_state(start_level: int = 0) -> PlayerState:
    """Create a fresh player at the start level with an empty bag."""
    return PlayerState(health=START_HEALTH, position=Position(start_level))
