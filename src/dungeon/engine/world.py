"""Immutable data structures for the dungeon map.

Built once by content.build_world() and shared across all players.
Levels live in an arena indexed by id; corridors refer to their target
level by id so levels can point forward to levels defined later.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import PlayerState

LEFT = "left"
FORWARD = "forward"
RIGHT = "right"

# Slot order of every level, also the order used when describing it.
DIRECTIONS = (LEFT, FORWARD, RIGHT)


class ElementKind(StrEnum):
    WALL = "wall"
    CORRIDOR = "corridor"
    ROOM = "room"
    ITEM = "item"


class _Terminal(Enum):
    """Sentinel for effects that end the game in a win."""

    TERMINAL = "terminal"

    def __repr__(self) -> str:
        return "TERMINAL"


TERMINAL = _Terminal.TERMINAL

Transform = Callable[["PlayerState"], "PlayerState"]


@dataclass(frozen=True)
class ActionEntry:
    """One row of a room or item action table."""

    action: str
    effect_key: str
    required_item: str | None = None


@dataclass(frozen=True)
class Effect:
    """Narration plus the state change an action resolves to."""

    narration: str
    transform: Transform | _Terminal

    @property
    def is_terminal(self) -> bool:
        return self.transform is TERMINAL


@dataclass(frozen=True)
class Wall:
    kind: ElementKind = field(default=ElementKind.WALL, init=False)
    description: str = field(default="It's a wall", init=False)
    actions: tuple[ActionEntry, ...] = field(default=(), init=False)


@dataclass(frozen=True)
class Corridor:
    description: str
    target: int
    kind: ElementKind = field(default=ElementKind.CORRIDOR, init=False)
    actions: tuple[ActionEntry, ...] = field(default=(), init=False)


@dataclass(frozen=True)
class Room:
    description: str
    inside_description: str
    actions: tuple[ActionEntry, ...]
    kind: ElementKind = field(default=ElementKind.ROOM, init=False)


@dataclass(frozen=True)
class Item:
    """An object spotted from a level that the player can reach for.

    `description` is what the level shows, `inside_description` is the
    text shown once the player is handling it.
    """

    description: str
    inside_description: str
    actions: tuple[ActionEntry, ...]
    kind: ElementKind = field(default=ElementKind.ITEM, init=False)


MapElement = Wall | Corridor | Room | Item
InteractiveMapElement = Room | Item

INTERACTIVE_KINDS = frozenset({ElementKind.ROOM, ElementKind.ITEM})


def is_interactive(element: MapElement) -> bool:
    return element.kind in INTERACTIVE_KINDS


@dataclass(frozen=True)
class MapLevel:
    """A node of the dungeon graph with three directional slots."""

    number: int
    left: MapElement
    forward: MapElement
    right: MapElement

    def slot(self, direction: str) -> MapElement:
        if direction not in DIRECTIONS:
            raise KeyError(direction)
        return getattr(self, direction)

    @property
    def slots(self) -> tuple[MapElement, MapElement, MapElement]:
        return (self.left, self.forward, self.right)


@dataclass(frozen=True)
class World:
    """The complete immutable dungeon: level arena plus effects registry."""

    levels: tuple[MapLevel, ...]
    effects: Mapping[str, Effect] = field(default_factory=dict)
    start_level: int = 0

    def level(self, number: int) -> MapLevel:
        if not 0 <= number < len(self.levels):
            raise KeyError(number)
        return self.levels[number]

    def element_at(self, level: int, direction: str) -> MapElement:
        return self.level(level).slot(direction)

    def effect(self, key: str) -> Effect:
        return self.effects[key]

    def validate(self) -> None:
        """Check that every corridor target and effect key resolves."""
        for index, map_level in enumerate(self.levels):
            if map_level.number != index:
                raise ValueError(
                    f"Level {map_level.number} stored at position {index}"
                )
            for direction, element in zip(DIRECTIONS, map_level.slots):
                if element.kind == ElementKind.CORRIDOR and not (
                    0 <= element.target < len(self.levels)
                ):
                    raise ValueError(
                        f"Level {map_level.number} {direction}: corridor "
                        f"target {element.target} does not exist"
                    )
                for entry in element.actions:
                    if entry.effect_key not in self.effects:
                        raise ValueError(
                            f"Level {map_level.number} {direction}: unknown "
                            f"effect {entry.effect_key!r}"
                        )
        self.level(self.start_level)
