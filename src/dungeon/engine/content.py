"""The hand-authored dungeon: levels, action tables and effects.

Levels are addressed by number. Corridors name the level they lead to, so
the arena is laid out first and the World checks every target afterwards.
"""

from types import MappingProxyType

from .state import SMALL_KEY, SPIDER_MASK, PlayerState, Position
from .world import (
    TERMINAL,
    ActionEntry,
    Corridor,
    Effect,
    Item,
    MapElement,
    MapLevel,
    Room,
    Transform,
    Wall,
    World,
)

ENTRANCE = 0
SPIDER_HALL = 1
FORK = 2
TUNNEL = 3
DARK_DOOR = 4


def _go_to(level: int, *, damage: int = 0, gain: str | None = None) -> Transform:
    """Build a transform that returns the player to a level.

    Optionally hurts the player or adds an item to the front of the bag.
    """

    def transform(player: PlayerState) -> PlayerState:
        result = player.move_to(Position(level))
        if damage:
            result = result.hurt(damage)
        if gain is not None:
            result = result.pick_up(gain)
        return result

    return transform


EFFECTS = MappingProxyType({
    "keyRoom.key": Effect(
        "You find a small key! You put in your pocket and leave the room, "
        "leaving the door open as you found.",
        _go_to(ENTRANCE, gain=SMALL_KEY),
    ),
    "keyRoom.exit": Effect("You leave the room.", _go_to(ENTRANCE)),
    "spidersRoomSouthDoor.runForDoor": Effect(
        "You make a run for the other door, only to find it locked. You get "
        "back from where you came and, as you leave the room, you are bitten "
        "and loose one hit point.",
        _go_to(SPIDER_HALL, damage=1),
    ),
    "spidersRoomSouthDoor.exit": Effect(
        "You just go back from where you came and avoid getting hurt.",
        _go_to(SPIDER_HALL),
    ),
    "spidersRoomEastDoor.runForDoor": Effect(
        "You make a run for the other door, and as you cross it you are "
        "bitten and loose one hit point.",
        _go_to(SPIDER_HALL, damage=1),
    ),
    "spidersRoom.putMask": Effect(
        "As soon as you put on the mask, the spiders gather around you, and "
        "as you move, they spread out making way for you. You focus your "
        "efforts in investigating the room and find a hidden passage that "
        "leads you... to the lost treasure of Anders Hejlsberg! You did it "
        "adventurer, now go check the code.",
        TERMINAL,
    ),
    "chest.unlock": Effect(
        "You grab the small key from your pocket and it fits in the chest "
        "lock. Click. Inside the chest you find a hairy mask with multiple "
        "eyes. You put it in your bag and close the chest.",
        _go_to(FORK, gain=SPIDER_MASK),
    ),
    "chest.force": Effect(
        "As you rattle the chest's lock, a spider comes out of nowhere and "
        "bites you. ",
        _go_to(FORK, damage=1),
    ),
    "chest.leave": Effect("", _go_to(FORK)),
})


def _level_layout() -> dict[int, tuple[MapElement, MapElement, MapElement]]:
    """Left, forward and right slots of every level, keyed by level number."""
    return {
        ENTRANCE: (
            Room(
                "a half opened door",
                "Opening the door you find youserlf in a room with a small "
                "desk. The desk has one drawer",
                (
                    ActionEntry("Open the drawer", "keyRoom.key"),
                    ActionEntry("Exit the room", "keyRoom.exit"),
                ),
            ),
            Corridor("a dark and humid corridor.", SPIDER_HALL),
            Wall(),
        ),
        SPIDER_HALL: (
            Wall(),
            Room(
                "a door - and you can feel air current comming through it",
                "You open the door to a room full of venomous spiders. "
                "There's another door in the right wall",
                (
                    ActionEntry(
                        "Reach for the other door",
                        "spidersRoomSouthDoor.runForDoor",
                    ),
                    ActionEntry(
                        "Exit from where you came", "spidersRoomSouthDoor.exit"
                    ),
                    ActionEntry(
                        "Put on the mask", "spidersRoom.putMask", SPIDER_MASK
                    ),
                ),
            ),
            Corridor("a tunnel that biffurcates", FORK),
        ),
        FORK: (
            Corridor("that the tunnel you're in continues", TUNNEL),
            Wall(),
            Item(
                "Locked Chest",
                "You reach for the Locked Chest",
                (
                    ActionEntry("Use the Small key", "chest.unlock", SMALL_KEY),
                    ActionEntry("Force it open", "chest.force"),
                    ActionEntry("Leave it", "chest.leave"),
                ),
            ),
        ),
        TUNNEL: (
            Corridor(
                "that keep following the tunel seems to be your only option",
                DARK_DOOR,
            ),
            Wall(),
            Wall(),
        ),
        DARK_DOOR: (
            Wall(),
            Room(
                "a door - and you can feel air current comming from below it",
                "You open the door to a completely dark room. As the door "
                "slams shut behind you notice another door on the left wall "
                "and... lot's of venomous spiders",
                (
                    ActionEntry(
                        "Exit through the other door",
                        "spidersRoomEastDoor.runForDoor",
                    ),
                    ActionEntry(
                        "Put on the mask", "spidersRoom.putMask", SPIDER_MASK
                    ),
                ),
            ),
            Wall(),
        ),
    }


def build_world() -> World:
    """Assemble and check the dungeon."""
    layout = _level_layout()
    levels = tuple(
        MapLevel(number, *layout[number]) for number in sorted(layout)
    )
    world = World(levels=levels, effects=EFFECTS, start_level=ENTRANCE)
    world.validate()
    return world
