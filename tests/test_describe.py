"""Tests for narration rendering."""

from dungeon.engine.content import FORK, TUNNEL
from dungeon.engine.describe import (
    describe_actions,
    describe_element,
    describe_level,
    list_available_actions,
)
from dungeon.engine.state import SMALL_KEY
from dungeon.engine.world import ActionEntry, Corridor, MapLevel, Room, Wall, World


def test_describe_entrance(world: World):
    assert describe_level(world.level(0)) == (
        "On your left you notice a half opened door. "
        "In front of you there's a dark and humid corridor.."
    )


def test_describe_level_skips_walls(world: World):
    assert describe_level(world.level(TUNNEL)) == (
        "On your left you notice that keep following the tunel seems to be "
        "your only option."
    )


def test_describe_level_order_is_left_forward_right():
    level = MapLevel(
        0,
        Corridor("a", 0),
        Wall(),
        Corridor("c", 0),
    )
    assert describe_level(level) == (
        "On your left you notice a. On your right you see c."
    )
    level = MapLevel(0, Wall(), Corridor("b", 0), Corridor("c", 0))
    text = describe_level(level)
    assert text.index("In front of you") < text.index("On your right")


def test_describe_all_walls_is_empty():
    assert describe_level(MapLevel(0, Wall(), Wall(), Wall())) == ""


def test_gated_actions_hidden_without_item(world: World):
    chest = world.level(FORK).right
    assert list_available_actions(chest.actions, ()) == ["Force it open", "Leave it"]
    assert list_available_actions(chest.actions, (SMALL_KEY,)) == [
        "Use the Small key",
        "Force it open",
        "Leave it",
    ]


def test_describe_actions():
    actions = (
        ActionEntry("Wave", "wave"),
        ActionEntry("Unlock", "unlock", SMALL_KEY),
        ActionEntry("Leave", "leave"),
    )
    assert describe_actions(actions, ()) == "Wave, Leave"
    assert describe_actions(actions, (SMALL_KEY,)) == "Wave, Unlock, Leave"
    assert describe_actions((), ()) == ""


def test_describe_element():
    room = Room("a door", "A quiet room", (ActionEntry("Leave", "leave"),))
    assert describe_element(room, ()) == (
        "A quiet room. Your available actions are: Leave"
    )
