"""Narration for levels, interactive elements and their action lists."""

from collections.abc import Iterable, Sequence

from .world import DIRECTIONS, ActionEntry, ElementKind, InteractiveMapElement, MapLevel

DIRECTION_PHRASES = {
    "left": "On your left you notice",
    "forward": "In front of you there's",
    "right": "On your right you see",
}


def describe_level(level: MapLevel) -> str:
    """Describe what the player sees from a level, left to right."""
    parts = []
    for direction, element in zip(DIRECTIONS, level.slots):
        if element.kind == ElementKind.WALL:
            continue
        parts.append(f"{DIRECTION_PHRASES[direction]} {element.description}.")
    return " ".join(parts)


def list_available_actions(
    actions: Iterable[ActionEntry], inventory: Sequence[str]
) -> list[str]:
    """Action ids whose required item (if any) is being carried.

    Order follows the action table, not the inventory.
    """
    return [
        entry.action
        for entry in actions
        if entry.required_item is None or entry.required_item in inventory
    ]


def describe_actions(
    actions: Iterable[ActionEntry], inventory: Sequence[str]
) -> str:
    return ", ".join(list_available_actions(actions, inventory))


def describe_element(element: InteractiveMapElement, inventory: Sequence[str]) -> str:
    """Text shown when the player enters a room or reaches for an item."""
    return (
        f"{element.inside_description}. Your available actions are: "
        f"{describe_actions(element.actions, inventory)}"
    )
