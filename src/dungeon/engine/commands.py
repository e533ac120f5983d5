"""Action dispatch: navigation, interaction and result checks.

act(world, game, action) -> GameState is the main entry point. At a level
the action is a direction and goes through _navigate; inside a room or
item it is looked up in the element's action table by _interact. Results
then pass through _check_result for death and level re-description.
Nothing here mutates its inputs.
"""

from .describe import describe_element, describe_level, list_available_actions
from .errors import GameFinished, IllegalAction
from .state import GameState, GameStatus, PlayerState, Position, new_player_state
from .world import DIRECTIONS, ElementKind, InteractiveMapElement, World, is_interactive

WELCOME = (
    "Welcome Adventurer. You locked yourself in this dungeon and you can't "
    "go back."
)
WALL_BUMP = "You can't go this way."
GAME_OVER = "You are Dead - Game Over!"
START_HINT = "Choose a direction to start."


def new_game(world: World) -> GameState:
    """Opening narration and a fresh player at the start level."""
    start = world.level(world.start_level)
    narration = f"{WELCOME} {describe_level(start)} {START_HINT}"
    return GameState(narration, new_player_state(world.start_level))


def _current_element(world: World, player: PlayerState) -> InteractiveMapElement:
    position = player.position
    element = world.element_at(position.level, position.direction)
    if not is_interactive(element):
        raise ValueError(
            f"Player inside non-interactive {element.kind} at {position}"
        )
    return element


def available_actions(world: World, game: GameState) -> tuple[str, ...]:
    """Action ids legal from the current position, in display order."""
    if game.is_finished or game.player is None:
        return ()
    player = game.player
    if player.position.at_level:
        return DIRECTIONS
    element = _current_element(world, player)
    return tuple(list_available_actions(element.actions, player.inventory))


def get_inventory(game: GameState) -> list[str]:
    """Carried item names, most recently found first."""
    if game.player is None:
        return []
    return list(game.player.inventory)


def _navigate(world: World, player: PlayerState, direction: str) -> tuple[str, PlayerState]:
    """Move from a level towards one of its three slots."""
    if direction not in DIRECTIONS:
        raise IllegalAction(direction, DIRECTIONS)

    level = world.level(player.position.level)
    target = level.slot(direction)

    if target.kind == ElementKind.WALL:
        return f"{WALL_BUMP} {describe_level(level)}", player

    if target.kind == ElementKind.CORRIDOR:
        destination = world.level(target.target)
        return describe_level(destination), player.move_to(
            Position(destination.number)
        )

    # Room or item: the player is now inside it
    inside = player.move_to(Position(level.number, direction))
    return describe_element(target, player.inventory), inside


def _interact(world: World, player: PlayerState, action: str) -> GameState:
    """Apply an action from the current room or item's table."""
    element = _current_element(world, player)
    legal = list_available_actions(element.actions, player.inventory)
    if action not in legal:
        raise IllegalAction(action, legal)

    entry = next(e for e in element.actions if e.action == action)
    effect = world.effect(entry.effect_key)

    if effect.is_terminal:
        return GameState(effect.narration, player, GameStatus.WON)

    return _check_result(world, effect.narration, effect.transform(player))


def _check_result(
    world: World, narration: str, player: PlayerState, *, redescribe: bool = True
) -> GameState:
    """Turn a delegate's narration and player into the final GameState.

    Moves made by navigation already describe where they lead, so they
    pass redescribe=False.
    """
    if player.health <= 0:
        return GameState(f"{narration} {GAME_OVER}", None, GameStatus.DEAD)
    if redescribe and player.position.at_level:
        level = world.level(player.position.level)
        return GameState(f"{narration} {describe_level(level)}", player)
    return GameState(narration, player)


def act(world: World, game: GameState, action: str) -> GameState:
    """Perform one action and return the resulting game state.

    Raises IllegalAction if the action is not available from the current
    position, and GameFinished if the game was already won or lost.
    """
    if game.is_finished or game.player is None:
        raise GameFinished(action)

    player = game.player
    if player.position.at_level:
        narration, moved = _navigate(world, player, action)
        return _check_result(world, narration, moved, redescribe=False)
    return _interact(world, player, action)

