"""Play the dungeon through to each of its endings."""

from dungeon.engine.commands import GAME_OVER, act, available_actions, new_game
from dungeon.engine.content import DARK_DOOR, FORK, SPIDER_HALL
from dungeon.engine.state import SMALL_KEY, SPIDER_MASK, GameState, GameStatus, Position
from dungeon.engine.world import World


def _run(world: World, game: GameState, actions: list[str]) -> list[GameState]:
    """Run a list of actions and return every state along the way."""
    states = []
    for action in actions:
        assert action in available_actions(world, game), (
            f"{action!r} not available; narration was {game.narration!r}"
        )
        game = act(world, game, action)
        states.append(game)
    return states


# entrance → key room → corridor → fork → chest
TO_CHEST_WITH_KEY = [
    "left",
    "Open the drawer",
    "forward",
    "right",
    "right",
]


def test_win_through_dark_room(world: World):
    states = _run(
        world,
        new_game(world),
        TO_CHEST_WITH_KEY + ["Use the Small key", "left", "left", "forward"],
    )
    last = states[-1]
    assert last.player.inventory == (SPIDER_MASK, SMALL_KEY)
    assert last.player.position == Position(DARK_DOOR, "forward")
    assert available_actions(world, last) == (
        "Exit through the other door",
        "Put on the mask",
    )

    won = act(world, last, "Put on the mask")
    assert won.status == GameStatus.WON
    assert "lost treasure of Anders Hejlsberg" in won.narration
    assert won.player.health == 2


def test_win_after_doubling_back(world: World):
    """The dark room's other door leads back to the spider hall."""
    states = _run(
        world,
        new_game(world),
        TO_CHEST_WITH_KEY
        + [
            "Use the Small key",
            "left",
            "left",
            "forward",
            "Exit through the other door",
            "forward",
            "Put on the mask",
        ],
    )
    bitten = states[-3]
    assert bitten.player.health == 1
    assert bitten.player.position == Position(SPIDER_HALL)
    assert states[-1].status == GameStatus.WON


def test_without_key_the_chest_bites(world: World):
    states = _run(
        world,
        new_game(world),
        ["forward", "right", "right", "Force it open", "right"],
    )
    forced, back_at_chest = states[-2], states[-1]
    assert forced.player.health == 1
    assert forced.player.position == Position(FORK)
    assert "bites you." in forced.narration
    assert "Use the Small key" not in available_actions(world, back_at_chest)

    dead = act(world, back_at_chest, "Force it open")
    assert dead.player is None
    assert dead.narration.endswith(GAME_OVER)


def test_spiders_kill_on_second_run(world: World):
    states = _run(
        world,
        new_game(world),
        [
            "forward",
            "forward",
            "Reach for the other door",
            "forward",
            "Reach for the other door",
        ],
    )
    assert states[2].player.health == 1
    assert states[-1].player is None
    assert states[-1].status == GameStatus.DEAD
    assert available_actions(world, states[-1]) == ()


def test_walking_into_walls_is_harmless(world: World):
    game = new_game(world)
    states = _run(world, game, ["right", "right", "forward", "left"])
    assert states[1].player == game.player
    assert states[-1].player.position == Position(SPIDER_HALL)
    assert states[-1].narration.startswith("You can't go this way.")
