"""Gameplay routes."""

from contextlib import contextmanager

from xitzin import Redirect, Request, Xitzin
from xitzin.auth import get_identity, require_certificate

from ..engine.errors import IllegalAction
from ..logging import bind_player
from ..session import DungeonSession

FINISHED_MESSAGE = "The game is over. Start a new one to play again."
ILLEGAL_MESSAGE = "You can't do that here."


@contextmanager
def _game_session(request: Request):
    """Look up the player's session and hold its lock for the request."""
    identity = get_identity(request)
    bind_player(identity.fingerprint)
    game = request.app.state.sessions.get_or_create(identity.fingerprint)
    with game.lock:
        yield game


def _render_play(app: Xitzin, game: DungeonSession, message: str = ""):
    """Render the main play view."""
    return app.template(
        "play.gmi",
        narration=game.state.narration,
        actions=list(enumerate(game.available_actions(), start=1)),
        message=message,
        turns=game.turns,
        status=str(game.state.status),
        is_finished=game.is_finished,
    )


def _apply(game: DungeonSession, action: int | str) -> str:
    """Run an action, turning rejections into a message for the player."""
    if game.is_finished:
        return FINISHED_MESSAGE
    try:
        if isinstance(action, int):
            game.choose(action)
        else:
            game.process_action(action)
    except IllegalAction:
        return ILLEGAL_MESSAGE
    return ""


def _register_action_routes(app: Xitzin) -> None:
    """Register play and action routes."""

    @app.gemini("/play", name="play")
    @require_certificate
    def play(request: Request):
        """Main game view."""
        with _game_session(request) as game:
            return _render_play(app, game)

    @app.gemini("/act/{choice}", name="act")
    @require_certificate
    def act(request: Request, choice: str):
        """Perform a numbered action via clickable link."""
        with _game_session(request) as game:
            if not choice.isdigit():
                return _render_play(app, game, message=ILLEGAL_MESSAGE)
            message = _apply(game, int(choice))
            return _render_play(app, game, message=message)

    @app.input("/cmd", prompt="What do you want to do?", name="cmd")
    @require_certificate
    def cmd(request: Request, query: str):
        """Freeform action entry, e.g. "left" or "Open the drawer"."""
        with _game_session(request) as game:
            message = _apply(game, query.strip())
            return _render_play(app, game, message=message)


def _register_info_routes(app: Xitzin) -> None:
    """Register inventory and game management routes."""

    @app.gemini("/inventory", name="inventory")
    @require_certificate
    def inventory(request: Request):
        """Show carried items."""
        with _game_session(request) as game:
            items = game.get_inventory()
            if not items:
                message = "You're not carrying anything."
            else:
                message = "You are currently holding:\n" + "\n".join(
                    f"  {item}" for item in items
                )
            return _render_play(app, game, message=message)

    @app.input(
        "/new",
        prompt="Are you sure you want to start over? Type YES to confirm:",
        name="new_game",
    )
    @require_certificate
    def new_game(request: Request, query: str):
        """Reset game with confirmation."""
        with _game_session(request) as game:
            if query.strip().upper() == "YES":
                game.reset()
                return _render_play(
                    app, game, message="A new adventure begins!",
                )
            return Redirect("/play")


def register_routes(app: Xitzin) -> None:
    """Register gameplay routes."""
    _register_action_routes(app)
    _register_info_routes(app)
