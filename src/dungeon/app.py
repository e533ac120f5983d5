"""Xitzin application factory for Dungeon."""

from pathlib import Path

from xitzin import Xitzin

from .config import Config
from .engine.content import build_world
from .logging import get_logger
from .session import SessionStore

logger = get_logger(__name__)


def create_app(config: Config | None = None) -> Xitzin:
    """Create and configure the Xitzin application."""
    config = config or Config.from_env()

    templates_dir = Path(__file__).parent / "templates"

    app = Xitzin(
        title="The Spider Dungeon",
        version="0.1.0",
        templates_dir=templates_dir,
    )

    # The map is static content; build it once and share it between sessions.
    world = build_world()
    app.state.config = config
    app.state.world = world
    app.state.sessions = SessionStore(world)
    logger.debug(
        "world_built",
        levels=len(world.levels),
        effects=len(world.effects),
    )

    @app.on_startup
    async def startup():
        logger.info("startup_complete")

    from .routes import home, play

    home.register_routes(app)
    play.register_routes(app)

    return app
