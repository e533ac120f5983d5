"""Home, help, and about routes."""

from xitzin import Request, Xitzin

from ..engine.commands import GAME_OVER
from ..engine.world import DIRECTIONS


def register_routes(app: Xitzin) -> None:
    """Register the pages that need no certificate."""

    @app.gemini("/", name="home")
    def home(request: Request):
        world = request.app.state.world
        return app.template("home.gmi", levels=len(world.levels))

    @app.gemini("/help", name="help")
    def help_page(request: Request):
        return app.template(
            "help.gmi", directions=DIRECTIONS, game_over=GAME_OVER,
        )

    @app.gemini("/about", name="about")
    def about(request: Request):
        return app.template("about.gmi")
