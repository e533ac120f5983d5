"""Session layer bridging the game engine and the Gemini routes.

Games live in memory only, one per client certificate fingerprint. A
restart of the server starts everyone over.
"""

import threading

from .engine.commands import act, available_actions, get_inventory, new_game
from .engine.errors import IllegalAction
from .engine.state import GameState, GameStatus
from .engine.world import World
from .logging import get_logger

logger = get_logger(__name__)


class DungeonSession:
    """Wraps one player's current GameState."""

    def __init__(self, fingerprint: str, world: World, state: GameState):
        self.fingerprint = fingerprint
        self.world = world
        self.state = state
        self.turns = 0
        # Serialises actions from concurrent requests by the same player
        self.lock = threading.Lock()

    @classmethod
    def start(cls, fingerprint: str, world: World) -> "DungeonSession":
        logger.info("new_game_started", fingerprint=fingerprint)
        return cls(fingerprint, world, new_game(world))

    @property
    def is_finished(self) -> bool:
        return self.state.is_finished

    def available_actions(self) -> tuple[str, ...]:
        return available_actions(self.world, self.state)

    def get_inventory(self) -> list[str]:
        return get_inventory(self.state)

    def process_action(self, action: str) -> str:
        """Apply an action and return the narration.

        IllegalAction propagates to the caller; the state is left untouched.
        """
        try:
            self.state = act(self.world, self.state, action)
        except IllegalAction as exc:
            logger.info(
                "illegal_action",
                fingerprint=self.fingerprint,
                action=action,
                available=list(exc.available),
            )
            raise

        self.turns += 1
        logger.debug(
            "action_taken",
            fingerprint=self.fingerprint,
            action=action,
            turns=self.turns,
            narration=self.state.narration,
        )
        if self.state.status == GameStatus.WON:
            logger.info("game_won", fingerprint=self.fingerprint, turns=self.turns)
        elif self.state.status == GameStatus.DEAD:
            logger.info("player_died", fingerprint=self.fingerprint, turns=self.turns)
        return self.state.narration

    def choose(self, choice: int) -> str:
        """Apply the 1-based `choice` from the current action list."""
        actions = self.available_actions()
        if not 1 <= choice <= len(actions):
            raise IllegalAction(str(choice), actions)
        return self.process_action(actions[choice - 1])

    def reset(self) -> None:
        """Reset to a fresh game."""
        self.state = new_game(self.world)
        self.turns = 0
        logger.info("game_reset", fingerprint=self.fingerprint)


class SessionStore:
    """In-memory sessions keyed by certificate fingerprint."""

    def __init__(self, world: World):
        self.world = world
        self._sessions: dict[str, DungeonSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def get_or_create(self, fingerprint: str) -> DungeonSession:
        with self._lock:
            session = self._sessions.get(fingerprint)
            if session is None:
                session = DungeonSession.start(fingerprint, self.world)
                self._sessions[fingerprint] = session
            else:
                logger.debug("session_accessed", fingerprint=fingerprint)
            return session

