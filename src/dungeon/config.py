"""Configuration for Dungeon."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Application configuration."""

    host: str = "localhost"
    port: int = 1965
    certfile: Path | None = None
    keyfile: Path | None = None
    log_level: str = "INFO"
    log_file: Path | None = None
    json_logs: bool = False
    hash_fingerprints: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        certfile = os.getenv("DUNGEON_CERTFILE")
        keyfile = os.getenv("DUNGEON_KEYFILE")
        log_file = os.getenv("DUNGEON_LOG_FILE")

        return cls(
            host=os.getenv("DUNGEON_HOST", cls.host),
            port=int(os.getenv("DUNGEON_PORT", str(cls.port))),
            certfile=Path(certfile) if certfile else None,
            keyfile=Path(keyfile) if keyfile else None,
            log_level=os.getenv("DUNGEON_LOG_LEVEL", cls.log_level),
            log_file=Path(log_file) if log_file else None,
            json_logs=os.getenv("DUNGEON_JSON_LOGS", "").lower()
            in ("true", "1", "yes"),
            hash_fingerprints=os.getenv("DUNGEON_HASH_FINGERPRINTS", "true").lower()
            not in ("false", "0", "no"),
        )
