"""Environment-driven settings.

Every knob has a default so the service starts with no configuration at
all. An empty environment variable counts as unset.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_ALLOW_ORIGIN = "*"
DEFAULT_GAMES_FILE = "data/games.json"
DEFAULT_LOG_LEVEL = "INFO"


def _getenv(environ: Mapping[str, str], key: str, default: str) -> str:
    value = environ.get(key, "")
    return value if value else default


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    allow_origin: str = DEFAULT_ALLOW_ORIGIN
    # None selects the built-in catalog
    games_file: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from `PORT`, `HOST`, `ALLOW_ORIGIN`, `GAMES_FILE`
        and `LOG_LEVEL`.

        Raises ValueError when `PORT` is not an integer.
        """
        if environ is None:
            environ = os.environ

        raw_port = _getenv(environ, "PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None

        return cls(
            host=_getenv(environ, "HOST", DEFAULT_HOST),
            port=port,
            allow_origin=_getenv(environ, "ALLOW_ORIGIN", DEFAULT_ALLOW_ORIGIN),
            games_file=environ.get("GAMES_FILE") or None,
            log_level=_getenv(environ, "LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
