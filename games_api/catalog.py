"""Game catalog providers and lifecycle.

The catalog is loaded once when the application starts, either from the
built-in list or from a JSON file, and stored on `app.state`. Handlers
read it through the `get_catalog` dependency.
"""

import logging
from contextlib import asynccontextmanager
from typing import Iterable, List, Optional, Tuple

from fastapi import FastAPI, Request
from pydantic import TypeAdapter, ValidationError

from .models import Game

logger = logging.getLogger("app.catalog")

Catalog = Tuple[Game, ...]

_games_adapter = TypeAdapter(List[Game])


class CatalogError(Exception):
    """The catalog could not be loaded; the service must not start."""


_BUILTIN_GAMES = (
    Game(
        id="vector-horizon",
        title="Vector Horizon",
        stores={"steam": "https://store.steampowered.com/app/3801540/Vector_Horizon/"},
        trailer="Q_pv6QVvIjA",
        platforms=["PC"],
        tags=["Arcade", "Action"],
        images={"cover": "https://img.youtube.com/vi/Q_pv6QVvIjA/hqdefault.jpg"},
        description=(
            "Fast-paced action set in a stylized vector world. "
            "Official store and trailer links below."
        ),
    ),
    Game(
        id="gunboxing",
        title="GunBoxing",
        stores={"steam": "https://store.steampowered.com/app/1978090/GunBoxing/"},
        trailer="YiDwlVA0btQ",
        platforms=["PC"],
        tags=["Fighting", "Action"],
        images={"cover": "https://img.youtube.com/vi/YiDwlVA0btQ/hqdefault.jpg"},
        description=(
            "Punch, shoot, and style—an over-the-top brawler. "
            "Official store and trailer links below."
        ),
    ),
    Game(
        id="cosmo-war",
        title="Cosmo War",
        stores={
            "googlePlay": "https://play.google.com/store/apps/details?id=com.solaragames.cosmowar"
        },
        trailer=None,
        platforms=["Android"],
        tags=["Arcade", "Casual"],
        images={"cover": ""},
        description="Mobile arcade action. Google Play link below.",
    ),
    Game(
        id="almanac",
        title="Almanac",
        stores={
            "googlePlay": "https://play.google.com/store/apps/details?id=com.RaAten.Almanac"
        },
        trailer="pW4nIEWJsmc",
        platforms=["Android"],
        tags=["Puzzle", "Casual"],
        images={"cover": "https://img.youtube.com/vi/pW4nIEWJsmc/hqdefault.jpg"},
        description="A thoughtful mobile experience. Trailer and store link below.",
    ),
    Game(
        id="chicken-bounce",
        title="Chicken Bounce",
        stores={
            "googlePlay": "https://play.google.com/store/apps/details?id=com.solaragames.chickenbounce"
        },
        trailer=None,
        platforms=["Android"],
        tags=["Arcade", "Casual"],
        images={"cover": ""},
        description="Light, bouncy fun on mobile. Google Play link below.",
    ),
    Game(
        id="tappy-fly",
        title="Tappy Fly",
        stores={
            "googlePlay": "https://play.google.com/store/apps/details?id=com.solaragames.tappyfly"
        },
        trailer=None,
        platforms=["Android"],
        tags=["Arcade", "Casual"],
        images={"cover": ""},
        description="Tap to fly and dodge in this pick-up-and-play mobile game.",
    ),
)


def _check_unique_ids(games: Iterable[Game]) -> None:
    seen = set()
    for game in games:
        if game.id in seen:
            raise CatalogError(f"duplicate game id {game.id!r}")
        seen.add(game.id)


def builtin_catalog() -> Catalog:
    """Return the built-in catalog."""
    return _BUILTIN_GAMES


def load_catalog_file(path: str) -> Catalog:
    """Read a JSON array of games from `path`.

    Raises CatalogError if the file cannot be read, is not valid JSON, does
    not match the Game shape or repeats an id.
    """
    try:
        with open(path, "rb") as fh:
            raw = fh.read()
    except OSError as e:
        raise CatalogError(f"cannot read games file {path}: {e}") from e

    try:
        games = tuple(_games_adapter.validate_json(raw))
    except ValidationError as e:
        raise CatalogError(f"invalid games file {path}: {e}") from e

    _check_unique_ids(games)
    return games


def load_catalog(games_file: Optional[str] = None) -> Catalog:
    """Load from `games_file` when given, otherwise use the built-in list."""
    if games_file:
        games = load_catalog_file(games_file)
        logger.info("Loaded %d games from %s", len(games), games_file)
    else:
        games = builtin_catalog()
        logger.info("Using built-in catalog with %d games", len(games))
    return games


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    try:
        app.state.catalog = load_catalog(settings.games_file)
    except CatalogError as e:
        logger.critical("Failed to load game catalog: %s", e)
        raise
    yield


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog
