"""
Pytest fixtures for the games API tests.
"""

import json
from typing import Callable, Iterator, List

import pytest
from fastapi.testclient import TestClient

from games_api import create_app
from games_api.config import Settings


SAMPLE_GAMES = [
    {
        "id": "alpha",
        "title": "Alpha",
        "stores": {"steam": "https://store.example.com/alpha"},
        "trailer": "abc123",
        "platforms": ["PC"],
        "tags": ["Puzzle"],
        "images": {"cover": "https://img.example.com/alpha.jpg"},
        "description": "First sample game.",
    },
    {
        "id": "beta",
        "title": "Beta",
        "stores": {},
        "trailer": None,
        "platforms": ["Android", "PC"],
        "tags": [],
        "images": {"cover": ""},
        "description": "",
    },
]


@pytest.fixture
def write_games_file(tmp_path) -> Callable[[object], str]:
    """Write `content` (JSON-encoded unless already a string) to a temp file."""

    def _write(content, name: str = "games.json") -> str:
        path = tmp_path / name
        if not isinstance(content, str):
            content = json.dumps(content)
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def settings() -> Settings:
    return Settings(allow_origin="https://example.com")


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Client for an app using the built-in catalog; lifespan runs on enter."""
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def sample_games() -> List[dict]:
    return [dict(g) for g in SAMPLE_GAMES]
