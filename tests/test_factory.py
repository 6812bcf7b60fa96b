"""
Factory tests: adapters and limits picked from environment variables.
"""

import pytest

from dinebook.adapters.factory import create_repository, limit_per_hour_from_env
from dinebook.adapters.json_file_repository import JsonFileReservationRepository
from dinebook.adapters.simulator_repository import InMemoryReservationRepository
from dinebook.adapters.sqlite_repository import SqliteReservationRepository
from dinebook.menu.factory import create_menu_catalog
from dinebook.menu.http_menu import HttpMenuCatalog
from dinebook.menu.json_menu import JsonFileMenuCatalog


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "RESERVATIONS_BACKEND", "RESERVATIONS_PATH", "RESERVATION_LIMIT_PER_HOUR",
        "MENU_SOURCE", "MENU_PATH", "MENU_URL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_default_backend_is_json_file():
    repo = create_repository()
    assert isinstance(repo, JsonFileReservationRepository)
    assert str(repo.path) == "data/reservations.json"


def test_backend_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("RESERVATIONS_BACKEND", "sqlite")
    monkeypatch.setenv("RESERVATIONS_PATH", str(tmp_path / "db" / "reservations.db"))
    repo = create_repository()
    assert isinstance(repo, SqliteReservationRepository)
    assert (tmp_path / "db").is_dir()
    repo.close()


def test_explicit_backend_wins(monkeypatch):
    monkeypatch.setenv("RESERVATIONS_BACKEND", "sqlite")
    assert isinstance(create_repository("memory"), InMemoryReservationRepository)


def test_unknown_backend():
    with pytest.raises(ValueError):
        create_repository("redis")


def test_default_limit():
    assert limit_per_hour_from_env() == 10


def test_limit_from_env(monkeypatch):
    monkeypatch.setenv("RESERVATION_LIMIT_PER_HOUR", "4")
    assert limit_per_hour_from_env() == 4


@pytest.mark.parametrize("raw", ["0", "-5", "diez"])
def test_invalid_limit_from_env(monkeypatch, raw):
    monkeypatch.setenv("RESERVATION_LIMIT_PER_HOUR", raw)
    with pytest.raises(ValueError):
        limit_per_hour_from_env()


def test_default_menu_source_is_file():
    assert isinstance(create_menu_catalog(), JsonFileMenuCatalog)


def test_http_menu_source(monkeypatch):
    monkeypatch.setenv("MENU_SOURCE", "http")
    monkeypatch.setenv("MENU_URL", "http://localhost:9/menu.json")
    assert isinstance(create_menu_catalog(), HttpMenuCatalog)


def test_unknown_menu_source():
    with pytest.raises(ValueError):
        create_menu_catalog("carrier-pigeon")
