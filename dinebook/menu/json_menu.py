import json
from pathlib import Path

from .ports import MenuCatalog, MenuItem, MenuUnavailable, parse_menu


class JsonFileMenuCatalog(MenuCatalog):
    """Adapter: menu.json on the local filesystem."""

    def __init__(self, path: str = "data/menu.json"):
        self._path = Path(path)

    def load(self) -> list[MenuItem]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise MenuUnavailable(f"could not load menu from {self._path}: {exc}") from exc
        return parse_menu(data)
