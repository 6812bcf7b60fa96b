import os

from .ports import MenuCatalog


def create_menu_catalog(source: str | None = None) -> MenuCatalog:
    """
    Factory: create the menu adapter based on config.

    The source can be passed explicitly or read from the MENU_SOURCE
    env var ("file" or "http"). Defaults to "file".
    """
    source = source or os.environ.get("MENU_SOURCE", "file")

    if source == "file":
        from .json_menu import JsonFileMenuCatalog

        return JsonFileMenuCatalog(os.environ.get("MENU_PATH", "data/menu.json"))

    if source == "http":
        from .http_menu import HttpMenuCatalog

        return HttpMenuCatalog(os.environ["MENU_URL"])

    raise ValueError(f"Unknown menu source: {source!r}")
