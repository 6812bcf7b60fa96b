import requests

from .ports import MenuCatalog, MenuItem, MenuUnavailable, parse_menu


class HttpMenuCatalog(MenuCatalog):
    """Adapter: menu.json served over HTTP."""

    def __init__(self, url: str, timeout: float = 10):
        self._url = url
        self._timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json", "Cache-Control": "no-cache"})

    def load(self) -> list[MenuItem]:
        try:
            resp = self.session.get(self._url, timeout=self._timeout)
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as exc:
            raise MenuUnavailable(f"could not load menu from {self._url}: {exc}") from exc
        return parse_menu(data)
