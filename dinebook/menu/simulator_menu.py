from .ports import MenuCatalog, MenuItem, MenuUnavailable


class InMemoryMenuCatalog(MenuCatalog):
    """
    In-memory menu for testing.

    Pass unavailable=True to make load() fail like a missing menu file.
    """

    def __init__(self, items: list[MenuItem] | None = None, unavailable: bool = False):
        self._items = list(items or [])
        self.unavailable = unavailable

    def load(self) -> list[MenuItem]:
        if self.unavailable:
            raise MenuUnavailable("simulated menu outage")
        return list(self._items)
