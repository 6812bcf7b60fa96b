from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class MenuItem:
    """One dish on the menu."""

    name: str
    price: float
    image_ref: str = ""


class MenuUnavailable(Exception):
    """The menu could not be fetched or parsed."""


class MenuCatalog(ABC):
    """
    Port: where the menu comes from.

    Only the console shell reads the menu, to offer dish choices.
    Reservations never check dish names against it.
    """

    @abstractmethod
    def load(self) -> list[MenuItem]:
        """Return every dish, in menu order. Raises MenuUnavailable."""
        ...


def parse_menu(data) -> list[MenuItem]:
    """
    Convert decoded menu JSON into MenuItems.

    Accepts the Spanish keys of the restaurant's menu.json
    (nombre, precio, imagen) as well as name, price, image.
    """
    if not isinstance(data, list):
        raise MenuUnavailable(f"menu must be a list, got {type(data).__name__}")

    items = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise MenuUnavailable(f"menu entry #{index} is not an object")
        name = entry.get("nombre", entry.get("name"))
        price = entry.get("precio", entry.get("price"))
        image = entry.get("imagen", entry.get("image", ""))
        if not isinstance(name, str) or not name:
            raise MenuUnavailable(f"menu entry #{index} has no name")
        try:
            price = float(price)
        except (TypeError, ValueError):
            raise MenuUnavailable(f"menu entry {name!r} has an invalid price: {price!r}") from None
        items.append(MenuItem(name=name, price=price, image_ref=image or ""))
    return items
