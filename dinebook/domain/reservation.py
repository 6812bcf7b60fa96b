"""
Reservation entity — one booking attempt and the dishes ordered with it.

A reservation starts as a draft (no dishes), becomes dish-assigned once a
dish selection fits the party size, and is admitted by the store.  After
admission it is never changed again.
"""

from dataclasses import dataclass, field
from typing import Iterable, Literal

from dinebook.domain.errors import RejectedTooManyDishes


@dataclass(frozen=True)
class DishLine:
    """One dish type and how many of it."""

    name: str
    quantity: int

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("dish name must be a non-empty string")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"dish quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 1:
            raise ValueError(f"dish quantity must be >= 1, got {self.quantity}")


def parse_num_of_guests(value: int | str) -> int:
    """Normalise a guest count (int or numeric form string) to a positive int."""
    if isinstance(value, bool):
        raise ValueError(f"invalid number of guests: {value!r}")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ValueError(f"invalid number of guests: {value!r}") from None
    if not isinstance(value, int) or value < 1:
        raise ValueError(f"invalid number of guests: {value!r}")
    return value


@dataclass
class Reservation:
    client_name: str
    num_of_guests: int
    time: str  # slot key, e.g. "18:00"; compared as an exact string
    dishes: list[DishLine] = field(default_factory=list)
    admitted: bool = field(default=False, compare=False, repr=False)

    @classmethod
    def create(cls, client_name: str, num_of_guests: int | str, time: str) -> "Reservation":
        """Build a draft reservation. Field presence is checked by the caller."""
        return cls(
            client_name=client_name,
            num_of_guests=parse_num_of_guests(num_of_guests),
            time=time,
        )

    @property
    def state(self) -> Literal["draft", "dish-assigned", "admitted"]:
        if self.admitted:
            return "admitted"
        return "dish-assigned" if self.dishes else "draft"

    @property
    def total_dishes(self) -> int:
        return sum(d.quantity for d in self.dishes)

    def assign_dishes(self, dishes: Iterable[DishLine]) -> None:
        """
        Bind a dish selection to this reservation.

        Raises RejectedTooManyDishes when the quantities add up to more
        than the number of guests; the current dishes are left as they were.
        """
        if self.admitted:
            raise ValueError("an admitted reservation cannot be changed")
        dishes = list(dishes)
        requested = sum(d.quantity for d in dishes)
        if requested > self.num_of_guests:
            raise RejectedTooManyDishes(requested, self.num_of_guests)
        self.dishes = dishes

    def describe(self) -> str:
        dish_info = ", ".join(f"{d.quantity}x {d.name}" for d in self.dishes)
        return (
            f"Cliente: {self.client_name}, Número de invitados: {self.num_of_guests}, "
            f"Hora: {self.time}, Platos: {dish_info}"
        )
