# models.py
from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Union


class RoomType(Enum):
    STANDARD = "Standard Room"
    DELUXE = "Deluxe Room"
    SUITE = "Suite Room"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class Room:
    type: RoomType
    price_per_night: float = 0.0
    available: bool = True

    def __post_init__(self):
        if self.price_per_night < 0:
            raise ValueError("price_per_night must be non-negative")


# what a selector may hand in: the enum, its label, or a position in the catalog
RoomSelection = Union[RoomType, str, int]


@dataclass(frozen=True)
class ReservationRequest:
    name: str
    email: str
    phone: str
    room_type: RoomSelection
    quantity: int
    nights: int
    check_in_date: date
    check_in_time: time


@dataclass(frozen=True)
class Receipt:
    name: str
    email: str
    phone: str
    room_type: str
    nights: int
    check_in_date: date
    check_in_time: time
    quantity: int
    price_per_night: float
    grand_total: float

    def render(self) -> str:
        # imported here so models stays free of formatting rules
        from reservations import format_receipt
        return format_receipt(self)

    def __str__(self) -> str:
        return self.render()
