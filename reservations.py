# reservations.py
"""Pricing and receipt formatting for a single booking.

Nothing here writes files or touches the catalog; :func:`compute_reservation`
is a pure function of its inputs.
"""
import logging
from datetime import time

from catalog import RoomCatalog
from errors import IncompleteInformation, InvalidSelection, RoomNotFound, RoomUnavailable
from models import Receipt, ReservationRequest

logger = logging.getLogger(__name__)

CURRENCY = "RM"

RECEIPT_TEMPLATE = (
    "Customer Information:\n"
    "Name: {name}\n"
    "Email: {email}\n"
    "Phone Number: {phone}\n"
    "\n"
    "Booking Details:\n"
    "Room Type: {room_type}\n"
    "Number of Nights: {nights}\n"
    "Check-in Date: {check_in_date}\n"
    "Check-in Time: {check_in_time}\n"
    "Number of Rooms: {quantity}\n"
    "\n"
    "Payment Details:\n"
    "Price per Night: {price_per_night}\n"
    "Total Fee: {grand_total}"
)


def format_currency(amount: float) -> str:
    return f"{CURRENCY}{amount:.2f}"


def format_check_in_time(value: time) -> str:
    """12-hour clock with zero padding, e.g. ``09:15 AM`` or ``12:00 AM``."""
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{hour:02d}:{value.minute:02d} {suffix}"


def calculate_total(price_per_night: float, nights: int, quantity: int) -> float:
    total_per_room_stay = price_per_night * nights
    return total_per_room_stay * quantity


def format_receipt(receipt: Receipt) -> str:
    return RECEIPT_TEMPLATE.format(
        name=receipt.name,
        email=receipt.email,
        phone=receipt.phone,
        room_type=receipt.room_type,
        nights=receipt.nights,
        check_in_date=receipt.check_in_date.isoformat(),
        check_in_time=format_check_in_time(receipt.check_in_time),
        quantity=receipt.quantity,
        price_per_night=format_currency(receipt.price_per_night),
        grand_total=format_currency(receipt.grand_total),
    )


def missing_guest_fields(request: ReservationRequest):
    fields = (("name", request.name), ("email", request.email), ("phone", request.phone))
    return [field for field, value in fields if not value]


def compute_reservation(request: ReservationRequest, catalog: RoomCatalog) -> Receipt:
    """Validate ``request`` against ``catalog`` and price it.

    Checks run in a fixed order and stop at the first failure:
    room selection, room availability, then the guest contact fields.

    Raises:
        InvalidSelection: the selected room is not in the catalog.
        RoomUnavailable: the room exists but is marked unavailable.
        IncompleteInformation: name, email or phone is empty.
    """
    try:
        room = catalog.lookup(request.room_type)
    except RoomNotFound:
        raise InvalidSelection(request.room_type) from None

    if not room.available:
        raise RoomUnavailable(room.type.label)

    missing = missing_guest_fields(request)
    if missing:
        raise IncompleteInformation(missing)

    grand_total = calculate_total(room.price_per_night, request.nights, request.quantity)
    logger.debug(
        "Priced %s x%d for %d night(s): %s",
        room.type.label, request.quantity, request.nights, format_currency(grand_total),
    )
    return Receipt(
        name=request.name,
        email=request.email,
        phone=request.phone,
        room_type=room.type.label,
        nights=request.nights,
        check_in_date=request.check_in_date,
        check_in_time=request.check_in_time,
        quantity=request.quantity,
        price_per_night=room.price_per_night,
        grand_total=grand_total,
    )
