from datetime import date, time

import pytest

from errors import IncompleteInformation, InvalidSelection, RoomUnavailable
from models import Receipt, RoomType
from reservations import calculate_total, compute_reservation, format_check_in_time, format_currency

SCENARIO_A_RECEIPT = (
    "Customer Information:\n"
    "Name: Alice\n"
    "Email: a@x.com\n"
    "Phone Number: 123\n"
    "\n"
    "Booking Details:\n"
    "Room Type: Standard Room\n"
    "Number of Nights: 3\n"
    "Check-in Date: 2024-01-10\n"
    "Check-in Time: 09:15 AM\n"
    "Number of Rooms: 2\n"
    "\n"
    "Payment Details:\n"
    "Price per Night: RM100.00\n"
    "Total Fee: RM600.00"
)


def test_standard_room_receipt(catalog, make_request):
    receipt = compute_reservation(make_request(), catalog)

    assert receipt.grand_total == 600.0
    assert receipt.render() == SCENARIO_A_RECEIPT
    assert str(receipt) == SCENARIO_A_RECEIPT
    assert "Price per Night: RM100.00" in receipt.render()
    assert "Total Fee: RM600.00" in receipt.render()
    assert "Check-in Time: 09:15 AM" in receipt.render()


def test_compute_is_deterministic(catalog, make_request):
    request = make_request(room_type="Suite Room", quantity=4, nights=5)
    first = compute_reservation(request, catalog)
    second = compute_reservation(request, catalog)
    assert first == second
    assert first.render() == second.render()


def test_catalog_unchanged_after_booking(catalog, make_request):
    before = catalog.rooms()
    compute_reservation(make_request(room_type=RoomType.SUITE), catalog)
    compute_reservation(make_request(room_type=RoomType.SUITE), catalog)
    assert catalog.rooms() == before


@pytest.mark.parametrize("price,nights,quantity", [
    (100.0, 1, 1),
    (150.0, 5, 5),
    (0.0, 3, 2),
    (99.99, 3, 7),
    (12.345, 2, 3),
])
def test_total_is_price_times_nights_times_quantity(price, nights, quantity):
    assert calculate_total(price, nights, quantity) == price * nights * quantity


def test_no_rounding_before_final_format():
    receipt = Receipt(
        name="A", email="b", phone="c", room_type="Suite Room", nights=2,
        check_in_date=date(2024, 1, 1), check_in_time=time(0, 0), quantity=3,
        price_per_night=10.335, grand_total=calculate_total(10.335, 2, 3),
    )
    assert receipt.grand_total == pytest.approx(62.01)
    assert "Total Fee: RM62.01" in receipt.render()


def test_unavailable_room_rejected(suite_unavailable_catalog, make_request):
    with pytest.raises(RoomUnavailable) as excinfo:
        compute_reservation(make_request(room_type=RoomType.SUITE), suite_unavailable_catalog)
    assert excinfo.value.message == "Selected room is not available"


def test_unavailable_room_checked_before_guest_fields(suite_unavailable_catalog, make_request):
    request = make_request(room_type="Suite Room", name="", email="", phone="")
    with pytest.raises(RoomUnavailable):
        compute_reservation(request, suite_unavailable_catalog)


def test_invalid_selection_checked_first(catalog, make_request):
    with pytest.raises(InvalidSelection):
        compute_reservation(make_request(room_type=7, name=""), catalog)


def test_all_guest_fields_empty(catalog, make_request):
    with pytest.raises(IncompleteInformation) as excinfo:
        compute_reservation(make_request(name="", email="", phone=""), catalog)
    assert excinfo.value.missing_fields == ("name", "email", "phone")


def test_missing_field_is_named(catalog, make_request):
    with pytest.raises(IncompleteInformation) as excinfo:
        compute_reservation(make_request(email=""), catalog)
    assert excinfo.value.missing_fields == ("email",)


def test_whitespace_is_not_treated_as_empty(catalog, make_request):
    receipt = compute_reservation(make_request(phone=" "), catalog)
    assert "Phone Number:  \n" in receipt.render()


@pytest.mark.parametrize("hour,minute,expected", [
    (0, 0, "12:00 AM"),
    (9, 15, "09:15 AM"),
    (12, 0, "12:00 PM"),
    (13, 45, "01:45 PM"),
    (23, 30, "11:30 PM"),
])
def test_check_in_time_format(hour, minute, expected):
    assert format_check_in_time(time(hour, minute)) == expected


def test_midnight_check_in_on_receipt(catalog, make_request):
    receipt = compute_reservation(make_request(check_in_time=time(0, 0)), catalog)
    assert "Check-in Time: 12:00 AM" in receipt.render()


def test_format_currency():
    assert format_currency(100) == "RM100.00"
    assert format_currency(1234.5) == "RM1234.50"
