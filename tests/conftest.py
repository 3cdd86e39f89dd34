from datetime import date, time, timedelta

import pytest

import app as app_module
from catalog import RoomCatalog
from models import ReservationRequest, Room, RoomType


@pytest.fixture
def catalog():
    return RoomCatalog.initialize()


@pytest.fixture
def suite_unavailable_catalog():
    return RoomCatalog([
        Room(RoomType.STANDARD, 100.0, True),
        Room(RoomType.DELUXE, 150.0, True),
        Room(RoomType.SUITE, 200.0, False),
    ])


@pytest.fixture
def make_request():
    def _make(**overrides):
        fields = dict(
            name="Alice",
            email="a@x.com",
            phone="123",
            room_type=RoomType.STANDARD,
            quantity=2,
            nights=3,
            check_in_date=date(2024, 1, 10),
            check_in_time=time(9, 15),
        )
        fields.update(overrides)
        return ReservationRequest(**fields)
    return _make


@pytest.fixture
def client(tmp_path, monkeypatch):
    monkeypatch.setitem(app_module.app.config, "RECEIPT_DIR", tmp_path)
    monkeypatch.setitem(app_module.app.config, "TESTING", True)
    return app_module.app.test_client()


@pytest.fixture
def booking_form():
    return {
        "room_type": "Standard Room",
        "quantity": "2",
        "nights": "3",
        "check_in_hour": "9",
        "check_in_minute": "15",
        "check_in_date": (date.today() + timedelta(days=1)).isoformat(),
        "name": "Alice",
        "email": "a@x.com",
        "phone": "123",
    }
