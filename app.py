# app.py
from datetime import date, datetime, time
from typing import Dict, Mapping

from flask import Flask, render_template, request, redirect, url_for, jsonify, flash

from catalog import RoomCatalog
from config import Config, configure_logging
from errors import PersistenceFailure, ReservationError
from models import ReservationRequest, Room
from receipts import save_receipt
from reservations import compute_reservation, format_currency

app = Flask(__name__)
app.config.from_object(Config)
app.config.from_prefixed_env()
configure_logging(app.config["LOG_LEVEL"])

# Built once at startup and only ever read afterwards
catalog = RoomCatalog.initialize()


class BookingInputError(ValueError):
    """Form or JSON value that cannot become a ReservationRequest."""

    def __init__(self, message: str, kind: str = "invalid_input"):
        super().__init__(message)
        self.message = message
        self.kind = kind


# Helper functions
def today() -> date:
    return date.today()


def room_to_dict(index: int, room: Room) -> Dict:
    return {
        "index": index,
        "type": room.type.label,
        "price_per_night": room.price_per_night,
        "available": room.available,
    }


def parse_choice(data: Mapping, field: str, label: str, choices) -> int:
    raw = data.get(field, "")
    # JSON floats and booleans are not whole-number choices
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise BookingInputError(f"{label} must be a whole number")
    try:
        value = int(raw)
    except ValueError:
        raise BookingInputError(f"{label} must be a whole number")
    if value not in choices:
        raise BookingInputError(f"{label} is out of range")
    return value


def parse_check_in_date(raw) -> date:
    try:
        check_in = datetime.strptime(str(raw or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise BookingInputError("Check-in date must be in YYYY-MM-DD format", "invalid_date")
    # date guard: the calculator never sees a past check-in
    if check_in < today():
        raise BookingInputError("Please select a date after the current day", "invalid_date")
    return check_in


def build_request(data: Mapping) -> ReservationRequest:
    """Turn submitted form/JSON values into a ReservationRequest."""
    cfg = app.config
    room_type = data.get("room_type", "")
    if isinstance(room_type, str):
        room_type = room_type.strip()

    quantity = parse_choice(data, "quantity", "Number of rooms", range(1, cfg["MAX_ROOMS"] + 1))
    nights = parse_choice(data, "nights", "Number of nights", range(1, cfg["MAX_NIGHTS"] + 1))
    hour = parse_choice(data, "check_in_hour", "Check-in hour", range(24))
    minute = parse_choice(data, "check_in_minute", "Check-in minute", cfg["CHECK_IN_MINUTES"])
    check_in_date = parse_check_in_date(data.get("check_in_date"))

    return ReservationRequest(
        name=str(data.get("name", "") or "").strip(),
        email=str(data.get("email", "") or "").strip(),
        phone=str(data.get("phone", "") or "").strip(),
        room_type=room_type,
        quantity=quantity,
        nights=nights,
        check_in_date=check_in_date,
        check_in_time=time(hour, minute),
    )


# UI Routes
@app.route("/")
def index():
    rooms = [room_to_dict(i, r) for i, r in enumerate(catalog)]
    return render_template(
        "index.html",
        rooms=rooms,
        format_currency=format_currency,
        max_rooms=app.config["MAX_ROOMS"],
        max_nights=app.config["MAX_NIGHTS"],
        minutes=app.config["CHECK_IN_MINUTES"],
        today=today().isoformat(),
    )


@app.route("/reserve", methods=["POST"])
def reserve():
    try:
        booking = build_request(request.form)
    except BookingInputError as e:
        app.logger.warning("Rejected booking form: %s", e.message)
        flash(e.message, "warning" if e.kind == "invalid_date" else "danger")
        return redirect(url_for("index"))

    try:
        receipt = compute_reservation(booking, catalog)
    except ReservationError as e:
        app.logger.warning("Booking refused (%s): %s", e.kind, e.message)
        flash(e.message, "warning")
        return redirect(url_for("index"))

    app.logger.info("Booked %s x%d for %s", receipt.room_type, receipt.quantity, receipt.name)
    try:
        save_receipt(receipt.name, receipt, app.config["RECEIPT_DIR"])
    except PersistenceFailure as e:
        flash(e.message, "danger")
    else:
        flash("Booking receipt saved to file successfully.", "success")

    return render_template("receipt.html", receipt=receipt.render())


# JSON API: catalog queries and bookings without the HTML form

@app.route("/api/rooms", methods=["GET"])
def api_rooms():
    return jsonify([room_to_dict(i, r) for i, r in enumerate(catalog)])


@app.route("/api/rooms/<int:index>", methods=["GET"])
def api_room(index):
    if index >= len(catalog):
        return jsonify({"error": "not found"}), 404
    return jsonify(room_to_dict(index, catalog.lookup(index)))


@app.route("/api/reservations", methods=["POST"])
def api_reservations():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({"error": "invalid_input", "message": "Request body must be a JSON object"}), 400
    try:
        booking = build_request(data)
        receipt = compute_reservation(booking, catalog)
    except (BookingInputError, ReservationError) as e:
        return jsonify({"error": e.kind, "message": e.message}), 400

    try:
        path = save_receipt(receipt.name, receipt, app.config["RECEIPT_DIR"])
    except PersistenceFailure as e:
        return jsonify({"error": e.kind, "message": e.message}), 500

    app.logger.info("Booked %s x%d for %s via API", receipt.room_type, receipt.quantity, receipt.name)
    return jsonify({
        "receipt": receipt.render(),
        "total": receipt.grand_total,
        "file": path.name,
    }), 201


if __name__ == "__main__":
    app.run(debug=True)
