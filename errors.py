"""Error types raised by the booking core.

Every error here is recoverable by the guest: the web layer shows the
message and lets them correct the form and submit again.
"""

from typing import Optional, Sequence


class ReservationError(Exception):
    """Base class for all booking failures."""

    kind = "reservation_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RoomNotFound(LookupError):
    """Raised by the catalog when a selection does not match any room."""

    def __init__(self, selection):
        super().__init__(f"No room matches selection {selection!r}")
        self.selection = selection


class InvalidSelection(ReservationError):
    kind = "invalid_selection"

    def __init__(self, selection):
        super().__init__("Please select a valid room type")
        self.selection = selection


class RoomUnavailable(ReservationError):
    kind = "room_unavailable"

    def __init__(self, room_type: str):
        super().__init__("Selected room is not available")
        self.room_type = room_type


class IncompleteInformation(ReservationError):
    kind = "incomplete_information"

    def __init__(self, missing_fields: Sequence[str]):
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            "Please fill in all the required information before proceeding. "
            f"Missing: {', '.join(self.missing_fields)}"
        )


class PersistenceFailure(ReservationError):
    kind = "persistence_failure"

    def __init__(self, path, cause: Optional[OSError] = None):
        super().__init__("Failed to save the booking receipt to file.")
        self.path = path
        self.cause = cause
