"""Domain Exceptions"""


class HotelError(Exception):
    """Base class for every error raised by the reservation engine"""


class StorageUnavailable(HotelError):
    """Data directory or record file cannot be created, read or written"""


class MalformedRecord(HotelError):
    """A stored record violates its field contract"""

    def __init__(self, source: str, line_number: int, reason: str):
        self.source = source
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Malformed record in {source} line {line_number}: {reason}")


class BookingRejected(HotelError, ValueError):
    """A booking failed validation; the store was not touched"""


class InvalidRoom(BookingRejected):
    def __init__(self, room_id: int):
        self.room_id = room_id
        super().__init__(f"Invalid room id: {room_id}")


class RoomUnavailable(BookingRejected):
    def __init__(self, room_id: int, check_in, check_out):
        self.room_id = room_id
        super().__init__(
            f"Room {room_id} not available from {check_in} to {check_out}"
        )


class InvalidDateRange(BookingRejected):
    def __init__(self, check_in, check_out):
        super().__init__(
            f"Check-out must be after check-in (got {check_in} -> {check_out})"
        )


class InvalidGuestName(BookingRejected):
    def __init__(self, guest_name: str):
        super().__init__(f"Invalid guest name: {guest_name!r}")
