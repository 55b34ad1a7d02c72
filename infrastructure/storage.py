"""CSV record storage for the room catalog and the reservation store"""
import csv
import logging
import os
import tempfile
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, List, Optional, Set, Union
from uuid import UUID

from pydantic import ValidationError

from domain.entities import Room, Reservation
from domain.enums import RoomType
from domain.exceptions import MalformedRecord, StorageUnavailable
from domain.value_objects import DateRange

logger = logging.getLogger(__name__)

ROOM_HEADER = ["id", "type", "pricePerNight"]
RESERVATION_HEADER = ["id", "guestName", "roomId", "checkIn", "checkOut", "paid", "totalAmount"]

DEFAULT_ROOMS = [
    Room(room_id=101, room_type=RoomType.STANDARD, price_per_night=Decimal("2000")),
    Room(room_id=102, room_type=RoomType.STANDARD, price_per_night=Decimal("2000")),
    Room(room_id=201, room_type=RoomType.DELUXE, price_per_night=Decimal("3500")),
    Room(room_id=202, room_type=RoomType.DELUXE, price_per_night=Decimal("3500")),
    Room(room_id=301, room_type=RoomType.SUITE, price_per_night=Decimal("6000")),
]


# ============================================================================
# RECORD CODECS
# ============================================================================

def room_to_row(room: Room) -> List[str]:
    return [str(room.room_id), room.room_type.value, str(room.price_per_night)]


def room_from_row(row: List[str]) -> Room:
    if len(row) != len(ROOM_HEADER):
        raise ValueError(f"expected {len(ROOM_HEADER)} fields, got {len(row)}")
    room_id, room_type, price = row
    try:
        parsed_type = RoomType(room_type)
    except ValueError:
        raise ValueError(f"unknown room type {room_type!r}")
    return Room(
        room_id=int(room_id),
        room_type=parsed_type,
        price_per_night=_parse_decimal(price)
    )


def reservation_to_row(reservation: Reservation) -> List[str]:
    return [
        str(reservation.reservation_id),
        reservation.guest_name,
        str(reservation.room_id),
        reservation.check_in.isoformat(),
        reservation.check_out.isoformat(),
        "true" if reservation.paid else "false",
        str(reservation.total_amount),
    ]


def reservation_from_row(row: List[str]) -> Reservation:
    if len(row) != len(RESERVATION_HEADER):
        raise ValueError(f"expected {len(RESERVATION_HEADER)} fields, got {len(row)}")
    reservation_id, guest_name, room_id, check_in, check_out, paid, total = row
    parsed_id = UUID(reservation_id)
    if str(parsed_id) != reservation_id:
        raise ValueError(f"reservation id not in canonical form: {reservation_id!r}")
    return Reservation(
        reservation_id=parsed_id,
        guest_name=guest_name,
        room_id=int(room_id),
        date_range=DateRange(
            check_in=date.fromisoformat(check_in),
            check_out=date.fromisoformat(check_out)
        ),
        paid=_parse_bool(paid),
        total_amount=_parse_decimal(total)
    )


def _parse_decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise ValueError(f"not a decimal: {value!r}")


def _parse_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"expected 'true' or 'false', got {value!r}")


# ============================================================================
# GATEWAY
# ============================================================================

class CsvStorage:
    """Reads and writes the two record sets under one data directory.

    Rooms are written once, when the catalog is seeded. Reservations are
    rewritten in full after every mutation; the new content goes to a
    temporary file that replaces the old one, so readers only ever see a
    complete file.
    """

    def __init__(self, data_dir: Union[str, Path],
                 rooms_file: str = "rooms.csv",
                 reservations_file: str = "reservations.csv"):
        self.data_dir = Path(data_dir)
        self.rooms_path = self.data_dir / rooms_file
        self.reservations_path = self.data_dir / reservations_file

    def init(self) -> None:
        """Create the data directory and seed missing record sets"""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"Cannot create data directory {self.data_dir}: {e}") from e

        if not self.rooms_path.exists():
            logger.info("Seeding default room inventory in %s", self.rooms_path)
            self._write_rows(self.rooms_path, ROOM_HEADER, (room_to_row(r) for r in DEFAULT_ROOMS))
        if not self.reservations_path.exists():
            logger.info("Creating empty reservation file %s", self.reservations_path)
            self._write_rows(self.reservations_path, RESERVATION_HEADER, [])

    def load_rooms(self) -> List[Room]:
        return self._read_records(self.rooms_path, room_from_row, key=lambda r: r.room_id)

    def load_reservations(self, room_ids: Optional[Set[int]] = None) -> List[Reservation]:
        """Load the reservation store; with room_ids, every record must point at one of them"""
        def check(reservation):
            if room_ids is not None and reservation.room_id not in room_ids:
                raise ValueError(f"unknown room id {reservation.room_id}")

        return self._read_records(
            self.reservations_path, reservation_from_row,
            key=lambda r: r.reservation_id, check=check
        )

    def save_reservations(self, reservations: Iterable[Reservation]) -> None:
        """Rewrite the whole reservation record set"""
        self._write_rows(
            self.reservations_path,
            RESERVATION_HEADER,
            (reservation_to_row(r) for r in reservations)
        )

    # ==================== PRIVATE HELPERS ====================
    def _read_records(self, path: Path, parse, key, check=None) -> list:
        try:
            with open(path, "r", encoding="utf-8", newline="") as f:
                lines = list(csv.reader(f))
        except OSError as e:
            logger.error("Cannot read %s: %s", path, e)
            raise StorageUnavailable(f"Cannot read {path}: {e}") from e
        except (UnicodeDecodeError, csv.Error) as e:
            raise MalformedRecord(path.name, 0, f"unreadable file: {e}") from e

        records = []
        seen = set()
        # Line 1 is the header
        for line_number, row in enumerate(lines[1:], start=2):
            if not row or all(not field.strip() for field in row):
                continue
            try:
                record = parse(row)
                if check is not None:
                    check(record)
            except (ValueError, ValidationError) as e:
                raise MalformedRecord(path.name, line_number, str(e)) from e
            if key(record) in seen:
                raise MalformedRecord(path.name, line_number, f"duplicate id {key(record)}")
            seen.add(key(record))
            records.append(record)
        logger.info("Loaded %d records from %s", len(records), path)
        return records

    def _write_rows(self, path: Path, header: List[str], rows: Iterable[List[str]]) -> None:
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{path.name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerow(header)
                writer.writerows(rows)
            os.replace(tmp_name, path)
            tmp_name = None
        except (OSError, UnicodeError) as e:
            logger.error("Cannot write %s: %s", path, e)
            raise StorageUnavailable(f"Cannot write {path}: {e}") from e
        finally:
            # Only set when the replace did not happen
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
