"""API Dependencies - Reservation engine"""
from application.engine import HotelEngine
from infrastructure.config import settings

# One engine per process; requests are served one at a time on the event loop
_engine = HotelEngine(
    data_dir=settings.HOTEL_DATA_DIR,
    rooms_file=settings.ROOMS_FILE,
    reservations_file=settings.RESERVATIONS_FILE
)


def get_engine() -> HotelEngine:
    return _engine
