"""
Application configuration
Read from environment variables or a local .env file
"""
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    APP_NAME: str = "Hotel Reservation API"

    # Storage
    HOTEL_DATA_DIR: str = "hotel_data"
    ROOMS_FILE: str = "rooms.csv"
    RESERVATIONS_FILE: str = "reservations.csv"

    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


settings = Settings()
