"""Application configuration via environment variables."""

import json
from typing import List

from pydantic_settings import BaseSettings

from leaveledger.calendar.schemas import HolidaySet
from leaveledger.common.constants import DEFAULT_BANK_HOLIDAYS


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"
    CORS_ORIGINS: str = '["http://localhost:3000"]'

    # Calendar — JSON object of YYYY-MM-DD → holiday name
    BANK_HOLIDAYS: str = json.dumps(DEFAULT_BANK_HOLIDAYS, ensure_ascii=False)

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS_ORIGINS JSON string into a list."""
        try:
            return json.loads(self.CORS_ORIGINS)
        except (json.JSONDecodeError, TypeError):
            return ["http://localhost:3000"]

    @property
    def bank_holidays(self) -> HolidaySet:
        """Parse BANK_HOLIDAYS into a HolidaySet.

        Malformed JSON or dates raise; a broken holiday table must not
        silently turn every day into a workday.
        """
        return HolidaySet.from_strings(json.loads(self.BANK_HOLIDAYS))

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


settings = Settings()
