"""
Configuration settings for the application
"""

import os
from typing import Dict, List
from pydantic import BaseModel
from pydantic_settings import BaseSettings


class CurrencyConfig(BaseModel):
    """Currency display configuration"""
    code: str
    symbol: str
    name: str


CURRENCIES: Dict[str, CurrencyConfig] = {
    "ZAR": CurrencyConfig(code="ZAR", symbol="R", name="South African Rand"),
    "USD": CurrencyConfig(code="USD", symbol="$", name="US Dollar"),
    "EUR": CurrencyConfig(code="EUR", symbol="€", name="Euro"),
    "GBP": CurrencyConfig(code="GBP", symbol="£", name="British Pound"),
}


class DisplayConfig(BaseModel):
    """Explicit formatting/classification settings passed into the services"""
    currency: CurrencyConfig = CURRENCIES["ZAR"]
    timezone: str = "Africa/Johannesburg"
    due_soon_days: int = 7
    budget_warning_percent: float = 90.0
    vat_rate: float = 0.15
    max_event_columns: int = 10

    class Config:
        frozen = True


DEFAULT_DISPLAY_CONFIG = DisplayConfig()


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = os.getenv("APP_NAME", "VowSync")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]

    # Display defaults
    DEFAULT_CURRENCY: str = os.getenv("DEFAULT_CURRENCY", "ZAR")
    DEFAULT_TIMEZONE: str = os.getenv("DEFAULT_TIMEZONE", "Africa/Johannesburg")

    # Status thresholds
    DUE_SOON_DAYS: int = 7
    BUDGET_WARNING_PERCENT: float = 90.0
    VAT_RATE: float = 0.15  # South Africa

    # Table limits
    MAX_EVENT_COLUMNS: int = 10
    MAX_EXPORT_ROWS: int = 5000

    class Config:
        env_file = ".env"

    def display_config(self) -> DisplayConfig:
        """Build the display config handed to classifiers and formatters"""
        currency = CURRENCIES.get(self.DEFAULT_CURRENCY.upper(), CURRENCIES["ZAR"])
        return DisplayConfig(
            currency=currency,
            timezone=self.DEFAULT_TIMEZONE,
            due_soon_days=self.DUE_SOON_DAYS,
            budget_warning_percent=self.BUDGET_WARNING_PERCENT,
            vat_rate=self.VAT_RATE,
            max_event_columns=self.MAX_EVENT_COLUMNS,
        )


settings = Settings()


def get_display_config() -> DisplayConfig:
    """FastAPI dependency for the display config"""
    return settings.display_config()
