"""Application configuration using pydantic-settings."""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ledger settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "EcoStay Ledger"
    app_version: str = "0.1.0"
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    # Calendar
    calendar_days: int = 30

    # Pricing
    min_price: float = 100.0
    default_base_price: float = 1500.0

    # Environmental rates
    default_environmental_rate: float = 1.00
    environmental_rate_min: float = 0.80
    environmental_rate_max: float = 1.20

    # Seed for randomize_environmental_rates (None = nondeterministic)
    random_seed: int | None = None

    @model_validator(mode="after")
    def _validate_pricing(self) -> "Settings":
        """Reject a default base price that the ledger itself would refuse."""
        if self.default_base_price < self.min_price:
            raise ValueError("default_base_price must not be below min_price")
        return self

    @model_validator(mode="after")
    def _validate_rates(self) -> "Settings":
        """Ensure the default environmental rate sits inside the allowed band."""
        if self.environmental_rate_min > self.environmental_rate_max:
            raise ValueError("environmental_rate_min must not exceed environmental_rate_max")
        if not self.environmental_rate_min <= self.default_environmental_rate <= self.environmental_rate_max:
            raise ValueError("default_environmental_rate must lie within the environmental rate bounds")
        return self

    @model_validator(mode="after")
    def _validate_calendar(self) -> "Settings":
        # A reservation needs at least one check-in and one check-out day.
        if self.calendar_days < 2:
            raise ValueError("calendar_days must be at least 2")
        return self


settings = Settings()
