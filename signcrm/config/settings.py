"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from signcrm.core.exceptions import ConfigurationError


class PricingSettings(BaseSettings):
    """Quotation defaults applied to newly created jobs."""

    model_config = SettingsConfigDict(env_prefix="PRICING_")

    default_profit_markup_percentage: float = 25.0
    # Company-wide overhead contribution copied into new quotations
    default_fixed_cost_contribution_percentage: float = 15.0

    # Payment slots shown on the job form
    max_payment_slots: int = 3

    @field_validator("max_payment_slots")
    @classmethod
    def positive_slots(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_payment_slots must be at least 1")
        return v


class CurrencySettings(BaseSettings):
    """Display currency configuration."""

    model_config = SettingsConfigDict(env_prefix="CURRENCY_")

    code: str = "GBP"
    symbol: str = "£"
    decimals: int = 2


class PdfSettings(BaseSettings):
    """Printable job report configuration."""

    model_config = SettingsConfigDict(env_prefix="PDF_")

    company_name: str = "Sign Group"
    header_text: str = "Job Report"
    footer_text: str = "Confidential - internal use only"
    # Mock-up images given as http(s) URLs are fetched at render time
    include_remote_images: bool = True
    mockup_width_mm: float = 100.0


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "SignCRM"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Sub-settings
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    currency: CurrencySettings = Field(default_factory=CurrencySettings)
    pdf: PdfSettings = Field(default_factory=PdfSettings)


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create global settings instance.

    Raises:
        ConfigurationError: An environment variable holds an invalid value.
    """
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            raise ConfigurationError(
                "Invalid settings", details={"errors": e.errors(include_url=False)}
            ) from e
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
