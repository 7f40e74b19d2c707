"""Application configuration utilities."""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings derived from environment variables."""

    gst_rate: Decimal = Field(default=Decimal("0.18"), alias="GST_RATE", ge=0, le=1)
    currency_prefix: str = Field(default="$", alias="CURRENCY_PREFIX")
    invoice_filename: str = Field(default="invoice.pdf", alias="INVOICE_FILENAME")
    invoice_output_dir: str | None = Field(default=None, alias="INVOICE_OUTPUT_DIR")

    brand_name: str = Field(default="Levitation", alias="BRAND_NAME")
    brand_tagline: str = Field(default="infotech", alias="BRAND_TAGLINE")
    customer_name: str = Field(default="Person_name", alias="CUSTOMER_NAME")
    customer_email: str = Field(
        default="example@email.com", alias="CUSTOMER_EMAIL"
    )
    invoice_date: str | None = Field(default=None, alias="INVOICE_DATE")

    auth_delay_seconds: float = Field(default=0.0, alias="AUTH_DELAY_SECONDS", ge=0)
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def gst_label(self) -> str:
        """Return the label printed next to the tax amount, e.g. ``GST (18%)``."""

        percent = (self.gst_rate * 100).normalize()
        return f"GST ({percent:f}%)"


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
