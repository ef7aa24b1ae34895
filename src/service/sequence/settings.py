"""
Sequence Settings for branch-scoped unique ID generation.

Environment variables use the SEQUENCE_ prefix:
    SEQUENCE_START=0
    SEQUENCE_UNIQUE_ID_WIDTH=4
    SEQUENCE_ALLOCATION_TIMEOUT=5.0

Usage:
    from src.service.sequence.settings import sequence_settings

    base = sequence_settings.start

    # Or create custom settings for testing
    custom = SequenceSettings(start=1000)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SequenceSettings(BaseSettings):
    """
    Configurable parameters for counters and ID formats.

    All settings can be overridden via environment variables with SEQUENCE_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="SEQUENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Counters ===
    start: int = Field(
        default=0,
        ge=0,
        description="Stored value of a fresh counter; first allocation returns start + 1",
    )
    allocation_timeout: float = Field(
        default=5.0,
        gt=0.0,
        description="Seconds a single allocation may take before it is abandoned",
    )

    # === ID Formats ===
    unique_id_width: int = Field(
        default=4,
        ge=1,
        description="Minimum digits of the sequence in user unique IDs (DH-0001)",
    )
    customer_serial_width: int = Field(
        default=5,
        ge=1,
        description="Minimum digits of the daily serial in customer IDs",
    )
    transaction_serial_width: int = Field(
        default=4,
        ge=1,
        description="Minimum digits of the daily serial in transaction IDs",
    )
    transaction_prefix: str = Field(
        default="TXN",
        min_length=1,
        description="Literal prefix of transaction IDs",
    )

    # === Calendar ===
    timezone: str = Field(
        default="Asia/Dhaka",
        description="IANA timezone used to decide 'today' for daily counters",
    )


@lru_cache
def get_sequence_settings() -> SequenceSettings:
    """Get cached sequence settings instance."""
    return SequenceSettings()


sequence_settings = get_sequence_settings()
