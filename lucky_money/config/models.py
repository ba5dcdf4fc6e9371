"""Typed configuration models for the lucky-money slot.

The config subsystem relies on pydantic to validate YAML files and to provide
strongly-typed objects to the rest of the runtime.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, PositiveInt, field_validator

from lucky_money.core.time_utils import DEFAULT_TZ_NAME
from lucky_money.inventory.models import DEFAULT_CATALOG


class DenominationConfig(BaseModel):
    """Catalog entry: banknote value and its starting stock."""

    value: PositiveInt
    quantity: NonNegativeInt


def _default_catalog() -> List[DenominationConfig]:
    return [DenominationConfig(value=value, quantity=qty) for value, qty in DEFAULT_CATALOG]


class StorageConfig(BaseModel):
    """Where the persisted game record lives."""

    data_dir: str = Field("runtime")
    storage_key: str = Field("tet-lucky-money-data", min_length=1, pattern=r"^[A-Za-z0-9_.-]+$")


class PresentationConfig(BaseModel):
    """Timing and paging knobs for the chat interface."""

    spin_delay_sec: float = Field(3.0, ge=0)
    reveal_delay_sec: float = Field(2.5, ge=0)
    history_page_size: PositiveInt = 10


class TelemetryConfig(BaseModel):
    """Logging switches."""

    log_level: str = Field("INFO")
    log_dir: str = Field("data/logs")


class GameConfig(BaseModel):
    """Top-level game config (catalog, admin secret, storage, presentation)."""

    catalog: List[DenominationConfig] = Field(default_factory=_default_catalog, min_length=1)
    admin_pin: str = Field("1234", pattern=r"^\d{4}$")
    admin_command: str = Field("admin_duy_only", pattern=r"^[a-z0-9_]{1,32}$")
    rng_seed: Optional[int] = None
    timezone: str = Field(DEFAULT_TZ_NAME)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    presentation: PresentationConfig = Field(default_factory=PresentationConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)

    @field_validator("catalog")
    @classmethod
    def _unique_values(cls, catalog: List[DenominationConfig]) -> List[DenominationConfig]:
        values = [entry.value for entry in catalog]
        if len(values) != len(set(values)):
            raise ValueError("catalog values must be unique")
        return catalog

    def catalog_pairs(self) -> list[tuple[int, int]]:
        return [(entry.value, entry.quantity) for entry in self.catalog]


class TelegramCredentials(BaseModel):
    """Telegram bot token used by the chat interface."""

    bot_token: str = Field(..., min_length=10)


class SecretsConfig(BaseModel):
    """Secrets kept out of version control (``config/secrets.yaml``)."""

    telegram: TelegramCredentials

    model_config = ConfigDict(frozen=True)


class AppConfig(BaseModel):
    """Runtime config composed of the game settings and secrets."""

    game: GameConfig
    secrets: SecretsConfig
