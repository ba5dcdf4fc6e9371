"""Configuration loading and validation package."""

from .loader import load_app_config, load_game_config, load_secrets_config
from .models import (
    AppConfig,
    DenominationConfig,
    GameConfig,
    PresentationConfig,
    SecretsConfig,
    StorageConfig,
    TelegramCredentials,
    TelemetryConfig,
)

__all__ = [
    "AppConfig",
    "DenominationConfig",
    "GameConfig",
    "PresentationConfig",
    "SecretsConfig",
    "StorageConfig",
    "TelegramCredentials",
    "TelemetryConfig",
    "load_app_config",
    "load_game_config",
    "load_secrets_config",
]
