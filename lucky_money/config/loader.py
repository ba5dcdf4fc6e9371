"""YAML loaders for the config subsystem.

Each helper here consumes one YAML file, validates it via models.py and
returns typed objects to the caller.
"""
from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from lucky_money.core.errors import ConfigurationError

from .models import AppConfig, GameConfig, SecretsConfig

_DEFAULT_CONFIG_DIR = Path("config")


def _read_yaml(path: Path) -> Mapping:
    """Read a YAML file and return a mapping (empty dict if file is blank)."""

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with path.open("r", encoding="utf-8") as fp:
        try:
            data = yaml.safe_load(fp) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigurationError(f"YAML root must be a mapping in {path}")
    return data


def load_game_config(path: Path | str = _DEFAULT_CONFIG_DIR / "game.yml") -> GameConfig:
    """Load game.yml (catalog, admin PIN, storage, presentation, telemetry).

    Every section is optional; a blank file yields the built-in catalog and
    the default PIN.
    """

    data = _read_yaml(Path(path))
    return GameConfig.model_validate(data)


def load_secrets_config(path: Path | str = _DEFAULT_CONFIG_DIR / "secrets.yaml") -> SecretsConfig:
    """Load secrets.yaml (Telegram bot token).

    In production setups the file is gitignored; for tests it can point to a
    fixture.
    """

    data = _read_yaml(Path(path))
    return SecretsConfig.model_validate(data)


def load_app_config(
    *,
    game_path: Path | str = _DEFAULT_CONFIG_DIR / "game.yml",
    secrets_path: Path | str = _DEFAULT_CONFIG_DIR / "secrets.yaml",
) -> AppConfig:
    """Load and aggregate all config sections into a single AppConfig."""

    game = load_game_config(game_path)
    secrets = load_secrets_config(secrets_path)
    return AppConfig(game=game, secrets=secrets)
