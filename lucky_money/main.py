from __future__ import annotations

import sys
from pathlib import Path

from lucky_money.config.loader import load_app_config
from lucky_money.interfaces import TelegramBotInterface
from lucky_money.runtime.store import GameStateStore
from lucky_money.telemetry import configure_logging


def _resolve_secrets_path(config_dir: Path) -> Path:
    for name in ("secrets.yaml", "secrets.yml"):
        candidate = config_dir / name
        if candidate.exists():
            return candidate
    return config_dir / "secrets.yaml"


def main() -> None:
    project_root = Path(__file__).resolve().parents[1]
    config_dir = project_root / "config"
    config = load_app_config(
        game_path=config_dir / "game.yml",
        secrets_path=_resolve_secrets_path(config_dir),
    )
    game = config.game

    logger = configure_logging(
        log_dir=(project_root / game.telemetry.log_dir).resolve(),
        level=game.telemetry.log_level,
    )
    store = GameStateStore.from_config(game, project_root)
    snapshot = store.snapshot()
    logger.info(
        "Bootstrapping lucky money slot",
        extra={
            "denominations": len(snapshot.inventory),
            "total_value": snapshot.inventory.total_value(),
            "history_entries": len(snapshot.history),
        },
    )

    interface = TelegramBotInterface(
        token=config.secrets.telegram.bot_token,
        store=store,
        presentation=game.presentation,
        admin_command=game.admin_command,
        timezone_name=game.timezone,
        logger=logger.getChild("telegram"),
    )
    try:
        interface.run()
    except KeyboardInterrupt:  # pragma: no cover
        logger.info("Interrupted, shutting down")
    return None


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
