"""Runtime state package.

Owns the game state aggregate, its JSON persistence and the store that
mediates every mutation.
"""

from .state import DEFAULT_STORAGE_KEY, GameState, GameStateRepository
from .store import DEFAULT_ADMIN_PIN, GameStateStore

__all__ = [
    "DEFAULT_ADMIN_PIN",
    "DEFAULT_STORAGE_KEY",
    "GameState",
    "GameStateRepository",
    "GameStateStore",
]
