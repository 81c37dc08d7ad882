"""
Signal Frontier — Economy Engine
Tick-based economy and progression engine for an incremental
space-frontier game: resources, structures, research, crew and expeditions.
"""

__version__ = "1.0.0"

from .config import (
    ENGINE,
    EngineConfig,
    ResourceKind,
    CrewRole,
)

from .core import (
    ResourceLedger,
    RateVector,
    CommandResult,
    GameState,
    new_game,
)

from .core.engine import Engine
from .core.scheduler import TickScheduler

__all__ = [
    # Version info
    "__version__",

    # Config
    "ENGINE",
    "EngineConfig",
    "ResourceKind",
    "CrewRole",

    # Core classes
    "ResourceLedger",
    "RateVector",
    "CommandResult",
    "GameState",
    "new_game",
    "Engine",
    "TickScheduler",
]
