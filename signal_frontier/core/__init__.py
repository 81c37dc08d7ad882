"""
Signal Frontier — Core Module
Ledger, gates and the state tree shared by every simulation phase.

The engine and scheduler live in core.engine and core.scheduler and are
re-exported from the top-level package.
"""

from .ledger import ResourceLedger, RateVector
from .results import CommandResult
from .gates import (
    owns_tech,
    is_unlocked,
    has_prerequisites,
    requirements_met,
    biome_explored,
    mission_slots,
)
from .state import (
    GameState,
    OwnedState,
    Workers,
    Mission,
    MissionBoard,
    RecruitCandidate,
    RecruitPool,
    LogEntry,
    EventLog,
    new_game,
    to_snapshot,
    from_snapshot,
)

__all__ = [
    # Ledger
    "ResourceLedger",
    "RateVector",
    "CommandResult",

    # Gates
    "owns_tech",
    "is_unlocked",
    "has_prerequisites",
    "requirements_met",
    "biome_explored",
    "mission_slots",

    # State
    "GameState",
    "OwnedState",
    "Workers",
    "Mission",
    "MissionBoard",
    "RecruitCandidate",
    "RecruitPool",
    "LogEntry",
    "EventLog",
    "new_game",
    "to_snapshot",
    "from_snapshot",
]
