"""
Signal Frontier — Game State
The single mutable state tree and its snapshot form.

Snapshots are plain nested dicts/lists of str, int, float and bool.
Loading merges a snapshot onto fresh defaults field by field, so older
or partially corrupted snapshots still produce a fully initialized state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
import logging

from ..catalog import BUILDINGS_BY_ID, HUB_UPGRADES_BY_ID, TECH_BY_ID
from ..config import EngineConfig, ENGINE, FLOW_KINDS, ROLE_IDS
from .ledger import ResourceLedger

logger = logging.getLogger(__name__)


@dataclass
class OwnedState:
    """Structure levels and tech ownership, keyed by catalog id."""
    buildings: Dict[str, int] = field(default_factory=dict)
    tech: Dict[str, int] = field(default_factory=dict)
    upgrades: Dict[str, int] = field(default_factory=dict)


@dataclass
class Workers:
    total: int = 0
    assigned: Dict[str, int] = field(default_factory=dict)
    bonus: Dict[str, float] = field(default_factory=dict)
    satisfaction: float = 1.0

    def __post_init__(self):
        for role in ROLE_IDS:
            self.assigned.setdefault(role, 0)
            self.bonus.setdefault(role, 0.0)

    @property
    def assigned_total(self) -> int:
        return sum(self.assigned.values())

    @property
    def idle(self) -> int:
        return max(0, self.total - self.assigned_total)


@dataclass
class Mission:
    """An expedition en route. ``hazard`` is the launch estimate shown in status."""
    body_id: str
    ends_at: float
    hazard: float = 0.0

    def is_due(self, now: float) -> bool:
        return now >= self.ends_at


@dataclass
class MissionBoard:
    active: List[Mission] = field(default_factory=list)
    completed: Dict[str, int] = field(default_factory=dict)  # body id -> resolved count
    first_launch: bool = True

    @property
    def total_completed(self) -> int:
        return sum(self.completed.values())


@dataclass
class RecruitCandidate:
    id: str
    name: str
    role: str
    tier: int
    bonus: float
    cost: Dict[str, float] = field(default_factory=dict)


@dataclass
class RecruitPool:
    candidates: List[RecruitCandidate] = field(default_factory=list)
    last_roll: float = 0.0
    serial: int = 0  # Next candidate id suffix

    def find(self, candidate_id: str) -> Optional[RecruitCandidate]:
        for candidate in self.candidates:
            if candidate.id == candidate_id:
                return candidate
        return None


@dataclass
class LogEntry:
    time: float
    text: str


@dataclass
class EventLog:
    """Capped narration log; the oldest entries fall off first."""
    capacity: int = 80
    entries: List[LogEntry] = field(default_factory=list)

    def add(self, time: float, text: str):
        self.entries.append(LogEntry(time, text))
        overflow = len(self.entries) - self.capacity
        if overflow > 0:
            del self.entries[:overflow]

    def __len__(self) -> int:
        return len(self.entries)

    def texts(self) -> List[str]:
        return [entry.text for entry in self.entries]


@dataclass
class GameState:
    resources: ResourceLedger = field(default_factory=ResourceLedger)
    owned: OwnedState = field(default_factory=OwnedState)
    workers: Workers = field(default_factory=Workers)
    missions: MissionBoard = field(default_factory=MissionBoard)
    recruits: RecruitPool = field(default_factory=RecruitPool)
    milestones: Dict[str, bool] = field(default_factory=dict)
    selected_body: str = "debris"
    rates: Dict[str, float] = field(default_factory=lambda: {kind: 0.0 for kind in FLOW_KINDS})
    log: EventLog = field(default_factory=EventLog)


def new_game(config: EngineConfig = ENGINE) -> GameState:
    """Fresh starting state."""
    return GameState(
        resources=ResourceLedger(dict(config.starting_resources)),
        workers=Workers(
            total=config.starting_workers,
            assigned=dict(config.starting_assignment),
        ),
        selected_body=config.starting_body,
        log=EventLog(capacity=config.log_capacity),
    )


# =============================================================================
# SNAPSHOT
# =============================================================================

def to_snapshot(state: GameState) -> Dict[str, Any]:
    """Serialize the whole state tree to plain data."""
    return {
        "resources": state.resources.as_dict(),
        "rates": dict(state.rates),
        "buildings": dict(state.owned.buildings),
        "tech": dict(state.owned.tech),
        "upgrades": dict(state.owned.upgrades),
        "workers": {
            "total": state.workers.total,
            "assigned": dict(state.workers.assigned),
            "bonus": dict(state.workers.bonus),
            "satisfaction": state.workers.satisfaction,
        },
        "missions": {
            "active": [
                {"body_id": m.body_id, "ends_at": m.ends_at, "hazard": m.hazard}
                for m in state.missions.active
            ],
            "completed": dict(state.missions.completed),
            "first_launch": state.missions.first_launch,
        },
        "recruits": {
            "candidates": [
                {
                    "id": c.id,
                    "name": c.name,
                    "role": c.role,
                    "tier": c.tier,
                    "bonus": c.bonus,
                    "cost": dict(c.cost),
                }
                for c in state.recruits.candidates
            ],
            "last_roll": state.recruits.last_roll,
            "serial": state.recruits.serial,
        },
        "milestones": dict(state.milestones),
        "selected_body": state.selected_body,
        "log": [{"time": e.time, "text": e.text} for e in state.log.entries],
    }


def _as_float(value, default: Optional[float], label: str) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Snapshot: bad value for {label}: {value!r}, using {default}")
        return default


def _as_int(value, default: Optional[int], label: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Snapshot: bad value for {label}: {value!r}, using {default}")
        return default


def _section(data: Dict, key: str) -> Dict:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.warning(f"Snapshot: section '{key}' is not a mapping, ignoring")
        return {}
    return value


def _merge_numbers(target: Dict, source: Dict, label: str, cast=float, known=None):
    """Overlay numeric entries onto defaults, skipping unknown ids and bad values."""
    for key, value in source.items():
        if known is not None and key not in known:
            logger.warning(f"Snapshot: dropping unknown {label} id '{key}'")
            continue
        if cast is int:
            number = _as_int(value, None, f"{label}.{key}")
        else:
            number = _as_float(value, None, f"{label}.{key}")
        if number is None:
            continue
        target[key] = max(cast(0), number)


def from_snapshot(
    data: Any,
    config: EngineConfig = ENGINE,
    known_milestones: Optional[Iterable[str]] = None,
) -> GameState:
    """
    Rebuild a state from a snapshot, merging onto fresh defaults.

    Milestone ids outside ``known_milestones`` are dropped when it is given.

    Never raises: missing sections keep defaults, malformed values are
    skipped with a warning.
    """
    state = new_game(config)
    if not isinstance(data, dict):
        logger.warning(f"Snapshot: expected a mapping, got {type(data).__name__}; using defaults")
        return state

    resources = _section(data, "resources")
    merged = state.resources.as_dict()
    _merge_numbers(merged, resources, "resources")
    state.resources = ResourceLedger(merged)

    # Rates are signed, so they skip the clamping merge
    for kind, value in _section(data, "rates").items():
        if kind not in state.rates:
            continue
        number = _as_float(value, None, f"rates.{kind}")
        if number is not None:
            state.rates[kind] = number

    _merge_numbers(state.owned.buildings, _section(data, "buildings"), "buildings",
                   cast=int, known=BUILDINGS_BY_ID)
    _merge_numbers(state.owned.tech, _section(data, "tech"), "tech",
                   cast=int, known=TECH_BY_ID)
    _merge_numbers(state.owned.upgrades, _section(data, "upgrades"), "upgrades",
                   cast=int, known=HUB_UPGRADES_BY_ID)

    workers = _section(data, "workers")
    if "total" in workers:
        state.workers.total = max(0, _as_int(workers["total"], state.workers.total, "workers.total"))
    if "satisfaction" in workers:
        low, high = config.satisfaction_bounds
        satisfaction = _as_float(
            workers["satisfaction"], state.workers.satisfaction, "workers.satisfaction")
        state.workers.satisfaction = min(high, max(low, satisfaction))
    _merge_numbers(state.workers.assigned, _section(workers, "assigned"), "workers.assigned",
                   cast=int, known=ROLE_IDS)
    _trim_assignment(state.workers)
    _merge_numbers(state.workers.bonus, _section(workers, "bonus"), "workers.bonus",
                   known=ROLE_IDS)

    missions = _section(data, "missions")
    active = missions.get("active", [])
    if isinstance(active, dict):
        active = [active]
    if isinstance(active, list):
        for item in active:
            mission = _load_mission(item)
            if mission is not None:
                state.missions.active.append(mission)
    _merge_numbers(state.missions.completed, _section(missions, "completed"),
                   "missions.completed", cast=int)
    if "first_launch" in missions:
        state.missions.first_launch = bool(missions["first_launch"])

    recruits = _section(data, "recruits")
    candidates = recruits.get("candidates", [])
    if isinstance(candidates, list):
        for item in candidates:
            candidate = _load_candidate(item, config)
            if candidate is not None:
                state.recruits.candidates.append(candidate)
    if "last_roll" in recruits:
        state.recruits.last_roll = _as_float(recruits["last_roll"], 0.0, "recruits.last_roll")
    if "serial" in recruits:
        state.recruits.serial = max(0, _as_int(recruits["serial"], 0, "recruits.serial"))

    for key, value in _section(data, "milestones").items():
        if known_milestones is not None and key not in known_milestones:
            logger.warning(f"Snapshot: dropping unknown milestone id '{key}'")
            continue
        state.milestones[key] = bool(value)

    selected = data.get("selected_body")
    if isinstance(selected, str) and selected:
        state.selected_body = selected

    log = data.get("log")
    if isinstance(log, list):
        for item in log[-state.log.capacity:]:
            if isinstance(item, dict) and isinstance(item.get("text"), str):
                state.log.add(_as_float(item.get("time", 0), 0.0, "log.time"), item["text"])

    return state


def _load_mission(item) -> Optional[Mission]:
    if not isinstance(item, dict) or not isinstance(item.get("body_id"), str):
        logger.warning(f"Snapshot: skipping malformed mission {item!r}")
        return None
    ends_at = _as_float(item.get("ends_at"), None, "missions.ends_at")
    if ends_at is None:
        return None
    hazard = _as_float(item.get("hazard", 0.0), 0.0, "missions.hazard")
    return Mission(item["body_id"], ends_at, hazard)


def _trim_assignment(workers: Workers):
    """Release crew from the last roles until assignments fit the total."""
    excess = workers.assigned_total - workers.total
    for role in reversed(ROLE_IDS):
        if excess <= 0:
            break
        released = min(excess, workers.assigned.get(role, 0))
        if released:
            workers.assigned[role] -= released
            excess -= released
            logger.warning(f"Snapshot: released {released} {role} to fit {workers.total} crew")


def _load_candidate(item, config: EngineConfig = ENGINE) -> Optional[RecruitCandidate]:
    """Bonus and cost follow the tier schedule; stored values are ignored."""
    if not isinstance(item, dict) or item.get("role") not in ROLE_IDS:
        logger.warning(f"Snapshot: skipping malformed recruit {item!r}")
        return None
    tier = _as_int(item.get("tier", 1), None, "recruits.tier")
    if tier not in config.recruit_tier_bonus:
        logger.warning(f"Snapshot: skipping recruit with unknown tier {item.get('tier')!r}")
        return None
    return RecruitCandidate(
        id=str(item.get("id", "")),
        name=str(item.get("name", "")),
        role=item["role"],
        tier=tier,
        bonus=config.recruit_tier_bonus[tier],
        cost=config.recruit_cost(tier),
    )
