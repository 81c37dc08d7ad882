"""
Signal Frontier — Mission Scheduler
Launch validation, in-flight expeditions and polled resolution.

Expedition lifecycle:
    Idle -> EnRoute (launch) -> Resolved (tick scan with now >= ends_at) -> Idle

Deadlines are absolute timestamps in milliseconds, so resolution is
robust to irregular tick cadence.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import logging
import math
import random

from ..catalog import Body, HUB_UPGRADES, TECH, body_by_id
from ..config import EngineConfig, ENGINE
from .gates import is_unlocked, mission_slots, owns_tech
from .results import CommandResult
from .state import GameState, Mission, OwnedState

logger = logging.getLogger(__name__)


@dataclass
class MissionReport:
    """Outcome of one resolved expedition."""
    body_id: str
    cargo: Dict[str, int] = field(default_factory=dict)
    hazard_hit: bool = False
    dropped: bool = False  # Body missing from catalog; no cargo


def format_duration(ms: float) -> str:
    seconds = max(0, int(math.ceil(ms / 1000)))
    minutes, seconds = divmod(seconds, 60)
    if minutes:
        return f"{minutes}m {seconds:02d}s"
    return f"{seconds}s"


# =============================================================================
# MODIFIERS
# =============================================================================

def hazard_reduction(owned: OwnedState) -> float:
    """Total hazard reduction from owned tech and hub upgrades."""
    reduction = sum(t.hazard_reduction for t in TECH if owns_tech(owned.tech, t.id))
    for upgrade in HUB_UPGRADES:
        reduction += upgrade.hazard_reduction * owned.upgrades.get(upgrade.id, 0)
    return reduction


def cargo_bonuses(owned: OwnedState) -> Tuple[float, float]:
    """
    Returns:
        (drone_bonus, rare_bonus) applied to full-yield cargo.
    """
    drone = sum(t.drone_bonus for t in TECH if owns_tech(owned.tech, t.id))
    for upgrade in HUB_UPGRADES:
        drone += upgrade.drone_bonus * owned.upgrades.get(upgrade.id, 0)
    rare = sum(t.rare_bonus for t in TECH if owns_tech(owned.tech, t.id))
    return drone, rare


def effective_hazard(body: Body, owned: OwnedState) -> float:
    return max(0.0, body.hazard - hazard_reduction(owned))


def fuel_cost(body: Body, state: GameState, config: EngineConfig = ENGINE) -> int:
    """Launch fuel; the first launch ever is free."""
    if state.missions.first_launch:
        return 0
    return max(config.min_mission_fuel, body.travel // config.fuel_travel_divisor)


def roll_cargo(
    body: Body,
    rng: random.Random,
    hazard: float,
    drone_bonus: float = 0.0,
    rare_bonus: float = 0.0,
    config: EngineConfig = ENGINE,
) -> Tuple[Dict[str, int], bool]:
    """
    Single hazard draw, then floor every cargo entry.

    Returns:
        (cargo, hazard_hit)
    """
    hazard_hit = rng.random() < hazard
    if hazard_hit:
        factor = config.hazard_cargo_factor
    else:
        factor = 1.0 + drone_bonus + rare_bonus
    cargo = {kind: int(math.floor(amount * factor)) for kind, amount in body.cargo.items()}
    return cargo, hazard_hit


# =============================================================================
# LAUNCH & RESOLUTION
# =============================================================================

def launch(
    state: GameState,
    body_id: str,
    now: float,
    config: EngineConfig = ENGINE,
) -> CommandResult:
    """
    Launch an expedition if the target is unlocked, a slot is free and
    fuel covers the cost.
    """
    body = body_by_id(body_id)
    if body is None or not is_unlocked(body, state.resources, state.owned.tech):
        return CommandResult.declined("Target not unlocked.")

    slots = mission_slots(state.owned.tech, state.owned.upgrades)
    if len(state.missions.active) >= slots:
        return CommandResult.declined("All expedition slots are busy.")

    cost = fuel_cost(body, state, config)
    if state.resources.get("fuel") < cost:
        return CommandResult.declined("Not enough fuel.")

    if cost:
        state.resources.debit("fuel", cost)
    state.missions.first_launch = False
    mission = Mission(body.id, now + body.travel_ms, effective_hazard(body, state.owned))
    state.missions.active.append(mission)

    logger.info(f"Missions: launched to {body.id} (fuel {cost}, "
                f"{len(state.missions.active)}/{slots} slots, ends at {mission.ends_at:.0f})")
    return CommandResult.success(
        f"Launched mission to {body.name}. ETA {format_duration(body.travel_ms)}.")


def resolve_due(
    state: GameState,
    now: float,
    rng: random.Random,
    config: EngineConfig = ENGINE,
) -> List[MissionReport]:
    """
    Resolve every expedition whose deadline has passed.

    Hazard and bonuses are evaluated from the tech owned at resolution.
    A mission for a body absent from the catalog is dropped with no cargo.
    """
    reports: List[MissionReport] = []
    remaining: List[Mission] = []

    for mission in state.missions.active:
        if not mission.is_due(now):
            remaining.append(mission)
            continue

        body: Optional[Body] = body_by_id(mission.body_id)
        if body is None:
            logger.warning(f"Missions: dropping expedition to unknown body '{mission.body_id}'")
            reports.append(MissionReport(mission.body_id, dropped=True))
            continue

        drone, rare = cargo_bonuses(state.owned)
        cargo, hazard_hit = roll_cargo(
            body, rng, effective_hazard(body, state.owned), drone, rare, config)
        state.resources.credit_all(cargo)
        state.missions.completed[body.id] = state.missions.completed.get(body.id, 0) + 1

        if hazard_hit:
            state.log.add(now, f"Hazard on {body.name} reduced cargo.")
        state.log.add(now, f"Mission from {body.name} returned cargo.")
        logger.info(f"Missions: {body.id} returned {cargo}"
                    f"{' (hazard)' if hazard_hit else ''}")
        reports.append(MissionReport(body.id, cargo, hazard_hit))

    state.missions.active = remaining
    return reports
