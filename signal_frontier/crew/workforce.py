"""
Signal Frontier — Crew & Morale
Worker assignment, role productivity and the satisfaction scalar.

Productivity for a building is:
    role multiplier   = 1 + assigned[role] * per_worker_bonus + bonus[role]
    morale multiplier = clamp(satisfaction, 0.6, 1.4)
Satisfaction is recomputed once per tick from food and power sufficiency.
"""

import logging

from ..catalog import Building, role_spec
from ..config import EngineConfig, ENGINE, ROLE_IDS
from ..core.results import CommandResult
from ..core.state import Workers

logger = logging.getLogger(__name__)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def role_multiplier(workers: Workers, building: Building) -> float:
    """Crew multiplier for a building from its linked role."""
    role = getattr(building.role, "value", building.role)
    spec = role_spec(role)
    assigned = workers.assigned.get(role, 0)
    return 1.0 + assigned * spec.per_worker_bonus + workers.bonus.get(role, 0.0)


def morale_multiplier(workers: Workers, config: EngineConfig = ENGINE) -> float:
    low, high = config.morale_multiplier_bounds
    return clamp(workers.satisfaction, low, high)


def compute_satisfaction(
    food: float,
    total_workers: int,
    power_rate: float,
    morale_rate: float,
    config: EngineConfig = ENGINE,
) -> float:
    """
    Satisfaction from this tick's supply situation.

    Args:
        food: Stored food after upkeep
        total_workers: Crew headcount
        power_rate: Net power delta of the tick just applied
        morale_rate: Morale delta of the tick just applied
    """
    food_ok = food >= total_workers * config.food_reserve_per_worker
    power_ok = power_rate >= 0
    base = (1.0 if food_ok else config.starved_satisfaction) * \
           (1.0 if power_ok else config.unpowered_satisfaction)
    low, high = config.satisfaction_bounds
    return clamp(base + morale_rate, low, high)


def change_crew(workers: Workers, role: str, delta: int) -> CommandResult:
    """
    Reassign crew between roles without changing the headcount.

    Declines if the role would go negative or assignments would exceed
    the total crew.
    """
    if role not in ROLE_IDS:
        return CommandResult.declined(f"Unknown crew role: {role}.")
    target = workers.assigned.get(role, 0) + delta
    if target < 0:
        return CommandResult.declined(f"No {role} crew to reassign.")
    if workers.assigned_total + delta > workers.total:
        return CommandResult.declined("No unassigned crew available.")

    workers.assigned[role] = target
    logger.info(f"Crew: {role} assignment now {target} ({workers.idle} idle)")
    return CommandResult.success(f"Adjusted {role} crew to {target}.")
