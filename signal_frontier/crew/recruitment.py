"""
Signal Frontier — Recruitment
Cooldown-gated candidate pool and hiring.
"""

import logging
import random

from ..config import EngineConfig, ENGINE, ROLE_IDS
from ..core.results import CommandResult
from ..core.state import GameState, RecruitCandidate, RecruitPool

logger = logging.getLogger(__name__)

COOLDOWN_NOTICE = "Recruitment hub is still sourcing candidates."


def cooldown_remaining(pool: RecruitPool, now: float, config: EngineConfig = ENGINE) -> float:
    """Milliseconds until a fresh roll is allowed."""
    return max(0.0, pool.last_roll + config.recruit_cooldown_ms - now)


def make_candidate(
    slot: int,
    serial: int,
    rng: random.Random,
    config: EngineConfig = ENGINE,
) -> RecruitCandidate:
    """Build one candidate. Tiers cycle 1, 2, 3 across the pool slots."""
    tiers = sorted(config.recruit_tier_bonus)
    tier = tiers[slot % len(tiers)]
    role = rng.choice(ROLE_IDS)
    name = rng.choice(config.recruit_names)
    return RecruitCandidate(
        id=f"recruit-{serial}",
        name=name,
        role=role,
        tier=tier,
        bonus=config.recruit_tier_bonus[tier],
        cost=config.recruit_cost(tier),
    )


def roll_recruits(
    pool: RecruitPool,
    now: float,
    rng: random.Random,
    config: EngineConfig = ENGINE,
    force: bool = False,
) -> CommandResult:
    """
    Replace the candidate pool.

    Inside the cooldown a non-forced roll with candidates present is a
    no-op; a forced roll is declined with a notice.
    """
    cooling = now - pool.last_roll < config.recruit_cooldown_ms
    if cooling and force:
        return CommandResult.declined(COOLDOWN_NOTICE)
    if cooling and pool.candidates:
        return CommandResult.success()

    candidates = []
    for slot in range(config.recruit_pool_size):
        candidates.append(make_candidate(slot, pool.serial, rng, config))
        pool.serial += 1
    pool.candidates = candidates
    pool.last_roll = now

    logger.info(f"Recruitment: rolled {len(candidates)} candidates "
                f"({', '.join(c.role for c in candidates)})")
    return CommandResult.success("New recruit candidates available.")


def hire(state: GameState, candidate_id: str) -> CommandResult:
    """
    Hire a candidate from the pool.

    Requires spare habitat (habitat > total crew) and an affordable cost.
    The hire bonus is added permanently to the candidate's role.
    """
    pool = state.recruits
    workers = state.workers
    candidate = pool.find(candidate_id)
    if candidate is None:
        return CommandResult.declined("That candidate is no longer available.")
    if state.resources.get("habitat") <= workers.total:
        return CommandResult.declined("Need spare habitat to house new crew.")
    if not state.resources.spend(candidate.cost):
        return CommandResult.declined("Not enough resources to hire.")

    workers.total += 1
    workers.assigned[candidate.role] = workers.assigned.get(candidate.role, 0) + 1
    workers.bonus[candidate.role] = workers.bonus.get(candidate.role, 0.0) + candidate.bonus
    pool.candidates = [c for c in pool.candidates if c.id != candidate_id]

    logger.info(f"Recruitment: hired {candidate.name} ({candidate.role}, tier {candidate.tier}); "
                f"crew now {workers.total}")
    return CommandResult.success(f"Hired {candidate.name} the {candidate.role}.")
