"""
Signal Frontier — Milestones
One-shot progression rewards checked after production and mission resolution.
"""

from dataclasses import dataclass
from typing import Callable, List
import logging

from .state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Milestone:
    id: str
    name: str
    condition: Callable[[GameState], bool]
    reward: Callable[[GameState], None]
    narration: str


def _grant(**amounts) -> Callable[[GameState], None]:
    def reward(state: GameState):
        state.resources.credit_all(amounts)
    return reward


def _add_crew(count: int) -> Callable[[GameState], None]:
    def reward(state: GameState):
        state.workers.total += count
    return reward


MILESTONES: List[Milestone] = [
    Milestone(
        "firstResearch", "First Research",
        condition=lambda s: s.resources.get("signal") >= 300,
        reward=_grant(research=20),
        narration="Research packets recovered from deep space.",
    ),
    Milestone(
        "bootCache", "Starter Cache",
        condition=lambda s: s.resources.get("signal") >= 50,
        reward=_grant(research=6, fuel=6),
        narration="Recovered starter cache: research + fuel.",
    ),
    Milestone(
        "crewBonus", "Volunteers",
        condition=lambda s: sum(1 for lvl in s.owned.buildings.values() if lvl > 0) >= 3,
        reward=_add_crew(2),
        narration="New volunteers arrived at the hub.",
    ),
    Milestone(
        "firstReturn", "First Return",
        condition=lambda s: s.missions.total_completed >= 1,
        reward=_grant(metal=10),
        narration="First expedition home; salvage crews recovered spare metal.",
    ),
]

MILESTONE_IDS = frozenset(m.id for m in MILESTONES)


def check_milestones(state: GameState, now: float) -> List[str]:
    """
    Grant every newly satisfied milestone exactly once.

    Achieved milestones are skipped without re-evaluating their condition.

    Returns:
        Ids achieved during this check.
    """
    achieved = []
    for milestone in MILESTONES:
        if state.milestones.get(milestone.id):
            continue
        if not milestone.condition(state):
            continue
        milestone.reward(state)
        state.milestones[milestone.id] = True
        state.log.add(now, milestone.narration)
        logger.info(f"Milestone achieved: {milestone.name}")
        achieved.append(milestone.id)
    return achieved
