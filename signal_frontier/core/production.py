"""
Signal Frontier — Production Engine
Derives the per-tick rate vector from structures, tech and crew, then
applies it to the ledger followed by food upkeep and a satisfaction update.
"""

import logging

from ..catalog import BUILDINGS_BY_ID, HUB_UPGRADES, TECH
from ..config import EngineConfig, ENGINE, SCALED_KINDS
from ..crew.workforce import compute_satisfaction, morale_multiplier, role_multiplier
from .gates import owns_tech
from .ledger import RateVector
from .state import GameState

logger = logging.getLogger(__name__)


def compute_rates(state: GameState, config: EngineConfig = ENGINE) -> RateVector:
    """
    Build this tick's rate vector from scratch.

    Productivity-scaled outputs are multiplied by the building's role
    multiplier and the morale multiplier; signal, power and morale are flat.
    Consumption is never scaled.
    """
    rates = RateVector()
    morale = morale_multiplier(state.workers, config)

    for building_id, level in state.owned.buildings.items():
        if level <= 0:
            continue
        building = BUILDINGS_BY_ID.get(building_id)
        if building is None:
            logger.warning(f"Production: no catalog entry for building '{building_id}', skipping")
            continue

        productivity = role_multiplier(state.workers, building) * morale
        for kind, amount in building.prod.items():
            if kind == "habitat":
                continue  # Capacity stock, credited at build time
            if kind in SCALED_KINDS:
                rates.add(kind, amount * level * productivity)
            else:
                rates.add(kind, amount * level)
        for kind, amount in building.cons.items():
            rates.subtract(kind, amount * level)

    # Flat passives
    for tech in TECH:
        if tech.passive and owns_tech(state.owned.tech, tech.id):
            for kind, amount in tech.passive.items():
                rates.add(kind, amount)
    for upgrade in HUB_UPGRADES:
        level = state.owned.upgrades.get(upgrade.id, 0)
        for kind, amount in upgrade.passive.items():
            rates.add(kind, amount * level)

    return rates


def run_production(state: GameState, config: EngineConfig = ENGINE) -> RateVector:
    """
    Production phase of a tick.

    1. Compute and apply the rate vector (clamped at zero)
    2. Debit food upkeep for the whole crew
    3. Recompute satisfaction from food stock and the power rate
    """
    rates = compute_rates(state, config)
    state.resources.apply_rates(rates)
    state.rates = rates.as_dict()

    upkeep = state.workers.total * config.food_upkeep_per_worker
    if upkeep > 0:
        state.resources.debit("food", upkeep)

    state.workers.satisfaction = compute_satisfaction(
        food=state.resources.get("food"),
        total_workers=state.workers.total,
        power_rate=rates["power"],
        morale_rate=rates["morale"],
        config=config,
    )

    logger.debug(f"Production: rates {state.rates}, satisfaction {state.workers.satisfaction:.2f}")
    return rates
