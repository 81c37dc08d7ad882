"""
Signal Frontier — Configuration
Resource kinds, crew roles, and engine tuning constants.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple
from enum import Enum


class ResourceKind(str, Enum):
    """Kinds of resource tracked in the ledger."""
    SIGNAL = "signal"
    RESEARCH = "research"
    METAL = "metal"
    ORGANICS = "organics"
    FUEL = "fuel"
    POWER = "power"
    FOOD = "food"
    HABITAT = "habitat"
    MORALE = "morale"
    RARE = "rare"


class CrewRole(str, Enum):
    """Crew specializations. Each role boosts one building family."""
    MINER = "miner"
    BOTANIST = "botanist"
    ENGINEER = "engineer"


RESOURCE_KINDS: List[str] = [kind.value for kind in ResourceKind]
ROLE_IDS: List[str] = [role.value for role in CrewRole]

# Kinds that flow per tick. Habitat is a capacity stock, credited on build.
FLOW_KINDS: List[str] = [
    "signal", "research", "metal", "organics", "fuel", "power", "food", "morale", "rare",
]

# Outputs scaled by crew and morale productivity; signal, power and morale are flat.
SCALED_KINDS = frozenset({"research", "metal", "organics", "fuel", "food", "rare"})


@dataclass
class EngineConfig:
    """Tick cadence, economy and crew tuning."""

    # Cadence
    tick_ms: int = 500

    # Narration log
    log_capacity: int = 80

    # Crew upkeep and satisfaction
    food_upkeep_per_worker: float = 0.2
    food_reserve_per_worker: float = 0.5  # foodOk when stored food >= total * reserve
    starved_satisfaction: float = 0.6
    unpowered_satisfaction: float = 0.8
    satisfaction_bounds: Tuple[float, float] = (0.4, 1.2)
    morale_multiplier_bounds: Tuple[float, float] = (0.6, 1.4)

    # Recruitment
    recruit_cooldown_ms: int = 45000
    recruit_pool_size: int = 3
    recruit_tier_bonus: Dict[int, float] = field(default_factory=lambda: {
        1: 0.05,
        2: 0.12,
        3: 0.20,
    })
    recruit_cost_per_tier: Dict[str, float] = field(default_factory=lambda: {
        "food": 4,
        "metal": 12,
    })
    recruit_names: List[str] = field(default_factory=lambda: [
        "Nyx", "Orion", "Vega", "Rin", "Tala", "Kade", "Mira", "Ash",
    ])

    # Expeditions
    min_mission_fuel: int = 5
    fuel_travel_divisor: int = 3
    hazard_cargo_factor: float = 0.4

    # Manual actions
    collect_signal_amount: float = 1.0
    pulse_scan_cost: float = 25.0
    pulse_scan_rewards: Dict[str, float] = field(default_factory=lambda: {
        "metal": 20,
        "fuel": 20,
        "research": 6,
    })

    # Starting position
    starting_resources: Dict[str, float] = field(default_factory=lambda: {
        "signal": 0,
        "research": 2,
        "metal": 0,
        "organics": 0,
        "fuel": 12,
        "power": 0,
        "food": 0,
        "habitat": 0,
        "morale": 0,
        "rare": 0,
    })
    starting_workers: int = 3
    starting_assignment: Dict[str, int] = field(default_factory=lambda: {
        "miner": 1,
        "botanist": 1,
        "engineer": 1,
    })
    starting_body: str = "debris"

    def recruit_cost(self, tier: int) -> Dict[str, float]:
        return {kind: amount * tier for kind, amount in self.recruit_cost_per_tier.items()}


# Default configuration
ENGINE = EngineConfig()
