"""
Signal Frontier — Structures
Hub buildings, outpost (biome) buildings, and hub upgrades.

Costs are flat per level. A building's crew role decides which assigned
workers and hire bonuses scale its output.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..config import CrewRole
from .bodies import BIOMES
from .common import Requirement, check_kinds, index_by_id


@dataclass(frozen=True)
class Building:
    """A constructible structure. ``biome`` is None for hub buildings."""
    id: str
    name: str
    desc: str
    cost: Dict[str, float]
    prod: Dict[str, float] = field(default_factory=dict)
    cons: Dict[str, float] = field(default_factory=dict)
    unlock: float = 0
    require_tech: Optional[str] = None
    role: CrewRole = CrewRole.ENGINEER
    biome: Optional[str] = None
    requires: Tuple[Requirement, ...] = ()

    def __post_init__(self):
        check_kinds(self.id, "cost", self.cost)
        check_kinds(self.id, "prod", self.prod)
        check_kinds(self.id, "cons", self.cons)
        if self.biome is not None and self.biome not in BIOMES:
            raise ValueError(f"{self.id}: unknown biome '{self.biome}'")

    @property
    def is_outpost(self) -> bool:
        return self.biome is not None

    @property
    def habitat(self) -> float:
        """Flat habitat granted per level at construction time."""
        return self.prod.get("habitat", 0.0)


@dataclass(frozen=True)
class HubUpgrade:
    """A hub-wide upgrade with a mission or economy effect per level."""
    id: str
    name: str
    desc: str
    cost: Dict[str, float]
    requires: Tuple[Requirement, ...] = ()
    slots: int = 0
    passive: Dict[str, float] = field(default_factory=dict)
    drone_bonus: float = 0.0
    hazard_reduction: float = 0.0

    def __post_init__(self):
        check_kinds(self.id, "cost", self.cost)
        check_kinds(self.id, "passive", self.passive)


HUB_BUILDINGS: List[Building] = [
    Building("extractor", "Extractor", "+3 metal/tick, -1 power",
             cost={"metal": 60}, prod={"metal": 3}, cons={"power": 1},
             role=CrewRole.MINER),
    Building("hydro", "Hydroponics", "+2 food/tick, -1 power",
             cost={"metal": 40, "organics": 20}, prod={"food": 2}, cons={"power": 1},
             unlock=200, role=CrewRole.BOTANIST),
    Building("reactor", "Reactor", "+4 power/tick, -1 fuel",
             cost={"metal": 100, "fuel": 25}, prod={"power": 4}, cons={"fuel": 1},
             unlock=300),
    Building("hab", "Hab Module", "+3 habitat",
             cost={"metal": 80, "organics": 20}, prod={"habitat": 3}),
    Building("rec", "Rec Center", "Boosts morale",
             cost={"metal": 60, "organics": 40}, prod={"morale": 0.02}, cons={"power": 1},
             unlock=500),
    Building("array", "Comms Array", "+4 signal/tick",
             cost={"metal": 120, "fuel": 10}, prod={"signal": 4}, cons={"power": 1},
             unlock=800),
]

BIOME_BUILDINGS: List[Building] = [
    # Asteroid
    Building("ore_rig", "Ore Rig", "+5 metal/tick",
             cost={"metal": 120}, prod={"metal": 5}, cons={"power": 1},
             role=CrewRole.MINER, biome="asteroid"),
    Building("fuel_cracker", "Fuel Cracker", "+1 fuel/tick",
             cost={"metal": 90}, prod={"fuel": 1}, cons={"power": 1},
             role=CrewRole.MINER, biome="asteroid"),
    Building("solar_sail", "Solar Sail", "+2 power/tick",
             cost={"metal": 70}, prod={"power": 2}, biome="asteroid"),
    # Ice
    Building("thermal_pump", "Thermal Pump", "+4 fuel/tick",
             cost={"metal": 110, "fuel": 16}, prod={"fuel": 4}, cons={"power": 1},
             biome="ice"),
    Building("algae_farm", "Algae Farm", "+4 food/tick",
             cost={"metal": 90, "organics": 40}, prod={"food": 4}, cons={"power": 1},
             role=CrewRole.BOTANIST, biome="ice"),
    Building("cryo_distillery", "Cryo Distillery", "+4 fuel/tick, -1 organics/tick",
             cost={"metal": 200, "organics": 80}, prod={"fuel": 4}, cons={"organics": 1, "power": 1},
             biome="ice", requires=(("thermal_pump", 2),)),
    # Warm
    Building("vapor_trap", "Vapor Trap", "+3 organics/tick",
             cost={"metal": 90, "fuel": 12}, prod={"organics": 3}, biome="warm"),
    Building("plasma_furnace", "Plasma Furnace", "+8 power/tick, +5 metal/tick",
             cost={"metal": 240, "fuel": 60}, prod={"power": 8, "metal": 5}, cons={"fuel": 2},
             biome="warm"),
    # Unknown
    Building("anomaly_lab", "Anomaly Lab", "+2 rare/tick",
             cost={"metal": 160, "rare": 8}, prod={"rare": 2}, cons={"power": 1},
             biome="unknown"),
    Building("anomaly_vault", "Anomaly Vault", "+6 rare/tick, +6 research/tick",
             cost={"metal": 320, "rare": 16}, prod={"rare": 6, "research": 6}, cons={"power": 2},
             biome="unknown", requires=(("anomaly_lab", 2),)),
]

HUB_UPGRADES: List[HubUpgrade] = [
    HubUpgrade("launch_bay", "Launch Bay", "+1 concurrent expedition slot",
               cost={"metal": 220, "fuel": 70, "research": 20},
               requires=(("array", 1),), slots=1),
    HubUpgrade("fuel_farm", "Fuel Farm", "+1 fuel/tick",
               cost={"metal": 200, "organics": 80, "fuel": 20},
               requires=(("reactor", 2),), passive={"fuel": 1}),
    HubUpgrade("drone_bay", "Drone Bay", "+8% expedition cargo",
               cost={"metal": 300, "rare": 16, "fuel": 40},
               requires=(("extractor", 3),), drone_bonus=0.08),
    HubUpgrade("mission_control", "Expedition Control", "-4% expedition hazard",
               cost={"metal": 260, "fuel": 90, "research": 80},
               requires=(("launch_bay", 1), ("reactor", 2)), hazard_reduction=0.04),
]

BUILDINGS: List[Building] = HUB_BUILDINGS + BIOME_BUILDINGS
BUILDINGS_BY_ID: Dict[str, Building] = index_by_id(BUILDINGS)
HUB_UPGRADES_BY_ID: Dict[str, HubUpgrade] = index_by_id(HUB_UPGRADES)


def building_by_id(building_id: str) -> Optional[Building]:
    return BUILDINGS_BY_ID.get(building_id)


def upgrade_by_id(upgrade_id: str) -> Optional[HubUpgrade]:
    return HUB_UPGRADES_BY_ID.get(upgrade_id)
