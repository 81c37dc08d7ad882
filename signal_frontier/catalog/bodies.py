"""
Signal Frontier — Expedition Targets
Bodies that expeditions can be launched to, with travel time, hazard and cargo.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .common import check_kinds, index_by_id


BIOMES = ("asteroid", "ice", "warm", "unknown")


@dataclass(frozen=True)
class Body:
    """An expedition target."""
    id: str
    name: str
    biome: str
    travel: int       # Seconds en route
    hazard: float     # Probability of a hazard roll reducing cargo
    unlock: float     # Signal threshold
    cargo: Dict[str, float] = field(default_factory=dict)
    require_tech: Optional[str] = None

    def __post_init__(self):
        if self.biome not in BIOMES:
            raise ValueError(f"{self.id}: unknown biome '{self.biome}'")
        if self.travel <= 0:
            raise ValueError(f"{self.id}: travel must be positive, got {self.travel}")
        check_kinds(self.id, "cargo", self.cargo)

    @property
    def travel_ms(self) -> int:
        return int(self.travel * 1000)


BODIES: List[Body] = [
    Body("debris", "Debris Field", "asteroid", travel=30, hazard=0.05, unlock=0,
         cargo={"metal": 40, "fuel": 8, "research": 6}),
    Body("ice", "Ice Moon", "ice", travel=60, hazard=0.12, unlock=500,
         cargo={"organics": 25, "fuel": 14, "research": 10}),
    Body("lava", "Lava Rock", "warm", travel=90, hazard=0.2, unlock=1500,
         cargo={"metal": 70, "rare": 4, "research": 18}),
    Body("cradle", "Cradle Station", "asteroid", travel=120, hazard=0.18, unlock=2600,
         cargo={"fuel": 20, "research": 32, "rare": 8}, require_tech="deep_scan"),
    Body("ruins", "Fallen Relay", "warm", travel=140, hazard=0.22, unlock=4000,
         cargo={"metal": 110, "research": 48, "rare": 12}, require_tech="shielding"),
    Body("rift", "Rift Beacon", "unknown", travel=180, hazard=0.3, unlock=6500,
         cargo={"fuel": 40, "research": 80, "rare": 20}, require_tech="rift_mapping"),
]

BODIES_BY_ID: Dict[str, Body] = index_by_id(BODIES)


def body_by_id(body_id: str) -> Optional[Body]:
    return BODIES_BY_ID.get(body_id)
