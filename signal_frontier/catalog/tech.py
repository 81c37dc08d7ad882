"""
Signal Frontier — Technologies
Research tree with prerequisites, passive rates and expedition modifiers.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .common import check_kinds, index_by_id


@dataclass(frozen=True)
class Tech:
    """A one-time research purchase. Ownership is permanent."""
    id: str
    name: str
    desc: str
    cost: Dict[str, float]
    unlock: float = 0
    requires: Tuple[str, ...] = ()
    require_tech: Optional[str] = None

    # Effects
    passive: Dict[str, float] = field(default_factory=dict)
    hazard_reduction: float = 0.0
    drone_bonus: float = 0.0
    rare_bonus: float = 0.0
    slots: int = 0
    announce: str = ""  # Narration logged once on purchase

    def __post_init__(self):
        check_kinds(self.id, "cost", self.cost)
        check_kinds(self.id, "passive", self.passive)
        if self.id in self.requires:
            raise ValueError(f"{self.id}: tech cannot require itself")


TECH: List[Tech] = [
    Tech("fuel_synth", "Fuel Synthesis", "+1 fuel/tick",
         cost={"signal": 320, "research": 12}, unlock=300,
         passive={"fuel": 1}),
    Tech("hazard_gear", "Hazard Gear", "-25% expedition hazard",
         cost={"signal": 780, "research": 30}, unlock=700,
         requires=("fuel_synth",), hazard_reduction=0.25),
    Tech("drone_log", "Logistics Drones", "+20% expedition cargo",
         cost={"signal": 1200, "research": 60}, unlock=1200,
         requires=("fuel_synth",), drone_bonus=0.2),
    Tech("deep_scan", "Deep Scan Arrays", "+1 research/tick and reveals deep targets",
         cost={"signal": 1500, "research": 120}, unlock=1200,
         requires=("fuel_synth",), passive={"research": 1},
         announce="Deep scan arrays online; new targets detected."),
    Tech("shielding", "Thermal Shielding", "-15% hazard; unlocks the fallen relay",
         cost={"signal": 2100, "research": 180}, unlock=2000,
         requires=("deep_scan",), hazard_reduction=0.15),
    Tech("rift_mapping", "Rift Mapping", "Unlocks anomalous expeditions and +20% rare cargo",
         cost={"signal": 3600, "research": 260, "rare": 8}, unlock=3500,
         requires=("shielding", "drone_log"), rare_bonus=0.2),
    Tech("auto_pilots", "Autonomous Pilots", "+1 expedition slot",
         cost={"research": 520, "fuel": 80}, unlock=5200,
         requires=("drone_log",), slots=1),
]

TECH_BY_ID: Dict[str, Tech] = index_by_id(TECH)


def tech_by_id(tech_id: str) -> Optional[Tech]:
    return TECH_BY_ID.get(tech_id)


def _check_prerequisites():
    for tech in TECH:
        for prereq in tech.requires:
            if prereq not in TECH_BY_ID:
                raise ValueError(f"{tech.id}: unknown prerequisite '{prereq}'")


_check_prerequisites()
