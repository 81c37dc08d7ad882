"""
Signal Frontier — Crew Roles
Per-role productivity links for building families.
"""

from dataclasses import dataclass
from typing import Dict, List

from ..config import CrewRole


@dataclass(frozen=True)
class RoleSpec:
    """A crew role and the bonus each assigned worker gives its buildings."""
    role: CrewRole
    name: str
    desc: str
    per_worker_bonus: float


CREW_ROLES: List[RoleSpec] = [
    RoleSpec(CrewRole.MINER, "Miner", "Boosts extractors and ore rigs.", 0.10),
    RoleSpec(CrewRole.BOTANIST, "Botanist", "Boosts food and organics yields.", 0.10),
    RoleSpec(CrewRole.ENGINEER, "Engineer", "Boosts power and general maintenance.", 0.05),
]

ROLE_SPECS: Dict[str, RoleSpec] = {spec.role.value: spec for spec in CREW_ROLES}


def role_spec(role: str) -> RoleSpec:
    """Look up a role, falling back to the engineer family."""
    return ROLE_SPECS.get(role, ROLE_SPECS[CrewRole.ENGINEER.value])
