"""
Signal Frontier — Catalog Package
Immutable, pre-authored tables. Player state refers to entries by id only.
"""

from .bodies import Body, BODIES, BODIES_BY_ID, BIOMES, body_by_id
from .buildings import (
    Building,
    HubUpgrade,
    HUB_BUILDINGS,
    BIOME_BUILDINGS,
    BUILDINGS,
    BUILDINGS_BY_ID,
    HUB_UPGRADES,
    HUB_UPGRADES_BY_ID,
    building_by_id,
    upgrade_by_id,
)
from .tech import Tech, TECH, TECH_BY_ID, tech_by_id
from .roles import RoleSpec, CREW_ROLES, ROLE_SPECS, role_spec

__all__ = [
    # Bodies
    'Body', 'BODIES', 'BODIES_BY_ID', 'BIOMES', 'body_by_id',
    # Structures
    'Building', 'HubUpgrade', 'HUB_BUILDINGS', 'BIOME_BUILDINGS', 'BUILDINGS',
    'BUILDINGS_BY_ID', 'HUB_UPGRADES', 'HUB_UPGRADES_BY_ID',
    'building_by_id', 'upgrade_by_id',
    # Technologies
    'Tech', 'TECH', 'TECH_BY_ID', 'tech_by_id',
    # Crew roles
    'RoleSpec', 'CREW_ROLES', 'ROLE_SPECS', 'role_spec',
]
