"""
Signal Frontier — Gate Evaluator
Pure visibility and purchasability checks over ledger and ownership.

Nothing here is cached: balances move every tick, so every gate is
re-evaluated on demand.
"""

from typing import Iterable, Mapping

from ..catalog import BODIES, TECH, HUB_UPGRADES
from .ledger import ResourceLedger


def owns_tech(tech: Mapping[str, int], tech_id: str) -> bool:
    return bool(tech.get(tech_id, 0))


def is_unlocked(entry, resources: ResourceLedger, tech: Mapping[str, int]) -> bool:
    """
    True iff the entry's required tech (if any) is owned and the signal
    balance has reached its unlock threshold.
    """
    require = getattr(entry, "require_tech", None)
    if require and not owns_tech(tech, require):
        return False
    return resources.get("signal") >= (getattr(entry, "unlock", 0) or 0)


def has_prerequisites(entry, tech: Mapping[str, int]) -> bool:
    """True iff every prerequisite tech id listed on the entry is owned."""
    return all(owns_tech(tech, prereq) for prereq in getattr(entry, "requires", ()))


def requirements_met(requires: Iterable, levels: Mapping[str, int]) -> bool:
    """True iff each (structure id, minimum level) pair is satisfied."""
    return all(levels.get(entry_id, 0) >= level for entry_id, level in requires)


def biome_explored(biome: str, completed: Mapping[str, int]) -> bool:
    """True once any expedition to a body of this biome has resolved."""
    return any(completed.get(body.id, 0) > 0 for body in BODIES if body.biome == biome)


def mission_slots(tech: Mapping[str, int], upgrades: Mapping[str, int]) -> int:
    """Concurrent expedition capacity: one base slot plus upgrades and tech."""
    slots = 1
    for upgrade in HUB_UPGRADES:
        slots += upgrade.slots * upgrades.get(upgrade.id, 0)
    for entry in TECH:
        if owns_tech(tech, entry.id):
            slots += entry.slots
    return slots
