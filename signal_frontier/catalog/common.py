"""
Signal Frontier — Catalog helpers
Shared validation for authored catalog tables.
"""

from typing import Dict, Iterable, Tuple

from ..config import RESOURCE_KINDS


def check_kinds(entry_id: str, label: str, mapping: Dict[str, float]):
    """Reject resource mappings that name unknown kinds or negative amounts."""
    for kind, amount in mapping.items():
        if kind not in RESOURCE_KINDS:
            raise ValueError(f"{entry_id}: unknown resource kind '{kind}' in {label}")
        if amount < 0:
            raise ValueError(f"{entry_id}: negative amount {amount} for '{kind}' in {label}")


def index_by_id(entries: Iterable) -> Dict[str, object]:
    """Build an id -> entry lookup, refusing duplicate ids."""
    index: Dict[str, object] = {}
    for entry in entries:
        if entry.id in index:
            raise ValueError(f"Duplicate catalog id: {entry.id}")
        index[entry.id] = entry
    return index


Requirement = Tuple[str, int]
