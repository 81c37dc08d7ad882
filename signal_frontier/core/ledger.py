"""
Signal Frontier — Resource Ledger
Non-negative resource balances and the per-tick rate vector applied to them.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional
import logging

from ..config import FLOW_KINDS, RESOURCE_KINDS

logger = logging.getLogger(__name__)


def _key(kind) -> str:
    """Accept either a ResourceKind member or its string id."""
    return getattr(kind, "value", kind)


@dataclass
class ResourceLedger:
    """
    Mapping of resource kind to a quantity >= 0.

    Every write path clamps at zero:
    - credit() adds a non-negative amount
    - debit() removes up to the available balance, never failing
    - apply_rates() adds signed deltas and clamps the result
    """

    balances: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self):
        for kind in RESOURCE_KINDS:
            self.balances.setdefault(kind, 0.0)
        for kind, amount in list(self.balances.items()):
            if amount < 0:
                logger.warning(f"Ledger: clamping negative {kind} balance {amount} to 0")
                self.balances[kind] = 0.0

    def __getitem__(self, kind) -> float:
        return self.get(kind)

    def __contains__(self, kind) -> bool:
        return _key(kind) in self.balances

    def get(self, kind) -> float:
        """Balance for a kind; kinds never written read as zero."""
        return self.balances.get(_key(kind), 0.0)

    def set(self, kind, amount: float):
        """Overwrite a balance, clamped to zero. Used by loaders and tests."""
        self.balances[_key(kind)] = max(0.0, amount)

    def credit(self, kind, amount: float) -> float:
        """
        Add resource to the ledger.

        Returns:
            The new balance.
        """
        if amount < 0:
            raise ValueError(f"Cannot credit negative amount: {amount}")
        key = _key(kind)
        self.balances[key] = max(0.0, self.balances.get(key, 0.0) + amount)
        return self.balances[key]

    def debit(self, kind, amount: float) -> float:
        """
        Remove resource from the ledger, stopping at zero.

        Returns:
            Amount actually removed (may be less than requested).
        """
        if amount < 0:
            raise ValueError(f"Cannot debit negative amount: {amount}")
        key = _key(kind)
        current = self.balances.get(key, 0.0)
        removed = min(amount, current)
        self.balances[key] = max(0.0, current - amount)
        if removed < amount:
            logger.debug(f"Ledger: {key} shortfall {amount - removed:.2f}")
        return removed

    def can_afford(self, cost: Mapping[str, float]) -> bool:
        """True iff every cost entry is covered by the current balance."""
        return all(self.get(kind) >= amount for kind, amount in cost.items())

    def spend(self, cost: Mapping[str, float]) -> bool:
        """Debit a full cost atomically. Returns False and changes nothing if unaffordable."""
        if not self.can_afford(cost):
            return False
        for kind, amount in cost.items():
            self.debit(kind, amount)
        return True

    def credit_all(self, amounts: Mapping[str, float]):
        for kind, amount in amounts.items():
            self.credit(kind, amount)

    def apply_rates(self, rates: "RateVector"):
        """Add each signed rate to its balance, clamping at zero."""
        for kind, delta in rates.items():
            key = _key(kind)
            self.balances[key] = max(0.0, self.balances.get(key, 0.0) + delta)

    def as_dict(self) -> Dict[str, float]:
        return dict(self.balances)


class RateVector:
    """
    Signed per-tick deltas for the flow-capable kinds.

    Built from scratch every tick and discarded after it is applied.
    """

    def __init__(self, kinds: Optional[Iterable[str]] = None):
        self._rates: Dict[str, float] = {kind: 0.0 for kind in (kinds or FLOW_KINDS)}

    def __getitem__(self, kind) -> float:
        return self._rates.get(_key(kind), 0.0)

    def __repr__(self) -> str:
        return f"RateVector({self._rates})"

    def add(self, kind, amount: float):
        key = _key(kind)
        self._rates[key] = self._rates.get(key, 0.0) + amount

    def subtract(self, kind, amount: float):
        self.add(kind, -amount)

    def items(self):
        return self._rates.items()

    def as_dict(self) -> Dict[str, float]:
        return dict(self._rates)
