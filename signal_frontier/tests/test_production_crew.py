"""
Test: Production Engine and Crew & Morale
Verifies rate derivation, productivity multipliers, upkeep and satisfaction.
"""

import pytest

from signal_frontier.catalog import building_by_id
from signal_frontier.config import ENGINE, EngineConfig
from signal_frontier.core.production import compute_rates, run_production
from signal_frontier.core.state import Workers, new_game
from signal_frontier.crew.workforce import (
    change_crew,
    compute_satisfaction,
    morale_multiplier,
    role_multiplier,
)


# =============================================================================
# CREW & MORALE
# =============================================================================

class TestRoleMultiplier:
    """Tests for per-building crew multipliers."""

    def test_linked_role(self):
        """Extractors scale with miners at 10% per worker."""
        workers = Workers(total=3, assigned={"miner": 2, "botanist": 1, "engineer": 0})
        assert role_multiplier(workers, building_by_id("extractor")) == pytest.approx(1.2)

    def test_engineer_family(self):
        """General buildings scale with engineers at 5% per worker."""
        workers = Workers(total=4, assigned={"miner": 0, "botanist": 0, "engineer": 4})
        assert role_multiplier(workers, building_by_id("array")) == pytest.approx(1.2)

    def test_hire_bonus_adds(self):
        """Accumulated hire bonuses stack on top of assignment."""
        workers = Workers(total=2, assigned={"miner": 2}, bonus={"miner": 0.12})
        assert role_multiplier(workers, building_by_id("ore_rig")) == pytest.approx(1.32)

    def test_unstaffed(self):
        """No assigned crew and no bonus gives a neutral multiplier."""
        workers = Workers(total=0)
        assert role_multiplier(workers, building_by_id("hydro")) == 1.0


class TestMorale:
    """Tests for satisfaction and the morale multiplier."""

    def test_morale_multiplier_bounds(self):
        """The multiplier is satisfaction clamped to [0.6, 1.4]."""
        assert morale_multiplier(Workers(satisfaction=0.45)) == 0.6
        assert morale_multiplier(Workers(satisfaction=1.0)) == 1.0
        assert morale_multiplier(Workers(satisfaction=1.2)) == 1.2

    def test_content_crew(self):
        """Fed and powered crew sit at 1.0 plus the morale rate."""
        assert compute_satisfaction(10, 3, 0.0, 0.0) == 1.0
        assert compute_satisfaction(10, 3, 2.0, 0.04) == pytest.approx(1.04)

    def test_starved_and_unpowered(self):
        """Shortfalls multiply: 0.6 for food, 0.8 for power."""
        assert compute_satisfaction(0, 3, 1.0, 0.0) == pytest.approx(0.6)
        assert compute_satisfaction(10, 3, -1.0, 0.0) == pytest.approx(0.8)
        assert compute_satisfaction(0, 3, -1.0, 0.0) == pytest.approx(0.48)

    def test_food_reserve_threshold(self):
        """Food is sufficient at half a unit per worker."""
        assert compute_satisfaction(1.5, 3, 0.0, 0.0) == 1.0
        assert compute_satisfaction(1.49, 3, 0.0, 0.0) == pytest.approx(0.6)

    def test_satisfaction_clamped(self):
        """Satisfaction never leaves [0.4, 1.2]."""
        assert compute_satisfaction(10, 3, 0.0, 0.5) == 1.2
        strict = EngineConfig(starved_satisfaction=0.3, unpowered_satisfaction=0.5)
        assert compute_satisfaction(0, 3, -1.0, 0.0, strict) == 0.4


class TestChangeCrew:
    """Tests for crew reassignment."""

    def test_full_crew_cannot_grow(self):
        """With everyone assigned, adding to a role is declined."""
        workers = Workers(total=3, assigned={"miner": 1, "botanist": 1, "engineer": 1})
        result = change_crew(workers, "miner", 1)
        assert not result.ok
        assert workers.assigned["miner"] == 1

    def test_reassign(self):
        """Freeing a worker then assigning elsewhere keeps the total."""
        workers = Workers(total=3, assigned={"miner": 1, "botanist": 1, "engineer": 1})
        assert change_crew(workers, "miner", -1).ok
        assert workers.idle == 1
        assert change_crew(workers, "botanist", 1).ok
        assert workers.assigned == {"miner": 0, "botanist": 2, "engineer": 1}
        assert workers.total == 3

    def test_no_negative_assignment(self):
        """A role cannot drop below zero."""
        workers = Workers(total=3, assigned={"miner": 0, "botanist": 0, "engineer": 0})
        result = change_crew(workers, "engineer", -1)
        assert not result.ok
        assert workers.assigned["engineer"] == 0

    def test_unknown_role(self):
        workers = Workers(total=3)
        assert not change_crew(workers, "pilot", 1).ok

    def test_assignment_invariant(self):
        """Random reassignment sequences never exceed the crew total."""
        workers = Workers(total=4, assigned={"miner": 0, "botanist": 0, "engineer": 0})
        moves = [("miner", 3), ("botanist", 2), ("miner", 1), ("engineer", 1),
                 ("miner", -2), ("botanist", 2), ("engineer", -5), ("engineer", 1)]
        for role, delta in moves:
            change_crew(workers, role, delta)
            assert sum(workers.assigned.values()) <= workers.total
            assert all(count >= 0 for count in workers.assigned.values())


# =============================================================================
# PRODUCTION
# =============================================================================

class TestProduction:
    """Tests for the per-tick production phase."""

    def test_empty_hub(self):
        """With nothing built only upkeep applies."""
        state = new_game()
        state.resources.set("food", 5)
        rates = run_production(state)
        assert all(value == 0 for _, value in rates.items())
        assert state.resources["food"] == pytest.approx(5 - 3 * 0.2)

    def test_scaled_output_and_unscaled_consumption(self):
        """Metal scales with miners; power drain is flat."""
        state = new_game()
        state.owned.buildings["extractor"] = 1
        rates = compute_rates(state)
        assert rates["metal"] == pytest.approx(3 * 1.1)
        assert rates["power"] == -1

    def test_level_multiplies(self):
        """Output and consumption scale linearly with level."""
        state = new_game()
        state.owned.buildings["extractor"] = 3
        rates = compute_rates(state)
        assert rates["metal"] == pytest.approx(9 * 1.1)
        assert rates["power"] == -3

    def test_flat_outputs_ignore_morale(self):
        """Signal and power are not scaled by crew or morale."""
        state = new_game()
        state.workers.satisfaction = 0.4
        state.owned.buildings["array"] = 2
        state.owned.buildings["reactor"] = 1
        rates = compute_rates(state)
        assert rates["signal"] == 8
        assert rates["power"] == 4 - 2
        assert rates["fuel"] == -1

    def test_morale_scales_output(self):
        """Low satisfaction bottoms out at a 0.6 multiplier."""
        state = new_game()
        state.workers.satisfaction = 0.4
        state.owned.buildings["extractor"] = 1
        assert compute_rates(state)["metal"] == pytest.approx(3 * 1.1 * 0.6)

    def test_tech_and_upgrade_passives(self):
        """Fuel synthesis, deep scan and the fuel farm add flat rates."""
        state = new_game()
        state.workers.satisfaction = 0.4
        state.owned.tech.update({"fuel_synth": 1, "deep_scan": 1})
        state.owned.upgrades["fuel_farm"] = 2
        rates = compute_rates(state)
        assert rates["fuel"] == 3
        assert rates["research"] == 1

    def test_habitat_not_a_flow(self):
        """Hab modules do not add habitat every tick."""
        state = new_game()
        state.owned.buildings["hab"] = 2
        run_production(state)
        assert state.resources["habitat"] == 0
        assert "habitat" not in state.rates

    def test_unknown_building_skipped(self):
        """Stale building ids contribute nothing."""
        state = new_game()
        state.owned.buildings["monolith"] = 4
        rates = compute_rates(state)
        assert all(value == 0 for _, value in rates.items())

    def test_satisfaction_after_tick(self):
        """An unfed, underpowered crew drops to 0.48."""
        state = new_game()
        state.owned.buildings["extractor"] = 1
        run_production(state)
        assert state.resources["power"] == 0
        assert state.workers.satisfaction == pytest.approx(0.48)

    def test_powered_rec_center(self):
        """Positive power and food keep satisfaction above 1 with a rec center."""
        state = new_game()
        state.resources.set("food", 10)
        state.resources.set("fuel", 10)
        state.owned.buildings.update({"reactor": 1, "rec": 1})
        run_production(state)
        assert state.rates["power"] == 3
        assert state.workers.satisfaction == pytest.approx(1.02)

    def test_consumption_clamps_ledger(self):
        """Drains on empty stocks leave zero, never negative."""
        state = new_game()
        state.resources.set("fuel", 0)
        state.owned.buildings["reactor"] = 5
        for _ in range(3):
            run_production(state, ENGINE)
            assert state.resources["fuel"] >= 0
            assert state.resources["food"] >= 0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
