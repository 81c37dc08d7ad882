"""
Test: Milestones
Verifies one-shot rewards and their idempotence.
"""

import pytest

from signal_frontier.core.milestones import MILESTONES, check_milestones
from signal_frontier.core.state import new_game


class TestMilestones:
    """Tests for milestone checks."""

    def test_nothing_at_start(self):
        state = new_game()
        assert check_milestones(state, 0) == []
        assert state.milestones == {}

    def test_boot_cache(self):
        """50 signal recovers a starter cache."""
        state = new_game()
        state.resources.set("signal", 50)
        assert check_milestones(state, 0) == ["bootCache"]
        assert state.resources["research"] == 2 + 6
        assert state.resources["fuel"] == 12 + 6

    def test_first_research_once(self):
        """The reward is granted once even while the condition keeps holding."""
        state = new_game()
        state.milestones["bootCache"] = True
        state.resources.set("signal", 300)

        assert check_milestones(state, 0) == ["firstResearch"]
        assert state.resources["research"] == 22
        assert state.milestones["firstResearch"] is True

        state.resources.set("signal", 900)
        assert check_milestones(state, 1) == []
        assert state.resources["research"] == 22

    def test_not_revoked(self):
        """Dropping below the threshold keeps the milestone and its reward."""
        state = new_game()
        state.resources.set("signal", 60)
        check_milestones(state, 0)
        state.resources.set("signal", 0)
        check_milestones(state, 1)
        assert state.milestones["bootCache"] is True
        assert state.resources["fuel"] == 18

    def test_crew_bonus(self):
        """Three distinct building types bring two volunteers."""
        state = new_game()
        state.owned.buildings.update({"extractor": 1, "hab": 1})
        check_milestones(state, 0)
        assert state.workers.total == 3

        state.owned.buildings["hydro"] = 1
        assert check_milestones(state, 1) == ["crewBonus"]
        assert state.workers.total == 5

    def test_first_return(self):
        state = new_game()
        state.missions.completed["debris"] = 1
        assert check_milestones(state, 0) == ["firstReturn"]
        assert state.resources["metal"] == 10

    def test_narration(self):
        state = new_game()
        state.resources.set("signal", 50)
        check_milestones(state, 1234)
        assert state.log.entries[-1].time == 1234
        assert state.log.entries[-1].text == "Recovered starter cache: research + fuel."

    def test_ids_unique(self):
        ids = [m.id for m in MILESTONES]
        assert len(ids) == len(set(ids))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
