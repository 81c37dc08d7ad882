"""
Signal Frontier — Engine
Command dispatcher, tick loop and snapshot API over a single GameState.

Ticks and commands share one re-entrant lock, so a command never lands
between the production, mission and milestone phases of a tick.
"""

from typing import Any, Callable, Dict, Optional
import logging
import random
import threading
import time

from ..catalog import body_by_id, building_by_id, tech_by_id, upgrade_by_id
from ..config import EngineConfig, ENGINE
from ..crew import recruitment, workforce
from .gates import (
    biome_explored,
    has_prerequisites,
    is_unlocked,
    mission_slots,
    owns_tech,
    requirements_met,
)
from .milestones import MILESTONE_IDS, check_milestones
from .missions import launch, resolve_due
from .production import run_production
from .results import CommandResult
from .state import GameState, from_snapshot, new_game, to_snapshot

logger = logging.getLogger(__name__)


def wall_clock_ms() -> float:
    return time.time() * 1000.0


class Engine:
    """
    Economy and progression engine.

    Manages:
    - Tick phases: production, mission resolution, milestones
    - Validated player commands returning CommandResult
    - Snapshot export/import
    - Narration log
    """

    def __init__(
        self,
        config: EngineConfig = ENGINE,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        state: Optional[GameState] = None,
    ):
        self.config = config
        self.rng = rng or random.Random()
        self.clock = clock or wall_clock_ms
        self.state = state or new_game(config)
        self.tick_count = 0

        self._lock = threading.RLock()

        # Callbacks
        self.on_tick_complete: Optional[Callable] = None
        self.on_notice: Optional[Callable[[str], None]] = None

        logger.info("Engine initialized")

    # -------------------------------------------------------------------------
    # Tick
    # -------------------------------------------------------------------------

    def tick(self, now: Optional[float] = None):
        """Run one full tick: production, mission resolution, milestones."""
        with self._lock:
            if now is None:
                now = self.clock()
            rates = run_production(self.state, self.config)
            reports = resolve_due(self.state, now, self.rng, self.config)
            achieved = check_milestones(self.state, now)
            self.tick_count += 1

            if self.on_tick_complete:
                self.on_tick_complete({
                    "tick": self.tick_count,
                    "now": now,
                    "rates": rates.as_dict(),
                    "missions_resolved": [r.body_id for r in reports if not r.dropped],
                    "milestones": achieved,
                })

    def run(self, ticks: int):
        """Run a fixed number of ticks back to back."""
        for _ in range(ticks):
            self.tick()

    # -------------------------------------------------------------------------
    # Narration
    # -------------------------------------------------------------------------

    def log(self, text: str):
        """Append a line to the capped narration log."""
        with self._lock:
            self.state.log.add(self.clock(), text)

    def _finish(self, command: str, result: CommandResult) -> CommandResult:
        if result.ok:
            if result.message:
                self.state.log.add(self.clock(), result.message)
        else:
            logger.warning(f"{command} declined: {result.message}")
            if self.on_notice:
                self.on_notice(result.message)
        return result

    # -------------------------------------------------------------------------
    # Manual actions
    # -------------------------------------------------------------------------

    def collect_signal(self) -> CommandResult:
        with self._lock:
            self.state.resources.credit("signal", self.config.collect_signal_amount)
            return self._finish("collect_signal", CommandResult.success("Manual signal calibration."))

    def pulse_scan(self) -> CommandResult:
        """Spend signal for one randomly chosen reward."""
        with self._lock:
            cost = self.config.pulse_scan_cost
            if self.state.resources.get("signal") < cost:
                return self._finish("pulse_scan",
                                    CommandResult.declined("Not enough signal for a pulse scan."))
            self.state.resources.debit("signal", cost)
            kind = self.rng.choice(list(self.config.pulse_scan_rewards))
            amount = self.config.pulse_scan_rewards[kind]
            self.state.resources.credit(kind, amount)
            return self._finish("pulse_scan",
                                CommandResult.success(f"Pulse scan recovered {amount:g} {kind}."))

    # -------------------------------------------------------------------------
    # Expeditions
    # -------------------------------------------------------------------------

    def select_body(self, body_id: str) -> CommandResult:
        with self._lock:
            body = body_by_id(body_id)
            if body is None or not is_unlocked(body, self.state.resources, self.state.owned.tech):
                return self._finish("select_body", CommandResult.declined("Target not unlocked."))
            self.state.selected_body = body.id
            return self._finish("select_body", CommandResult.success())

    def start_mission(self, body_id: Optional[str] = None) -> CommandResult:
        """Launch to ``body_id``, or to the selected target when omitted."""
        with self._lock:
            target = body_id or self.state.selected_body
            result = launch(self.state, target, self.clock(), self.config)
            return self._finish("start_mission", result)

    # -------------------------------------------------------------------------
    # Construction & research
    # -------------------------------------------------------------------------

    def build(self, building_id: str) -> CommandResult:
        with self._lock:
            return self._finish("build", self._build(building_id))

    def _build(self, building_id: str) -> CommandResult:
        state = self.state
        building = building_by_id(building_id)
        if building is None:
            return CommandResult.declined(f"Unknown structure: {building_id}.")
        if not is_unlocked(building, state.resources, state.owned.tech):
            return CommandResult.declined("Structure not unlocked.")
        if building.is_outpost and not (
            biome_explored(building.biome, state.missions.completed)
            and requirements_met(building.requires, state.owned.buildings)
        ):
            return CommandResult.declined("Outpost not unlocked.")
        if not state.resources.spend(building.cost):
            return CommandResult.declined("Not enough resources.")

        level = state.owned.buildings.get(building.id, 0) + 1
        state.owned.buildings[building.id] = level
        if building.habitat:
            state.resources.credit("habitat", building.habitat)
        logger.info(f"Constructed {building.id} (level {level})")
        return CommandResult.success(f"Constructed {building.name}.")

    def buy_tech(self, tech_id: str) -> CommandResult:
        with self._lock:
            return self._finish("buy_tech", self._buy_tech(tech_id))

    def _buy_tech(self, tech_id: str) -> CommandResult:
        state = self.state
        tech = tech_by_id(tech_id)
        if tech is None:
            return CommandResult.declined(f"Unknown technology: {tech_id}.")
        if owns_tech(state.owned.tech, tech.id):
            return CommandResult.declined(f"{tech.name} already researched.")
        if not (is_unlocked(tech, state.resources, state.owned.tech)
                and has_prerequisites(tech, state.owned.tech)):
            return CommandResult.declined("Technology not unlocked.")
        if not state.resources.spend(tech.cost):
            return CommandResult.declined("Not enough resources.")

        state.owned.tech[tech.id] = 1
        if tech.announce:
            state.log.add(self.clock(), tech.announce)
        logger.info(f"Tech unlocked: {tech.id}")
        return CommandResult.success(f"Tech unlocked: {tech.name}.")

    def buy_upgrade(self, upgrade_id: str) -> CommandResult:
        with self._lock:
            return self._finish("buy_upgrade", self._buy_upgrade(upgrade_id))

    def _buy_upgrade(self, upgrade_id: str) -> CommandResult:
        state = self.state
        upgrade = upgrade_by_id(upgrade_id)
        if upgrade is None:
            return CommandResult.declined(f"Unknown upgrade: {upgrade_id}.")
        levels = {**state.owned.buildings, **state.owned.upgrades}
        if not requirements_met(upgrade.requires, levels):
            return CommandResult.declined("Upgrade requirements not met.")
        if not state.resources.spend(upgrade.cost):
            return CommandResult.declined("Not enough resources.")

        level = state.owned.upgrades.get(upgrade.id, 0) + 1
        state.owned.upgrades[upgrade.id] = level
        logger.info(f"Upgrade installed: {upgrade.id} (level {level})")
        return CommandResult.success(f"Upgrade installed: {upgrade.name}.")

    # -------------------------------------------------------------------------
    # Crew
    # -------------------------------------------------------------------------

    def change_crew(self, role: str, delta: int) -> CommandResult:
        with self._lock:
            return self._finish("change_crew", workforce.change_crew(self.state.workers, role, delta))

    def roll_recruits(self, force: bool = False) -> CommandResult:
        with self._lock:
            result = recruitment.roll_recruits(
                self.state.recruits, self.clock(), self.rng, self.config, force=force)
            return self._finish("roll_recruits", result)

    def hire(self, candidate_id: str) -> CommandResult:
        with self._lock:
            return self._finish("hire", recruitment.hire(self.state, candidate_id))

    # -------------------------------------------------------------------------
    # Snapshot & status
    # -------------------------------------------------------------------------

    def get_snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return to_snapshot(self.state)

    def load_snapshot(self, blob: Any):
        """Replace state with a snapshot merged onto fresh defaults."""
        with self._lock:
            self.state = from_snapshot(blob, self.config, known_milestones=MILESTONE_IDS)
            logger.info("Snapshot loaded")

    def get_status(self) -> Dict:
        """Get current engine status."""
        with self._lock:
            now = self.clock()
            state = self.state
            return {
                "tick": self.tick_count,
                "resources": state.resources.as_dict(),
                "rates": dict(state.rates),
                "workers": {
                    "total": state.workers.total,
                    "assigned": dict(state.workers.assigned),
                    "idle": state.workers.idle,
                    "satisfaction": state.workers.satisfaction,
                },
                "slots": mission_slots(state.owned.tech, state.owned.upgrades),
                "active_missions": [
                    {"body_id": m.body_id, "remaining_ms": max(0.0, m.ends_at - now),
                     "hazard": m.hazard}
                    for m in state.missions.active
                ],
                "selected_body": state.selected_body,
                "recruit_cooldown_ms": recruitment.cooldown_remaining(
                    state.recruits, now, self.config),
                "milestones": sorted(k for k, v in state.milestones.items() if v),
            }
