from __future__ import annotations

from dataclasses import dataclass

from kepler_orbit.simulation.scenario import Scenario
from kepler_orbit.simulation.engine import SimulationLog


@dataclass
class StateRecorderSystem:
    name: str = "state_recorder"

    def on_step(self, t_s: float, scenario: Scenario, log: SimulationLog) -> None:
        for body in scenario.body_list():
            p = body.position_at(t_s)
            log.record_point(body.body_id, t_s, p)
