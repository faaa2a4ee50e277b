from __future__ import annotations

from dataclasses import dataclass

from kepler_orbit.simulation.scenario import Scenario
from kepler_orbit.simulation.engine import SimulationLog


@dataclass
class SolverMonitorSystem:
    """
    Records an event whenever a body's Kepler solve uses its whole iteration
    budget without meeting the tolerance.
    """
    name: str = "solver_monitor"

    def on_step(self, t_s: float, scenario: Scenario, log: SimulationLog) -> None:
        for body in scenario.body_list():
            sol = body.solver_diagnostics_at(t_s)
            if not sol.converged:
                log.record_event(
                    "kepler_not_converged",
                    t_s,
                    body_id=body.body_id,
                    iterations=sol.iterations,
                    residual_rad=sol.residual_rad,
                )
