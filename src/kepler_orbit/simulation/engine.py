from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Tuple

from kepler_orbit.core.frames import Vector2
from kepler_orbit.simulation.scenario import Scenario

logger = logging.getLogger(__name__)


class System(Protocol):
    """
    Plugin interface for simulation systems.
    Each system runs per tick and can write to the log.
    """
    name: str

    def on_step(self, t_s: float, scenario: Scenario, log: "SimulationLog") -> None:
        ...


@dataclass
class SimulationLog:
    """
    Stores outputs from a simulation run.
    Keep it simple and serializable.
    """
    # Points in the local frame: body_id -> list of (t, (x, y))
    body_points: Dict[str, List[Tuple[float, Vector2]]] = field(default_factory=dict)

    # Free-form events, e.g. solver diagnostics
    events: List[Dict[str, Any]] = field(default_factory=list)

    def record_point(self, body_id: str, t_s: float, point: Vector2) -> None:
        self.body_points.setdefault(body_id, []).append((t_s, point))

    def record_event(self, event_type: str, t_s: float, **details: Any) -> None:
        self.events.append({"type": event_type, "t": t_s, **details})


@dataclass
class Engine:
    """
    Fixed-step simulation engine driven by a simulated clock.
    Deterministic replay: given same scenario + dt + start/end => same output.
    """
    dt_s: float
    systems: List[System] = field(default_factory=list)

    def run(self, scenario: Scenario, t_start_s: float, t_end_s: float) -> SimulationLog:
        if self.dt_s <= 0:
            raise ValueError("dt_s must be positive.")
        if t_end_s < t_start_s:
            raise ValueError("t_end_s must be >= t_start_s.")

        log = SimulationLog()
        t = t_start_s
        ticks = 0

        logger.info(
            "Running scenario %r: %d bodies, t=[%.3f, %.3f] s, dt=%.3f s",
            scenario.name, len(scenario.bodies), t_start_s, t_end_s, self.dt_s,
        )

        # Inclusive end if it lands exactly; otherwise last tick < end
        while t <= t_end_s + 1e-9:
            for sys in self.systems:
                sys.on_step(t, scenario, log)

            ticks += 1
            # t_k = t_start + k * dt
            t = t_start_s + ticks * self.dt_s

        logger.info("Scenario %r finished after %d ticks (%d events)", scenario.name, ticks, len(log.events))
        return log
