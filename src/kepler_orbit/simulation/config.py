"""
JSON scenario configuration.

Expected shape:
{
  "name": "Demo",
  "orbits": {
    "inner": {"semimajor_axis": 1.0, "eccentricity": 0.5,
              "argument_of_periapsis_deg": 30.0, "clockwise": false}
  },
  "bodies": [
    {"body_id": "B-1", "name": "Probe", "orbit": "inner",
     "mean_motion_rad_s": 0.5, "mean_anomaly_epoch_rad": 0.0}
  ],
  "simulation": {"dt_s": 0.1, "t_start_s": 0.0, "t_end_s": 10.0}
}

Bodies that reference the same orbit id share a single OrbitElements instance.
"""
from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from kepler_orbit.core.constants import DEG_TO_RAD
from kepler_orbit.objects.body import OrbitingBody
from kepler_orbit.physics.orbit import OrbitElements
from kepler_orbit.simulation.scenario import Scenario

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    dt_s: float = 0.1
    t_start_s: float = 0.0
    t_end_s: float = 10.0

    def __post_init__(self):
        if not math.isfinite(self.dt_s) or self.dt_s <= 0:
            raise ValueError(f"dt_s must be positive. Got: {self.dt_s}")
        if self.t_end_s < self.t_start_s:
            raise ValueError(f"t_end_s must be >= t_start_s. Got: {self.t_start_s} -> {self.t_end_s}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SimulationConfig":
        return cls(
            dt_s=float(data.get("dt_s", cls.dt_s)),
            t_start_s=float(data.get("t_start_s", cls.t_start_s)),
            t_end_s=float(data.get("t_end_s", cls.t_end_s)),
        )


def orbit_from_dict(data: Dict[str, Any]) -> OrbitElements:
    if "semimajor_axis" not in data:
        raise ValueError("Orbit definition requires 'semimajor_axis'.")
    if "argument_of_periapsis_deg" in data:
        argp = float(data["argument_of_periapsis_deg"]) * DEG_TO_RAD
    else:
        argp = float(data.get("argument_of_periapsis", 0.0))
    return OrbitElements(
        semimajor_axis=float(data["semimajor_axis"]),
        eccentricity=float(data.get("eccentricity", 0.0)),
        argument_of_periapsis=argp,
        clockwise=bool(data.get("clockwise", False)),
    )


def scenario_from_dict(data: Dict[str, Any]) -> Scenario:
    orbits = {orbit_id: orbit_from_dict(o) for orbit_id, o in data.get("orbits", {}).items()}

    scenario = Scenario(name=data.get("name", "Unnamed"))
    for b in data.get("bodies", []):
        orbit_id = b.get("orbit")
        if orbit_id not in orbits:
            raise ValueError(f"Body {b.get('body_id')!r} references unknown orbit: {orbit_id!r}")
        scenario.add_body(OrbitingBody(
            body_id=b["body_id"],
            name=b.get("name", b["body_id"]),
            elements=orbits[orbit_id],
            mean_motion_rad_s=float(b["mean_motion_rad_s"]),
            mean_anomaly_epoch_rad=float(b.get("mean_anomaly_epoch_rad", 0.0)),
        ))

    return scenario


def load_config(path: str) -> Tuple[Scenario, SimulationConfig]:
    """Read a JSON scenario file; returns (scenario, run parameters)."""
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)

    scenario = scenario_from_dict(data)
    sim_cfg = SimulationConfig.from_dict(data.get("simulation", {}))
    logger.info("Loaded scenario %r from %s with %d bodies", scenario.name, path, len(scenario.bodies))
    return scenario, sim_cfg
