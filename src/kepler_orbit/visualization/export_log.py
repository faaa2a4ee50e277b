from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from kepler_orbit.simulation.engine import SimulationLog
from kepler_orbit.simulation.scenario import Scenario

logger = logging.getLogger(__name__)


def export_log_to_json(log: SimulationLog, out_path: str = "out/simlog.json") -> str:
    """
    Export minimal playback data:
      {
        "body_points": {
          "B-1": [{"t":0.0,"p":[x,y]}, ...],
          ...
        }
      }
    """
    data: Dict[str, Any] = {"body_points": {}}

    for body_id, samples in log.body_points.items():
        data["body_points"][body_id] = [{"t": t, "p": [p[0], p[1]]} for (t, p) in samples]

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    return out_path


def export_playback_bundle(
    scenario: Scenario,
    log: SimulationLog,
    out_path: str = "out/playback_bundle.json",
) -> str:
    """
    Export a bundle for an external 2D renderer:
      - times: global time vector
      - body_points: local-frame points over time, aligned to times_s
      - orbits: element metadata per body, so the renderer can draw the ellipse
      - events: solver diagnostics and other logged events

    JSON shape:
    {
      "scenario": "Demo",
      "times_s": [0,0.1,0.2,...],
      "body_points": { "B-1": [[x,y], ...], ... },
      "orbits": { "B-1": {"semimajor_axis":..., "eccentricity":..., "argument_of_periapsis":...,
                          "clockwise":..., "periapsis":..., "apoapsis":...}, ...},
      "events": [...]
    }
    """
    body_ids = sorted(log.body_points.keys())
    if not body_ids:
        raise ValueError("No body points found in log.")

    # Reference times (assume uniform sampling across bodies)
    ref_samples = log.body_points[body_ids[0]]
    times_s: List[float] = [t for (t, _p) in ref_samples]

    data: Dict[str, Any] = {
        "scenario": scenario.name,
        "times_s": times_s,
        "body_points": {},
        "orbits": {},
        "events": list(log.events),
    }

    for body_id in body_ids:
        samples = log.body_points[body_id]
        if len(samples) != len(times_s):
            raise ValueError(f"{body_id} samples length mismatch.")
        data["body_points"][body_id] = [[p[0], p[1]] for (_t, p) in samples]

    for body_id, body in scenario.bodies.items():
        el = body.elements
        data["orbits"][body_id] = {
            "semimajor_axis": el.semimajor_axis,
            "eccentricity": el.eccentricity,
            "argument_of_periapsis": el.argument_of_periapsis,
            "clockwise": el.clockwise,
            "periapsis": el.periapsis(),
            "apoapsis": el.apoapsis(),
        }

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(data, f)

    logger.info("Wrote playback bundle for %d bodies (%d samples) to %s", len(body_ids), len(times_s), out_path)
    return out_path
