from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from kepler_orbit.core.constants import MU_EARTH_KM3_S2
from kepler_orbit.core.frames import Vector2
from kepler_orbit.physics.anomaly import MeanAnomaly
from kepler_orbit.physics.kepler import KeplerSolution, wrap_to_2pi
from kepler_orbit.physics.orbit import OrbitElements, mean_motion_rad_s


@dataclass
class OrbitingBody:
    """
    A body driven along its orbit by a simulated clock.

    Mean anomaly advances linearly: M(t) = M0 + n * t, wrapped to [0, 2pi).
    Several bodies may share one OrbitElements instance.
    """
    body_id: str
    name: str
    elements: OrbitElements
    mean_motion_rad_s: float
    mean_anomaly_epoch_rad: float = 0.0

    # Cached state from the last position_at() call
    last_t_s: Optional[float] = None
    last_point: Optional[Vector2] = None

    def __post_init__(self):
        if not self.body_id.strip():
            raise ValueError("Body ID cannot be empty or whitespace.")
        if not self.name.strip():
            raise ValueError("Body name cannot be empty or whitespace.")
        if not math.isfinite(self.mean_motion_rad_s):
            raise ValueError(f"Mean motion must be finite. Got: {self.mean_motion_rad_s}")
        if not math.isfinite(self.mean_anomaly_epoch_rad):
            raise ValueError(f"Mean anomaly at epoch must be finite. Got: {self.mean_anomaly_epoch_rad}")

    @classmethod
    def from_central_mass(
        cls,
        body_id: str,
        name: str,
        elements: OrbitElements,
        mu: float = MU_EARTH_KM3_S2,
        mean_anomaly_epoch_rad: float = 0.0,
    ) -> "OrbitingBody":
        """Derive the mean motion from the gravitational parameter of the primary."""
        n = mean_motion_rad_s(elements.semimajor_axis, mu)
        return cls(body_id, name, elements, n, mean_anomaly_epoch_rad)

    def mean_anomaly_at(self, t_s: float) -> MeanAnomaly:
        return MeanAnomaly(wrap_to_2pi(self.mean_anomaly_epoch_rad + self.mean_motion_rad_s * t_s))

    def position_at(self, t_s: float) -> Vector2:
        """
        Returns the 2D local-frame point at time t_s (seconds since scenario epoch).
        """
        p = self.mean_anomaly_at(t_s).point2d(self.elements)

        self.last_t_s = t_s
        self.last_point = p

        return p

    def solver_diagnostics_at(self, t_s: float) -> KeplerSolution:
        return self.mean_anomaly_at(t_s).solve(self.elements)
