from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TypeVar

from kepler_orbit.core.constants import DEG_TO_RAD, RAD_TO_DEG
from kepler_orbit.core.frames import Vector2, ieee_div, norm
from kepler_orbit.physics.kepler import KeplerSolution, solve_kepler
from kepler_orbit.physics.orbit import OrbitElements

A = TypeVar("A", bound="Anomaly")


@dataclass(frozen=True)
class Anomaly:
    """
    An angular position along an orbit, in radians.

    The angle alone means nothing: every conversion takes the OrbitElements it
    refers to. Instances are immutable; set_degrees() returns a new one.
    """
    angle: float = 0.0

    @classmethod
    def from_degrees(cls: type[A], angle_deg: float) -> A:
        return cls(angle_deg * DEG_TO_RAD)

    def set_degrees(self: A, angle_deg: float) -> A:
        return replace(self, angle=angle_deg * DEG_TO_RAD)

    def get_degrees(self) -> float:
        return self.angle * RAD_TO_DEG


@dataclass(frozen=True)
class TrueAnomaly(Anomaly):
    """True anomaly (nu): the actual angle of the body seen from the focus."""

    def radius(self, orbit: OrbitElements) -> float:
        """Conic equation r = a (1 - e^2) / (1 + e cos(nu))."""
        a = orbit.semimajor_axis
        e = orbit.eccentricity
        return ieee_div(a * (1.0 - e * e), 1.0 + e * math.cos(self.angle))

    def point(self, orbit: OrbitElements) -> Vector2:
        """(r cos(nu + w), r sin(nu + w)); w is folded into the angle here."""
        r = self.radius(orbit)
        angle = self.angle + orbit.argument_of_periapsis
        return (math.cos(angle) * r, math.sin(angle) * r)

    def point2d(self, orbit: OrbitElements) -> Vector2:
        return orbit.rotate_point(self.point(orbit))

    def eccentric_anomaly(self, orbit: OrbitElements) -> "EccentricAnomaly":
        """
        E = atan2(y / b, (x + f) / a) from the focus-centred, periapsis-aligned
        position. Closed form.
        """
        # Periapsis-aligned coordinates; equal to point() when w == 0.
        r = self.radius(orbit)
        x = math.cos(self.angle) * r
        y = math.sin(self.angle) * r

        angle = math.atan2(
            ieee_div(y, orbit.semiminor_axis()),
            ieee_div(x + orbit.focal_distance(), orbit.semimajor_axis),
        )
        return EccentricAnomaly(angle)

    def mean_anomaly(self, orbit: OrbitElements) -> "MeanAnomaly":
        return self.eccentric_anomaly(orbit).mean_anomaly(orbit)


@dataclass(frozen=True)
class EccentricAnomaly(Anomaly):
    """Eccentric anomaly (E): the parametric angle on the auxiliary circle."""

    def point(self, orbit: OrbitElements) -> Vector2:
        """(a cos(E) - f, b sin(E)), focus at the origin."""
        return (
            math.cos(self.angle) * orbit.semimajor_axis - orbit.focal_distance(),
            math.sin(self.angle) * orbit.semiminor_axis(),
        )

    def point2d(self, orbit: OrbitElements) -> Vector2:
        return orbit.rotate_point(self.point(orbit))

    def radius(self, orbit: OrbitElements) -> float:
        # Norm of the position, not the conic formula; should agree with TrueAnomaly.radius.
        return norm(self.point(orbit))

    def true_anomaly(self, orbit: OrbitElements) -> TrueAnomaly:
        x, y = self.point(orbit)
        return TrueAnomaly(math.atan2(y, x))

    def mean_anomaly(self, orbit: OrbitElements) -> "MeanAnomaly":
        """Kepler's equation: M = E - e sin(E)."""
        return MeanAnomaly(self.angle - orbit.eccentricity * math.sin(self.angle))


@dataclass(frozen=True)
class MeanAnomaly(Anomaly):
    """
    Mean anomaly (M): advances linearly with time.

    Every geometric query goes through eccentric_anomaly(), which inverts
    Kepler's equation numerically.
    """

    def solve(self, orbit: OrbitElements) -> KeplerSolution:
        """Run the Kepler solver and return its convergence diagnostics."""
        return solve_kepler(self.angle, orbit.eccentricity)

    def eccentric_anomaly(self, orbit: OrbitElements) -> EccentricAnomaly:
        return EccentricAnomaly(self.solve(orbit).eccentric_anomaly_rad)

    def true_anomaly(self, orbit: OrbitElements) -> TrueAnomaly:
        return self.eccentric_anomaly(orbit).true_anomaly(orbit)

    def radius(self, orbit: OrbitElements) -> float:
        return self.eccentric_anomaly(orbit).radius(orbit)

    def point(self, orbit: OrbitElements) -> Vector2:
        return self.eccentric_anomaly(orbit).point(orbit)

    def point2d(self, orbit: OrbitElements) -> Vector2:
        return self.eccentric_anomaly(orbit).point2d(orbit)
