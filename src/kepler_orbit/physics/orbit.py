# src/kepler_orbit/physics/orbit.py

from __future__ import annotations

import math
from dataclasses import dataclass

from kepler_orbit.core.constants import MU_EARTH_KM3_S2
from kepler_orbit.core.frames import Vector2, flip_y, rot_screen


class InvalidOrbitError(ValueError):
    """Raised by OrbitElements.validated() for elements outside the elliptic domain."""


@dataclass(frozen=True)
class OrbitElements:
    """
    In-plane (2D) Keplerian orbit elements.

    Units:
        semimajor_axis: any length unit, stored as abs(input)
        eccentricity: dimensionless, stored as abs(input)
        argument_of_periapsis: radians
        clockwise: winding direction in the local/screen frame

    The default constructor never raises. Negative axis/eccentricity are
    normalized, and e >= 1 is accepted (downstream formulas may then return
    inf/nan). Use OrbitElements.validated() for a strict elliptic orbit.
    """
    semimajor_axis: float
    eccentricity: float = 0.0
    argument_of_periapsis: float = 0.0
    clockwise: bool = False

    def __post_init__(self):
        object.__setattr__(self, "semimajor_axis", abs(self.semimajor_axis))
        object.__setattr__(self, "eccentricity", abs(self.eccentricity))

    @classmethod
    def validated(
        cls,
        semimajor_axis: float,
        eccentricity: float = 0.0,
        argument_of_periapsis: float = 0.0,
        clockwise: bool = False,
    ) -> "OrbitElements":
        if not math.isfinite(semimajor_axis) or semimajor_axis <= 0:
            raise InvalidOrbitError(f"Semi-major axis must be positive and finite. Got: {semimajor_axis}")
        if not (0.0 <= eccentricity < 1.0):
            raise InvalidOrbitError(f"Eccentricity must be in range [0, 1). Got: {eccentricity}")
        if not math.isfinite(argument_of_periapsis):
            raise InvalidOrbitError(f"Argument of periapsis must be finite. Got: {argument_of_periapsis}")
        return cls(semimajor_axis, eccentricity, argument_of_periapsis, clockwise)

    def semiminor_axis(self) -> float:
        """b = a * sqrt(1 - e^2). NaN for hyperbolic eccentricities."""
        k = 1.0 - self.eccentricity * self.eccentricity
        if k < 0.0:
            return math.nan
        return self.semimajor_axis * math.sqrt(k)

    def focal_distance(self) -> float:
        """f = e * a, distance from the ellipse centre to the focus."""
        return self.eccentricity * self.semimajor_axis

    def focal_point(self) -> float:
        return self.focal_distance()

    def periapsis(self) -> float:
        """Nearest distance to the focus: a * (1 - e)."""
        return (1.0 - self.eccentricity) * self.semimajor_axis

    def apoapsis(self) -> float:
        """Farthest distance from the focus: a * (1 + e)."""
        return (1.0 + self.eccentricity) * self.semimajor_axis

    def is_clockwise(self) -> bool:
        return self.clockwise

    def rotate_point(self, point: Vector2) -> Vector2:
        """
        Map a point from the mathematical frame (focus at origin, periapsis on +x)
        into the ellipse's rotated local frame. Clockwise orbits flip y first.
        """
        if self.clockwise:
            point = flip_y(point)
        return rot_screen(self.argument_of_periapsis, point)


def mean_motion_rad_s(a: float, mu: float = MU_EARTH_KM3_S2) -> float:
    """n = sqrt(mu / a^3)."""
    return math.sqrt(mu / (a ** 3))


def orbital_period_s(a: float, mu: float = MU_EARTH_KM3_S2) -> float:
    """T = 2 pi / n."""
    return 2.0 * math.pi / mean_motion_rad_s(a, mu)
