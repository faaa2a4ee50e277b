from __future__ import annotations

import math

# Angle unit conversion
DEG_TO_RAD: float = math.pi / 180.0
RAD_TO_DEG: float = 180.0 / math.pi

# Kepler solver budget: fixed iteration cap and a tolerance of 0.00001 degrees
KEPLER_MAX_ITER: int = 10
KEPLER_TOLERANCE_RAD: float = 0.00001 * DEG_TO_RAD

# Earth gravitational parameter (mu) in km^3/s^2 (WGS-84 standard value)
MU_EARTH_KM3_S2: float = 398600.4418
