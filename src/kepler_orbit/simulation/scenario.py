from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from kepler_orbit.objects.body import OrbitingBody


@dataclass
class Scenario:
    """
    Container for all bodies in a simulation run.
    Just data + lookup, no stepping logic.
    """
    name: str
    bodies: Dict[str, OrbitingBody] = field(default_factory=dict)

    def add_body(self, body: OrbitingBody) -> None:
        if body.body_id in self.bodies:
            raise ValueError(f"Duplicate body ID: {body.body_id}")
        self.bodies[body.body_id] = body

    def body_list(self) -> List[OrbitingBody]:
        return list(self.bodies.values())
