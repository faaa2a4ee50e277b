import logging
import math

from kepler_orbit.objects.body import OrbitingBody
from kepler_orbit.physics.orbit import OrbitElements, orbital_period_s
from kepler_orbit.simulation.scenario import Scenario
from kepler_orbit.simulation.engine import Engine
from kepler_orbit.simulation.systems.state_recorder import StateRecorderSystem
from kepler_orbit.simulation.systems.solver_monitor import SolverMonitorSystem
from kepler_orbit.visualization.export_log import export_playback_bundle


def deg(x): return x * math.pi / 180.0


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Two bodies share one orbit, a third is on its own clockwise orbit
    shared = OrbitElements(semimajor_axis=1.0, eccentricity=0.5, argument_of_periapsis=deg(30.0))
    retro = OrbitElements(semimajor_axis=2.0, eccentricity=0.2, clockwise=True)

    scenario = Scenario(name="Demo")
    scenario.add_body(OrbitingBody("B-1", "Lead", shared, mean_motion_rad_s=1.0))
    scenario.add_body(OrbitingBody("B-2", "Trail", shared, mean_motion_rad_s=1.0, mean_anomaly_epoch_rad=deg(90.0)))
    scenario.add_body(OrbitingBody("B-3", "Retro", retro, mean_motion_rad_s=1.0 / 2.0 ** 1.5))

    for t in [0.0, 1.0, 2.0, 3.0]:
        print(t, scenario.bodies["B-1"].position_at(t))

    period = orbital_period_s(1.0, mu=1.0)
    engine = Engine(dt_s=0.05, systems=[StateRecorderSystem(), SolverMonitorSystem()])
    log = engine.run(scenario, t_start_s=0.0, t_end_s=period)

    out = export_playback_bundle(scenario, log)
    print("Wrote:", out)
    print("Recorded points:", {k: len(v) for k, v in log.body_points.items()})
    print("Solver events:", len(log.events))


if __name__ == "__main__":
    main()
