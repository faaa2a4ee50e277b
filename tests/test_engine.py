"""
Tests for simulation engine and scenario components.
"""
import math
import pytest

from kepler_orbit.objects.body import OrbitingBody
from kepler_orbit.physics.orbit import OrbitElements
from kepler_orbit.simulation.scenario import Scenario
from kepler_orbit.simulation.engine import Engine, SimulationLog
from kepler_orbit.simulation.systems.state_recorder import StateRecorderSystem


def deg(x):
    return x * math.pi / 180.0


@pytest.fixture
def sample_body():
    return OrbitingBody(
        body_id="B-TEST",
        name="TestBody",
        elements=OrbitElements(
            semimajor_axis=1.0,
            eccentricity=0.3,
            argument_of_periapsis=deg(40.0),
        ),
        mean_motion_rad_s=0.5,
    )


class TestScenario:
    def test_scenario_creation(self):
        scenario = Scenario(name="Test Scenario")
        assert scenario.name == "Test Scenario"
        assert len(scenario.bodies) == 0

    def test_add_body(self, sample_body):
        scenario = Scenario(name="Test")
        scenario.add_body(sample_body)

        assert len(scenario.bodies) == 1
        assert "B-TEST" in scenario.bodies
        assert scenario.bodies["B-TEST"] == sample_body

    def test_duplicate_body_rejected(self, sample_body):
        scenario = Scenario(name="Test")
        scenario.add_body(sample_body)

        with pytest.raises(ValueError, match="Duplicate body ID"):
            scenario.add_body(sample_body)

    def test_body_list(self, sample_body):
        scenario = Scenario(name="Test")
        scenario.add_body(sample_body)

        bodies = scenario.body_list()
        assert len(bodies) == 1
        assert bodies[0] == sample_body


class TestSimulationLog:
    def test_log_creation(self):
        log = SimulationLog()
        assert len(log.body_points) == 0
        assert len(log.events) == 0

    def test_record_point(self):
        log = SimulationLog()
        log.record_point("B-001", 0.0, (0.5, 0.0))
        log.record_point("B-001", 10.0, (0.4, 0.1))

        assert "B-001" in log.body_points
        assert len(log.body_points["B-001"]) == 2
        assert log.body_points["B-001"][0] == (0.0, (0.5, 0.0))
        assert log.body_points["B-001"][1] == (10.0, (0.4, 0.1))

    def test_record_event(self):
        log = SimulationLog()
        log.record_event("kepler_not_converged", 5.0, body_id="B-001", iterations=10)

        assert log.events == [{"type": "kepler_not_converged", "t": 5.0, "body_id": "B-001", "iterations": 10}]


class TestEngine:
    def test_engine_creation(self):
        engine = Engine(dt_s=10.0)
        assert engine.dt_s == 10.0
        assert len(engine.systems) == 0

    def test_engine_validation_negative_dt(self):
        engine = Engine(dt_s=-1.0)
        scenario = Scenario(name="Test")

        with pytest.raises(ValueError, match="dt_s must be positive"):
            engine.run(scenario, t_start_s=0.0, t_end_s=100.0)

    def test_engine_validation_end_before_start(self):
        engine = Engine(dt_s=10.0)
        scenario = Scenario(name="Test")

        with pytest.raises(ValueError, match="t_end_s must be >= t_start_s"):
            engine.run(scenario, t_start_s=100.0, t_end_s=0.0)

    def test_engine_run_empty_scenario(self):
        engine = Engine(dt_s=10.0)
        scenario = Scenario(name="Test")

        log = engine.run(scenario, t_start_s=0.0, t_end_s=50.0)
        assert isinstance(log, SimulationLog)

    def test_engine_with_mock_system(self, sample_body):
        """Test that engine calls system on_step method at each timestep."""
        from dataclasses import dataclass, field
        from typing import List

        @dataclass
        class MockSystem:
            name: str = "mock"
            call_times: List[float] = field(default_factory=list)

            def on_step(self, t_s: float, scenario, log):
                self.call_times.append(t_s)

        mock_system = MockSystem()
        engine = Engine(dt_s=10.0, systems=[mock_system])
        scenario = Scenario(name="Test")
        scenario.add_body(sample_body)

        engine.run(scenario, t_start_s=0.0, t_end_s=30.0)

        # Should be called at t=0, 10, 20, 30
        assert mock_system.call_times == [0.0, 10.0, 20.0, 30.0]

    def test_fractional_step_tick_count(self):
        calls = []

        class Counter:
            name = "counter"

            def on_step(self, t_s, scenario, log):
                calls.append(t_s)

        Engine(dt_s=0.1, systems=[Counter()]).run(Scenario(name="Test"), 0.0, 100.0)
        assert len(calls) == 1001
        assert abs(calls[-1] - 100.0) < 1e-9

    def test_deterministic_replay(self, sample_body):
        scenario = Scenario(name="Test")
        scenario.add_body(sample_body)
        engine = Engine(dt_s=0.25, systems=[StateRecorderSystem()])

        log_a = engine.run(scenario, 0.0, 20.0)
        log_b = engine.run(scenario, 0.0, 20.0)
        assert log_a.body_points == log_b.body_points
