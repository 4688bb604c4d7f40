import pytest

from core.errors import InvalidParameter, UnknownMotorType
from core.parameters import SimulationRequest
from scenarios import DirectOnLineStartScenario
from simulation import SimulationBuilder


def test_defaults():
    builder = SimulationBuilder()
    assert builder.result is None
    res = builder.run()
    assert res.motor_id == "squirrelCage"
    assert res.request == SimulationRequest()
    assert builder.result is res


def test_unchanged_inputs_reuse_result():
    builder = SimulationBuilder().motor("woundRotor").request(SimulationRequest())
    first = builder.run()
    assert builder.run() is first
    # equal but distinct request object
    assert builder.request(SimulationRequest()).run() is first


def test_changed_inputs_recompute():
    builder = SimulationBuilder().request(SimulationRequest(stop_time_ms=0))
    first = builder.run()

    second = builder.update(switching_angle_deg=90).run()
    assert second is not first
    assert second.request.switching_angle_deg == 90
    assert second.request.stop_time_ms == 0

    third = builder.motor("cylindrical").run()
    assert third is not second
    assert third.motor_id == "cylindrical"
    assert builder.result is third


def test_update_unknown_field():
    with pytest.raises(InvalidParameter) as exc:
        SimulationBuilder().update(slip=0.03)
    assert exc.value.field == "slip"


def test_failed_run_keeps_previous_result():
    builder = SimulationBuilder()
    good = builder.run()
    with pytest.raises(InvalidParameter):
        builder.update(view_cycles=0).run()
    assert builder.result is good

    with pytest.raises(UnknownMotorType):
        builder.update(view_cycles=5).motor("dcMotor").run()
    assert builder.result is good


def test_scenario():
    scenario = DirectOnLineStartScenario("salientPole", switching_angle_deg=270)
    res = SimulationBuilder().scenario(scenario).run()
    assert res.motor_id == "salientPole"
    assert res.request.switching_angle_deg == 270
    assert res.request.rated_power_kw == SimulationRequest().rated_power_kw
    assert "salientPole" in scenario.describe()


def test_scenario_rejects_unknown_field():
    with pytest.raises(TypeError):
        DirectOnLineStartScenario(slip=1)
