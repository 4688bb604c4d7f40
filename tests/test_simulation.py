import math

import numpy as np
import pytest

from core.catalog import lookup
from core.errors import InvalidParameter
from core.parameters import SimulationRequest
from core.timebase import sample_count
from simulation import ac_time_constant, rated_current, synthesize


@pytest.fixture
def squirrel_cage():
    return lookup("squirrelCage")


@pytest.fixture
def example_request():
    return SimulationRequest(
        rated_power_kw=7.5, rated_voltage_v=200, frequency_hz=50,
        switching_angle_deg=0, dc_time_constant_ms=50,
        stop_time_ms=0, view_cycles=3,
    )


def test_example_scenario(squirrel_cage, example_request):
    res = synthesize(squirrel_cage, example_request)
    expected_rms = 7500 / (math.sqrt(3) * 200 * 0.85)
    assert res.rated_current_rms == pytest.approx(expected_rms)
    assert res.rated_current_rms == pytest.approx(25.47, abs=0.01)
    assert res.rated_peak == pytest.approx(36.02, abs=0.01)
    assert res.inrush_peak == pytest.approx(216.1, abs=0.1)
    assert res.connection_index == 0
    assert res.phase_u[0] == pytest.approx(0.0, abs=0.05)
    assert res.dc_component_u[0] == pytest.approx(0.0, abs=1e-6)
    assert res.stop_time_ms == 0
    assert res.motor_id == "squirrelCage"
    assert res.request is example_request


def test_inrush_peak_exact(example_request):
    for motor_id in ("squirrelCage", "woundRotor", "salientPole", "cylindrical"):
        profile = lookup(motor_id)
        res = synthesize(profile, example_request)
        assert res.inrush_peak == res.rated_peak * profile.inrush_multiplier


def test_time_axis(squirrel_cage):
    for f in (50, 60):
        res = synthesize(squirrel_cage, SimulationRequest(frequency_hz=f, stop_time_ms=30))
        assert res.time_ms[0] == 0
        assert np.all(np.diff(res.time_ms) > 0)
        assert np.all(res.rated_peak_line == np.round(res.rated_peak, 1))


def test_dead_time_is_zero(squirrel_cage):
    res = synthesize(squirrel_cage, SimulationRequest(stop_time_ms=50, switching_angle_deg=90))
    k0 = res.connection_index
    assert k0 > 0
    # every sample stamped before the connection belongs to the dead time
    assert np.all(np.nonzero(res.time_ms < res.stop_time_ms)[0] < k0)
    for col in (res.phase_u, res.phase_v, res.phase_w,
                res.envelope_positive, res.envelope_negative, res.dc_component_u):
        assert np.all(col[:k0] == 0)
    assert np.any(res.phase_v[res.post_connection_slice()] != 0)


@pytest.mark.parametrize("angle", [0, 45, 90, 180, 270, 315])
def test_envelope_after_connection(squirrel_cage, angle):
    res = synthesize(squirrel_cage, SimulationRequest(switching_angle_deg=angle, stop_time_ms=20))
    post = res.post_connection_slice()
    env = res.envelope_positive[post]
    assert np.array_equal(res.envelope_negative[post], -env)
    assert np.all(np.abs(res.phase_u[post]) <= env)
    assert np.all(env >= res.rated_peak_line[post])


def test_dc_maximal_at_90(squirrel_cage):
    req = SimulationRequest(switching_angle_deg=90, stop_time_ms=0, view_cycles=3)
    res = synthesize(squirrel_cage, req)
    assert abs(res.dc_component_u[0]) == pytest.approx(res.inrush_peak, abs=0.05)
    assert res.phase_u[0] == pytest.approx(0.0, abs=0.05)
    # offset drives the first half cycle well beyond the AC amplitude
    assert res.observed_max_instantaneous > 1.5 * res.inrush_peak


def test_transient_decays(squirrel_cage):
    req = SimulationRequest(switching_angle_deg=90, dc_time_constant_ms=10,
                            stop_time_ms=0, view_cycles=30)
    res = synthesize(squirrel_cage, req)
    assert res.dc_component_u[-1] == 0
    # AC envelope is monotonically approaching the rated peak
    env = res.envelope_positive[-500:]
    assert np.all(np.diff(env) <= 0)
    assert res.rated_peak < env[-1] < res.inrush_peak


def test_observed_max(squirrel_cage):
    res = synthesize(squirrel_cage, SimulationRequest(switching_angle_deg=45))
    post = res.post_connection_slice()
    rounded_max = max(np.max(np.abs(res.phase_u[post])),
                      np.max(np.abs(res.phase_v[post])),
                      np.max(np.abs(res.phase_w[post])))
    assert res.observed_max_instantaneous == pytest.approx(rounded_max, abs=0.05)
    assert res.peak_ratio == pytest.approx(
        res.observed_max_instantaneous / res.rated_peak)


def test_sample_count_boundary(squirrel_cage):
    req = SimulationRequest(view_cycles=30, stop_time_ms=100, frequency_hz=50)
    res = synthesize(squirrel_cage, req)
    expected = math.floor(((100 / 1000.0) + 30 * (1.0 / 50)) / ((1.0 / 50) / 100)) + 1
    assert res.N == expected == sample_count(req)


def test_output_rounding(squirrel_cage):
    res = synthesize(squirrel_cage, SimulationRequest(frequency_hz=60, switching_angle_deg=30))
    assert np.array_equal(res.phase_u, np.round(res.phase_u, 1))
    assert np.array_equal(res.time_ms, np.round(res.time_ms, 2))


def test_idempotent(squirrel_cage):
    req = SimulationRequest(switching_angle_deg=120, stop_time_ms=10)
    a = synthesize(squirrel_cage, req)
    b = synthesize(squirrel_cage, req)
    assert np.array_equal(a.matrix(), b.matrix())
    assert a.observed_max_instantaneous == b.observed_max_instantaneous
    assert a.samples == b.samples


def test_ac_time_constant():
    assert ac_time_constant(lookup("squirrelCage")) == 0.3
    assert ac_time_constant(lookup("woundRotor")) == 0.3
    assert ac_time_constant(lookup("salientPole")) == 0.5
    assert ac_time_constant(lookup("cylindrical")) == 0.5


def test_synchronous_decays_slower():
    req = SimulationRequest(stop_time_ms=0, view_cycles=30, switching_angle_deg=0)
    sync = synthesize(lookup("salientPole"), req)
    ind = synthesize(lookup("squirrelCage"), req)
    # same rated peak, normalise by the inrush multiplier
    k_sync = (sync.envelope_positive[-1] / sync.rated_peak - 1) / 4
    k_ind = (ind.envelope_positive[-1] / ind.rated_peak - 1) / 5
    assert k_sync > k_ind


def test_rated_current_scales_with_voltage():
    lo = rated_current(SimulationRequest(rated_voltage_v=200))
    hi = rated_current(SimulationRequest(rated_voltage_v=400))
    assert lo == pytest.approx(2 * hi)


@pytest.mark.parametrize("changes, field", [
    ({"frequency_hz": 0}, "frequency_hz"),
    ({"view_cycles": 0}, "view_cycles"),
    ({"rated_voltage_v": -400}, "rated_voltage_v"),
    ({"dc_time_constant_ms": 0}, "dc_time_constant_ms"),
])
def test_invalid_request(squirrel_cage, changes, field):
    with pytest.raises(InvalidParameter) as exc:
        synthesize(squirrel_cage, SimulationRequest(**changes))
    assert exc.value.field == field


def test_invalid_profile():
    with pytest.raises(InvalidParameter) as exc:
        synthesize("squirrelCage", SimulationRequest())
    assert exc.value.field == "profile"
