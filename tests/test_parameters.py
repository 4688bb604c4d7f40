import math

import pytest

from core.errors import InvalidParameter
from core.parameters import SimulationRequest
from core.timebase import make_time_grid, sample_count


def test_defaults_are_valid():
    r = SimulationRequest()
    assert r.validate() is r
    assert r.rated_power_kw == 7.5
    assert r.rated_voltage_v == 200
    assert r.frequency_hz == 50
    assert r.view_cycles == 10


def test_derived_values():
    r = SimulationRequest(frequency_hz=60, switching_angle_deg=90,
                          dc_time_constant_ms=40, stop_time_ms=20)
    assert r.omega == pytest.approx(2 * math.pi * 60)
    assert r.period == pytest.approx(1 / 60)
    assert r.dt == pytest.approx(1 / 6000)
    assert r.phi0 == pytest.approx(math.pi / 2)
    assert r.tau_dc == pytest.approx(0.04)
    assert r.stop_time_s == pytest.approx(0.02)


@pytest.mark.parametrize("field, value", [
    ("rated_power_kw", 0.5),
    ("rated_power_kw", 40.0),
    ("rated_power_kw", float("nan")),
    ("rated_power_kw", "7.5"),
    ("rated_voltage_v", 0),
    ("rated_voltage_v", 230),
    ("frequency_hz", 0),
    ("frequency_hz", -50),
    ("frequency_hz", 400),
    ("switching_angle_deg", -1.0),
    ("switching_angle_deg", 360.0),
    ("dc_time_constant_ms", 5.0),
    ("dc_time_constant_ms", 250.0),
    ("stop_time_ms", -1.0),
    ("stop_time_ms", 101.0),
    ("view_cycles", 0),
    ("view_cycles", 2),
    ("view_cycles", 31),
    ("view_cycles", 5.5),
    ("view_cycles", True),
])
def test_invalid_field(field, value):
    r = SimulationRequest(**{field: value})
    with pytest.raises(InvalidParameter) as exc:
        r.validate()
    assert exc.value.field == field
    assert field in str(exc.value)


@pytest.mark.parametrize("field, value", [
    ("rated_power_kw", 0.75),
    ("rated_power_kw", 37),
    ("rated_voltage_v", 6600),
    ("frequency_hz", 60),
    ("switching_angle_deg", 359.9),
    ("dc_time_constant_ms", 10),
    ("dc_time_constant_ms", 200),
    ("stop_time_ms", 0),
    ("stop_time_ms", 100),
    ("view_cycles", 3),
    ("view_cycles", 30),
])
def test_boundary_values_accepted(field, value):
    SimulationRequest(**{field: value}).validate()


@pytest.mark.parametrize("angle, hint", [
    (0, "minimum DC"), (180, "minimum DC"),
    (90, "maximum DC"), (270, "maximum DC"),
    (45, ""),
])
def test_dc_injection_hint(angle, hint):
    assert SimulationRequest(switching_angle_deg=angle).dc_injection_hint == hint


def test_sample_count_formula():
    r = SimulationRequest(stop_time_ms=100, view_cycles=30, frequency_hz=50)
    expected = math.floor((100 / 1000.0 + 30 * (1.0 / 50)) / ((1.0 / 50) / 100)) + 1
    assert sample_count(r) == expected
    assert expected in (3500, 3501)


def test_time_grid_uniform():
    r = SimulationRequest(frequency_hz=60, stop_time_ms=0, view_cycles=3)
    t = make_time_grid(r)
    assert t[0] == 0.0
    assert len(t) == sample_count(r)
    assert t[-1] <= r.view_cycles * r.period + 1e-12
    assert t[1] - t[0] == pytest.approx(r.dt)


def test_request_is_hashable():
    assert hash(SimulationRequest()) == hash(SimulationRequest())
    assert SimulationRequest() != SimulationRequest(view_cycles=11)
