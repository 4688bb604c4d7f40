"""
Inrush current synthesis and the SimulationBuilder front end.

One-shot call:

    result = synthesize(lookup("squirrelCage"), SimulationRequest(stop_time_ms=0))

Fluent API with a single result slot (recomputed only when inputs change):

    builder = SimulationBuilder().motor("woundRotor").request(SimulationRequest())
    result = builder.update(switching_angle_deg=90).run()
"""
from __future__ import annotations

import logging
from dataclasses import fields, replace
from typing import Optional

import numpy as np

from core.catalog import MotorProfile, lookup
from core.errors import InvalidParameter
from core.parameters import (
    POWER_FACTOR,
    TAU_AC_INDUCTION,
    TAU_AC_SYNCHRONOUS,
    SimulationRequest,
)
from core.results import SimulationResult
from core.state import SAMPLE_SIZE, TIME_MS, PHASE_U, PHASE_W, ENV_POS, ENV_NEG, DC_U, RATED_PEAK
from core.timebase import make_time_grid
from envelopes import InrushDecayEnvelope
from scenarios.base import Scenario
from transients import DecayingDcOffset, ThreePhaseInrushCurrent

logger = logging.getLogger(__name__)


def rated_current(request: SimulationRequest) -> float:
    """Rated RMS line current of a balanced three-phase motor, A"""
    return (request.rated_power_kw * 1000.0) / (
        np.sqrt(3) * request.rated_voltage_v * POWER_FACTOR
    )


def ac_time_constant(profile: MotorProfile) -> float:
    """Decay time constant of the AC envelope, s"""
    return TAU_AC_SYNCHRONOUS if profile.is_synchronous else TAU_AC_INDUCTION


def synthesize(profile: MotorProfile, request: SimulationRequest) -> SimulationResult:
    """
    Build the three-phase inrush transient for one motor and one request.

    Currents are zero before the connection instant (stop_time_ms). After it
    every phase carries a sinusoid with decaying amplitude plus a decaying
    DC offset set by the switching angle. Values are computed in full
    precision and rounded only when stored in the result (currents to
    0.1 A, time to 0.01 ms); summary scalars are not rounded.

    Raises:
        InvalidParameter: profile or request outside its valid domain.
    """
    if not isinstance(profile, MotorProfile):
        raise InvalidParameter("profile", profile, "must be a MotorProfile")
    if not isinstance(request, SimulationRequest):
        raise InvalidParameter("request", request, "must be a SimulationRequest")
    request.validate()

    # 1. Rated values
    i_rated = rated_current(request)
    i_peak = i_rated * np.sqrt(2)
    inrush_peak = i_peak * profile.inrush_multiplier

    # 2. Current components
    envelope = InrushDecayEnvelope(
        rated_peak=i_peak,
        inrush_multiplier=profile.inrush_multiplier,
        tau=ac_time_constant(profile),
    )
    ac = ThreePhaseInrushCurrent(envelope, request.frequency_hz, request.phi0)
    dc = DecayingDcOffset(envelope, request.phi0, request.tau_dc)

    logger.debug("%s\n%s", profile.id, request.info())
    logger.debug("%s", ac.describe())
    logger.debug("%s", dc.describe())

    # 3. Time grid; samples before k0 are the dead time
    t = make_time_grid(request)
    stop = request.stop_time_s
    k0 = int(np.searchsorted(t, stop, side="left"))
    t_run = t[k0:] - stop

    # 4. Post-connection waveforms
    i_dc = dc(t_run)
    i_phase = ac(t_run) + i_dc
    env_pos = envelope(t_run) + np.abs(i_dc[0])

    observed_max = float(np.max(np.abs(i_phase))) if t_run.size else 0.0

    # 5. Output boundary
    m = np.zeros((SAMPLE_SIZE, t.size))
    m[TIME_MS] = np.round(t * 1000.0, 2)
    m[RATED_PEAK] = np.round(i_peak, 1)
    m[PHASE_U:PHASE_W + 1, k0:] = np.round(i_phase, 1)
    m[ENV_POS, k0:] = np.round(env_pos, 1)
    m[ENV_NEG, k0:] = -m[ENV_POS, k0:]
    m[DC_U, k0:] = np.round(i_dc[0], 1)

    result = SimulationResult.from_matrix(
        m,
        rated_current_rms=float(i_rated),
        rated_peak=float(i_peak),
        inrush_peak=float(inrush_peak),
        observed_max_instantaneous=observed_max,
        stop_time_ms=request.stop_time_ms,
        connection_index=k0,
        motor_id=profile.id,
        request=request,
    )
    logger.info(
        "%s: %d samples, connection at %d, i_max = %.1f A (%.2f x rated peak)",
        profile.id, result.N, k0, observed_max, result.peak_ratio,
    )
    return result


_REQUEST_FIELDS = frozenset(f.name for f in fields(SimulationRequest))


class SimulationBuilder:
    """
    Interactive front end over synthesize().

    Holds the current motor selection and request, and one result slot.
    run() recomputes only when (motor_id, request) differs from the
    inputs of the stored result; the slot is replaced as a whole.
    """

    def __init__(self, motor_id: str = "squirrelCage"):
        self._motor_id = motor_id
        self._request: Optional[SimulationRequest] = None
        self._key: Optional[tuple[str, SimulationRequest]] = None
        self._result: Optional[SimulationResult] = None

    # Fluent API
    def motor(self, motor_id: str) -> SimulationBuilder:
        """Choose motor type from the catalog"""
        self._motor_id = motor_id
        return self

    def request(self, request: SimulationRequest) -> SimulationBuilder:
        """Set the full request"""
        self._request = request
        return self

    def update(self, **changes) -> SimulationBuilder:
        """Change individual request fields"""
        for name, value in changes.items():
            if name not in _REQUEST_FIELDS:
                raise InvalidParameter(name, value, "unknown request field")
        self._request = replace(self._current_request(), **changes)
        return self

    def scenario(self, scenario: Scenario) -> SimulationBuilder:
        """Take motor and request from a preset scenario"""
        logger.info("Scenario: %s", scenario.describe())
        self._motor_id = scenario.motor_id()
        self._request = scenario.request()
        return self

    @property
    def result(self) -> Optional[SimulationResult]:
        """Last computed result, None before the first run()"""
        return self._result

    # Execution
    def run(self) -> SimulationResult:
        """Return the result for the current inputs"""
        request = self._current_request()
        key = (self._motor_id, request)
        if self._result is not None and key == self._key:
            logger.debug("Inputs unchanged, reusing result for %s", self._motor_id)
            return self._result

        result = synthesize(lookup(self._motor_id), request)
        self._key, self._result = key, result
        return result

    def _current_request(self) -> SimulationRequest:
        return self._request if self._request is not None else SimulationRequest()
