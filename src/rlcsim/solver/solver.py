# src/rlcsim/solver/solver.py
import logging

import numpy as np

from ..data_structures import CircuitParameters
from .results import CircuitResults

logger = logging.getLogger(__name__)


def solve(params: CircuitParameters) -> CircuitResults:
    """
    Computes the steady-state response of a series RLC circuit.

    The function is pure: it reads nothing but `params`, writes nothing, and
    can be called concurrently on distinct parameter records. It performs no
    validation of its own. Every denominator below is positive for a
    valid record, but products of extreme values can still underflow or
    overflow; `collector.check_solvable` screens those out before a solve.

    Args:
        params: The validated circuit inputs, in SI base units.

    Returns:
        A `CircuitResults` snapshot of all derived quantities.
    """
    r = params.resistance
    omega = 2.0 * np.pi * params.frequency

    x_c = 1.0 / (omega * params.capacitance)
    x_l = omega * params.inductance
    x_net = x_l - x_c
    z_mag = np.hypot(r, x_net)

    i_rms = params.supply_voltage / z_mag
    p_dissipated = i_rms ** 2 * r

    f_res = 1.0 / (2.0 * np.pi * np.sqrt(params.inductance * params.capacitance))

    # R > 0 keeps the angle strictly inside (-90, 90) degrees.
    phase_rad = np.arctan2(x_net, r)
    # Same value as cos(phase_rad); exactly 1.0 when x_net == 0.
    power_factor = r / z_mag

    logger.debug(
        f"Solved series RLC at {params.frequency:.6g} Hz: "
        f"X_C={x_c:.6g} ohm, X_L={x_l:.6g} ohm, |Z|={z_mag:.6g} ohm, I={i_rms:.6g} A"
    )

    return CircuitResults(
        capacitive_reactance=float(x_c),
        inductive_reactance=float(x_l),
        impedance_magnitude=float(z_mag),
        rms_current=float(i_rms),
        voltage_across_resistor=float(i_rms * r),
        voltage_across_inductor=float(i_rms * x_l),
        voltage_across_capacitor=float(i_rms * x_c),
        power_dissipated=float(p_dissipated),
        resonant_frequency=float(f_res),
        phase_angle_degrees=float(np.degrees(phase_rad)),
        power_factor=float(power_factor),
    )
