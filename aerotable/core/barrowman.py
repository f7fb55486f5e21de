"""Simplified extended-Barrowman aerodynamic calculator.

Normal force and centre of pressure follow Barrowman's component build-up
(nose cone + fin set with body interference).  Drag is a sum of skin
friction, nose pressure, base and fin thickness drag using the usual
semi-empirical fits found in model-rocketry literature.

Sources:
- J. Barrowman, "The Practical Calculation of the Aerodynamic
  Characteristics of Slender Finned Vehicles", 1967.
- S. Niskanen, "Development of an Open Source model rocket simulation
  software", 2009.
"""

from __future__ import annotations

import math

import numpy as np

from aerotable.core.calculator import (
    AerodynamicCalculator,
    AerodynamicForces,
    CalculatorFailure,
)
from aerotable.core.conditions import FlightConditions
from aerotable.core.vehicle import NOSE_CP_FRACTION, NoseShape, RocketConfiguration
from aerotable.utils.constants import DEG_TO_RAD, KINEMATIC_VISCOSITY_SL
from aerotable.utils.validation import WarningSet, validate_vehicle


NOSE_CN_ALPHA = 2.0  # 1/rad, independent of shape for slender bodies

# Supersonic pressure drag relative to a cone of the same half-angle
NOSE_PRESSURE_FACTOR = {
    NoseShape.CONICAL: 1.0,
    NoseShape.OGIVE: 0.7,
    NoseShape.PARABOLIC: 0.6,
    NoseShape.ELLIPTICAL: 0.9,
}

TRANSONIC_LOW = 0.8
TRANSONIC_HIGH = 1.2
MAX_MACH = 5.0
MAX_AOA = 10.0 * DEG_TO_RAD

_CRITICAL_REYNOLDS = 1.0e4
_LOW_REYNOLDS_CF = 1.48e-2


def compressibility_factor(mach: float) -> float:
    """Lift-slope scaling: Prandtl-Glauert below the transonic band,
    Ackeret above it, held constant in between."""
    if mach < TRANSONIC_LOW:
        return 1.0 / math.sqrt(1.0 - mach**2)
    plateau = 1.0 / math.sqrt(1.0 - TRANSONIC_LOW**2)
    if mach <= TRANSONIC_HIGH:
        return plateau
    return plateau * math.sqrt(TRANSONIC_HIGH**2 - 1.0) / math.sqrt(mach**2 - 1.0)


def stagnation_pressure_coefficient(mach: float) -> float:
    """Stagnation pressure over dynamic pressure."""
    if mach < 1.0:
        return 1.0 + mach**2 / 4.0 + mach**4 / 40.0
    return 1.84 - 0.76 / mach**2 + 0.166 / mach**4 + 0.035 / mach**6


def base_drag_coefficient(mach: float) -> float:
    if mach < 1.0:
        return 0.12 + 0.13 * mach**2
    return 0.25 / mach


def skin_friction_coefficient(reynolds: float, mach: float) -> float:
    """Turbulent flat-plate skin friction with compressibility correction."""
    if reynolds < _CRITICAL_REYNOLDS:
        cf = _LOW_REYNOLDS_CF
    else:
        cf = 1.0 / (1.50 * math.log(reynolds) - 5.6) ** 2
    if mach < 1.0:
        return cf * (1.0 - 0.1 * mach**2)
    return cf / (1.0 + 0.15 * mach**2) ** 0.58


class BarrowmanCalculator(AerodynamicCalculator):
    """Extended Barrowman method for a nose / body / fin-set vehicle."""

    name = "barrowman"
    description = "Extended Barrowman method (nose, body tube, trapezoidal fins)"

    def get_aerodynamic_forces(
        self,
        configuration: RocketConfiguration,
        conditions: FlightConditions,
        warnings: WarningSet,
    ) -> AerodynamicForces:
        check = validate_vehicle(configuration)
        if not check.is_valid:
            details = "; ".join(m.message for m in check.errors)
            raise CalculatorFailure(f"Invalid vehicle '{configuration.name}': {details}")

        mach = conditions.mach
        self._check_conditions(conditions, warnings)

        # Normal force build-up
        nose_cp = NOSE_CP_FRACTION[configuration.nose.shape] * configuration.nose.length
        fin_cna, fin_cp = self._fin_normal_force(configuration, mach)

        cn_alpha = NOSE_CN_ALPHA + fin_cna
        cp_x = (NOSE_CN_ALPHA * nose_cp + fin_cna * fin_cp) / cn_alpha
        cn = cn_alpha * conditions.aoa

        cd = (
            self._friction_drag(configuration, conditions)
            + self._nose_pressure_drag(configuration, mach)
            + self._base_drag(configuration, mach)
            + self._fin_thickness_drag(configuration, mach)
        )

        if not all(math.isfinite(v) for v in (cd, cn, cn_alpha, cp_x)):
            raise CalculatorFailure(f"Non-finite coefficients at {conditions!r}")

        return AerodynamicForces(
            cd=cd,
            cn=cn,
            cn_alpha=cn_alpha,
            cp=np.array([cp_x, 0.0, 0.0]),
        )

    # --- Conditions ---

    @staticmethod
    def _check_conditions(conditions: FlightConditions, warnings: WarningSet) -> None:
        mach = conditions.mach
        if TRANSONIC_LOW < mach < TRANSONIC_HIGH:
            warnings.warning(
                "mach",
                f"Mach {mach:.3f} is transonic; coefficients are interpolated",
                value=mach,
            )
        if mach > MAX_MACH:
            warnings.warning(
                "mach",
                f"Mach {mach:.2f} exceeds the model's validated range",
                value=mach,
                limit=MAX_MACH,
            )
        if abs(conditions.aoa) > MAX_AOA:
            warnings.warning(
                "aoa",
                f"Angle of attack {math.degrees(conditions.aoa):.1f} deg is outside "
                "the linear normal-force region",
                value=conditions.aoa,
                limit=MAX_AOA,
            )

    # --- Normal force ---

    @staticmethod
    def _fin_normal_force(config: RocketConfiguration, mach: float) -> tuple[float, float]:
        """Return (CN_alpha, CP position) of the fin set including body interference."""
        fins = config.fins
        if fins is None or fins.count == 0:
            return 0.0, 0.0

        d = config.reference_diameter
        r = config.body.diameter / 2.0
        s = fins.semi_span
        cr = fins.root_chord
        ct = fins.tip_chord
        lf = fins.mid_chord_length

        cna = 4.0 * fins.count * (s / d) ** 2 / (1.0 + math.sqrt(1.0 + (2.0 * lf / (cr + ct)) ** 2))
        interference = 1.0 + r / (s + r)
        cna *= interference * compressibility_factor(mach)

        cp = (
            config.fin_position
            + fins.sweep_length / 3.0 * (cr + 2.0 * ct) / (cr + ct)
            + (cr + ct - cr * ct / (cr + ct)) / 6.0
        )
        return cna, cp

    # --- Drag ---

    @staticmethod
    def _friction_drag(config: RocketConfiguration, conditions: FlightConditions) -> float:
        length = config.length
        reynolds = conditions.velocity * length / KINEMATIC_VISCOSITY_SL
        cf = skin_friction_coefficient(reynolds, conditions.mach)

        d = config.body.diameter
        r_nose = config.nose.diameter / 2.0
        nose_wetted = math.pi * r_nose * math.hypot(config.nose.length, r_nose)
        body_wetted = math.pi * d * config.body.length
        fineness = length / config.reference_diameter
        body_cd = cf * (1.0 + 1.0 / (2.0 * fineness)) * (nose_wetted + body_wetted)

        fin_cd = 0.0
        fins = config.fins
        if fins is not None and fins.count > 0:
            mac = 0.5 * (fins.root_chord + fins.tip_chord)
            fin_wetted = 2.0 * fins.count * fins.planform_area
            fin_cd = cf * (1.0 + 2.0 * fins.thickness / mac) * fin_wetted

        return (body_cd + fin_cd) / config.reference_area

    @staticmethod
    def _nose_pressure_drag(config: RocketConfiguration, mach: float) -> float:
        """Zero subsonic; conical estimate supersonic, blended in between."""
        if mach <= TRANSONIC_LOW:
            return 0.0

        sin_eps = math.sin(config.nose.half_angle)
        factor = NOSE_PRESSURE_FACTOR[config.nose.shape]

        def supersonic(m: float) -> float:
            return factor * (2.1 * sin_eps**2 + 0.5 * sin_eps / math.sqrt(m**2 - 1.0))

        blend_end = 1.3
        if mach >= blend_end:
            return supersonic(mach)
        return supersonic(blend_end) * (mach - TRANSONIC_LOW) / (blend_end - TRANSONIC_LOW)

    @staticmethod
    def _base_drag(config: RocketConfiguration, mach: float) -> float:
        base_ratio = (config.body.diameter / config.reference_diameter) ** 2
        return base_drag_coefficient(mach) * base_ratio

    @staticmethod
    def _fin_thickness_drag(config: RocketConfiguration, mach: float) -> float:
        """Rounded leading edge and square trailing edge pressure drag."""
        fins = config.fins
        if fins is None or fins.count == 0 or fins.thickness == 0:
            return 0.0

        edge_area = fins.count * fins.thickness * fins.semi_span
        sweep = math.atan2(fins.sweep_length, fins.semi_span)
        leading = 0.85 * stagnation_pressure_coefficient(mach) * math.cos(sweep) ** 2
        trailing = base_drag_coefficient(mach)
        return (leading + trailing) * edge_area / config.reference_area
