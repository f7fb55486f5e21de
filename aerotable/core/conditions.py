"""Flight conditions for a single aerodynamic evaluation."""

from __future__ import annotations

import copy
import math
from typing import Any

from aerotable.utils.constants import BETA_MIN, SPEED_OF_SOUND_SL


class FlightConditions:
    """Mutable bundle of the conditions an aerodynamic calculator needs.

    The angle of attack is held as a (sin, cos) pair so that the direction
    is well-defined at zero magnitude; ``(0, 1)`` is zero angle of attack.

    Args:
        configuration: Vehicle the conditions apply to.  Only its
            ``reference_length`` is read, if present.
    """

    def __init__(self, configuration: Any = None):
        self.reference_length: float = getattr(configuration, "reference_length", 0.0)
        self.theta = 0.0  # rad, attitude angle
        self.mach = 0.3
        self.roll_rate = 0.0  # rad/s
        self.sin_aoa = 0.0
        self.cos_aoa = 1.0

    def set_theta(self, theta: float) -> None:
        self.theta = float(theta)

    def set_mach(self, mach: float) -> None:
        mach = float(mach)
        if not math.isfinite(mach) or mach < 0:
            raise ValueError(f"Mach number must be finite and non-negative, got {mach}")
        self.mach = mach

    def set_roll_rate(self, roll_rate: float) -> None:
        self.roll_rate = float(roll_rate)

    def set_aoa(self, sin_aoa: float, cos_aoa: float) -> None:
        """Set the angle of attack from its sine/cosine pair.

        The pair is normalised; a zero-length pair is rejected.
        """
        norm = math.hypot(sin_aoa, cos_aoa)
        if norm == 0 or not math.isfinite(norm):
            raise ValueError(f"Invalid angle-of-attack pair ({sin_aoa}, {cos_aoa})")
        self.sin_aoa = sin_aoa / norm
        self.cos_aoa = cos_aoa / norm

    @property
    def aoa(self) -> float:
        """Angle of attack [rad]."""
        return math.atan2(self.sin_aoa, self.cos_aoa)

    @property
    def beta(self) -> float:
        """Compressibility factor sqrt(|1 - M²|), floored near Mach 1."""
        return math.sqrt(max(abs(1.0 - self.mach**2), BETA_MIN**2))

    @property
    def velocity(self) -> float:
        """Airspeed at sea-level speed of sound [m/s]."""
        return self.mach * SPEED_OF_SOUND_SL

    def copy(self) -> FlightConditions:
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"FlightConditions(mach={self.mach:.3f}, aoa={math.degrees(self.aoa):.2f}deg, "
            f"theta={self.theta:.3f}, roll_rate={self.roll_rate:.3f})"
        )
