"""Aerodynamic calculator interface for AeroTable.

Concrete calculators subclass ``AerodynamicCalculator``.  The sweep builder
only ever talks to this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from aerotable.core.conditions import FlightConditions
from aerotable.utils.validation import WarningSet


class CalculatorFailure(Exception):
    """Raised when a calculator cannot produce a result for a flight condition."""


@dataclass(frozen=True)
class AerodynamicForces:
    """Coefficients for one flight condition."""

    cd: float = 0.0  # total drag coefficient
    cn: float = 0.0  # normal force coefficient
    cn_alpha: float = 0.0  # normal force coefficient slope [1/rad]
    cp: np.ndarray = field(default_factory=lambda: np.zeros(3))  # m from nose tip

    @property
    def cp_distance(self) -> float:
        """Magnitude of the center-of-pressure position [m]."""
        return float(np.linalg.norm(self.cp))


class AerodynamicCalculator(ABC):
    """Abstract base class for aerodynamic force calculators."""

    name: str = "unnamed_calculator"
    description: str = ""

    @abstractmethod
    def get_aerodynamic_forces(
        self,
        configuration: Any,
        conditions: FlightConditions,
        warnings: WarningSet,
    ) -> AerodynamicForces:
        """Compute aerodynamic coefficients.

        Must be deterministic for fixed inputs and must not retain or modify
        ``conditions``.

        Args:
            configuration: Vehicle description, read-only.
            conditions: Flight conditions for this evaluation.
            warnings: Sink for advisory modelling warnings.

        Returns:
            A fresh AerodynamicForces instance.

        Raises:
            CalculatorFailure: If no result can be produced.
        """
        ...
