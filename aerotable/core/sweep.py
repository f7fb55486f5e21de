"""Mach sweep table generation for AeroTable.

Iterates a fixed vehicle configuration over a range of Mach numbers at a
single angle of attack and collects drag, centre of pressure and normal
force coefficients into a table.  The table is meant for comparison
against published wind-tunnel or flight-test curves (C_D vs Mach etc.).

Typical use::

    calculator = get_calculator("barrowman")
    table = build_table(config, calculator, 0.0, 3.01, 0.01)
    write_report(table, "aero.csv")
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np

from aerotable.core.calculator import AerodynamicCalculator
from aerotable.core.conditions import FlightConditions
from aerotable.utils.validation import WarningSet

logger = logging.getLogger(__name__)

COLUMNS = ("mach", "cd", "cp", "cn", "cn_alpha")


class InvalidRangeError(ValueError):
    """Raised when sweep bounds cannot produce a finite, increasing range."""


@dataclass(frozen=True)
class AerodynamicTable:
    """Ordered rows of ``[mach, cd, cp, cn, cn_alpha]``, ascending in Mach."""

    rows: tuple[tuple[float, ...], ...] = ()

    def __post_init__(self) -> None:
        for i, row in enumerate(self.rows):
            if len(row) != len(COLUMNS):
                raise ValueError(f"Row {i} has {len(row)} fields, expected {len(COLUMNS)}")

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[tuple[float, ...]]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> tuple[float, ...]:
        return self.rows[index]

    def as_array(self) -> np.ndarray:
        """Return the table as an (N, 5) float array."""
        return np.array(self.rows, dtype=float).reshape(len(self.rows), len(COLUMNS))

    def column(self, name: str) -> np.ndarray:
        """Return one column by name (see ``COLUMNS``)."""
        if name not in COLUMNS:
            raise KeyError(f"Column '{name}' not found. Available: {list(COLUMNS)}")
        return self.as_array()[:, COLUMNS.index(name)]


def mach_range(start: float, stop: float, step: float) -> np.ndarray:
    """Create the range of Mach values to iterate over.

    The sample count is ``int((stop - start) / step)``, truncated toward
    zero, so ``stop`` is exclusive and a trailing partial step is dropped:
    ``mach_range(0.0, 2.0, 0.5)`` gives ``[0.0, 0.5, 1.0, 1.5]``.  Pass a
    ``stop`` slightly past the last wanted value (e.g. 3.01 for 3.00).

    Args:
        start: First Mach number.
        stop: Exclusive upper bound.
        step: Increment between samples.

    Returns:
        Array of ``start + step * i``.

    Raises:
        InvalidRangeError: If a bound is not finite, ``step <= 0`` or
            ``stop <= start``.
    """
    if not all(math.isfinite(v) for v in (start, stop, step)):
        raise InvalidRangeError(f"Range bounds must be finite: ({start}, {stop}, {step})")
    if step <= 0:
        raise InvalidRangeError(f"Step must be positive, got {step}")
    if stop <= start:
        raise InvalidRangeError(f"Stop ({stop}) must be greater than start ({start})")

    size = int((stop - start) / step)
    return start + step * np.arange(size, dtype=float)


def build_table(
    configuration: Any,
    calculator: AerodynamicCalculator,
    mach_start: float,
    mach_stop: float,
    mach_step: float,
    aoa: float = 0.0,
) -> AerodynamicTable:
    """Evaluate the calculator at each Mach number and collect the results.

    One FlightConditions instance is created per call and only its Mach
    number changes between samples.  Attitude and roll rate are zero and the
    angle of attack is fixed for the whole sweep.

    Each evaluation receives a fresh WarningSet which is discarded after
    the call; warnings never change the table and are only echoed to the
    debug log.

    Args:
        configuration: Vehicle description, passed through unmodified.
        calculator: Aerodynamic calculator to evaluate.
        mach_start: First Mach number.
        mach_stop: Exclusive upper Mach bound (see ``mach_range``).
        mach_step: Mach increment.
        aoa: Angle of attack [rad], held constant.

    Returns:
        AerodynamicTable with one row per Mach sample.

    Raises:
        InvalidRangeError: For degenerate sweep bounds or a negative start
            Mach number.
        CalculatorFailure: If any sample fails; no partial table is returned.
    """
    machs = mach_range(mach_start, mach_stop, mach_step)
    if mach_start < 0:
        raise InvalidRangeError(f"Mach numbers cannot be negative, start is {mach_start}")

    conditions = FlightConditions(configuration)
    conditions.set_theta(0.0)
    conditions.set_mach(0.0)
    conditions.set_roll_rate(0.0)
    conditions.set_aoa(math.sin(aoa), math.cos(aoa))

    logger.debug(
        "Sweeping %d Mach samples [%g, %g) step %g with %s",
        len(machs), mach_start, mach_stop, mach_step, calculator.name,
    )

    rows: list[tuple[float, ...]] = []
    for mach in machs:
        conditions.set_mach(mach)
        warnings = WarningSet()
        forces = calculator.get_aerodynamic_forces(configuration, conditions, warnings)

        for w in warnings:
            logger.debug("Ignored warning at Mach %.3f: %s", mach, w.message)

        rows.append((
            float(mach),
            float(forces.cd),
            forces.cp_distance,
            float(forces.cn),
            float(forces.cn_alpha),
        ))

    return AerodynamicTable(rows=tuple(rows))
