"""Delimited text reports of aerodynamic sweep tables.

Format::

    # Mach, CD, CP [meters, 0=nosecone], CN, CNa
    0.000,0.512345,0.912345,0.000000,9.876543
    0.010,...

Mach is written with 3 decimals, every other field with 6.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence

import numpy as np

from aerotable.core.calculator import AerodynamicCalculator
from aerotable.core.config import SweepSettings
from aerotable.core.sweep import COLUMNS, AerodynamicTable, build_table
from aerotable.utils.constants import DEG_TO_RAD

logger = logging.getLogger(__name__)

HEADER = "# Mach, CD, CP [meters, 0=nosecone], CN, CNa"


def format_row(row: Sequence[float]) -> str:
    """Format one table row as a comma separated line (no newline)."""
    if not row:
        return ""
    mach, *values = row
    return ",".join([f"{mach:.3f}"] + [f"{v:.6f}" for v in values])


def write_report(table: AerodynamicTable, path: str | Path) -> Path:
    """Write a table to disk, overwriting any existing file.

    Args:
        table: Completed sweep table.
        path: Destination file.

    Returns:
        The path written.

    Raises:
        OSError: If the file cannot be written.  Any partially written file
            is removed before the error propagates.
    """
    path = Path(path)
    f = open(path, "w", encoding="utf-8", newline="\n")
    try:
        with f:
            f.write(HEADER + "\n")
            for row in table:
                f.write(format_row(row) + "\n")
    except Exception:
        path.unlink(missing_ok=True)
        raise

    logger.info("Wrote %d rows to %s", len(table), path)
    return path


def read_report(path: str | Path) -> AerodynamicTable:
    """Read a report written by ``write_report`` back into a table."""
    data = np.loadtxt(Path(path), delimiter=",", comments="#", ndmin=2)
    if data.size == 0:
        return AerodynamicTable()
    if data.shape[1] != len(COLUMNS):
        raise ValueError(f"Expected {len(COLUMNS)} columns in {path}, found {data.shape[1]}")
    return AerodynamicTable(rows=tuple(tuple(float(v) for v in row) for row in data))


def generate_report(
    configuration: Any,
    calculator: AerodynamicCalculator,
    path: str | Path,
    settings: SweepSettings | None = None,
) -> AerodynamicTable:
    """Build a sweep table and write it to ``path`` in one call.

    Args:
        configuration: Vehicle description.
        calculator: Aerodynamic calculator.
        path: Destination file, overwritten if it exists.
        settings: Optional ``SweepSettings``; defaults are used when omitted.

    Returns:
        The table that was written.
    """
    settings = settings or SweepSettings()
    table = build_table(
        configuration,
        calculator,
        settings.mach_start,
        settings.mach_stop,
        settings.mach_step,
        aoa=settings.aoa * DEG_TO_RAD,
    )
    write_report(table, path)
    return table
