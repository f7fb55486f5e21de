"""Lookup of the aerodynamic calculators shipped with AeroTable."""

from __future__ import annotations

from aerotable.core.barrowman import BarrowmanCalculator
from aerotable.core.calculator import AerodynamicCalculator

_CALCULATORS: dict[str, type[AerodynamicCalculator]] = {
    BarrowmanCalculator.name: BarrowmanCalculator,
}


def list_calculators() -> list[str]:
    """Return the names of all available calculators."""
    return sorted(_CALCULATORS.keys())


def get_calculator(name: str) -> AerodynamicCalculator:
    """Instantiate a calculator by name.

    Raises:
        KeyError: If no calculator with that name exists.
    """
    key = name.lower()
    if key not in _CALCULATORS:
        raise KeyError(f"Calculator '{name}' not found. Available: {list_calculators()}")
    return _CALCULATORS[key]()
