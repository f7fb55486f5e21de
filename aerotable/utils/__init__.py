"""Utility modules for AeroTable."""

from aerotable.utils.constants import DEG_TO_RAD, RAD_TO_DEG, SPEED_OF_SOUND_SL
from aerotable.utils.validation import Severity, ValidationResult, WarningSet

__all__ = [
    "DEG_TO_RAD",
    "RAD_TO_DEG",
    "SPEED_OF_SOUND_SL",
    "Severity",
    "ValidationResult",
    "WarningSet",
]
