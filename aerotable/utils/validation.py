"""Design rule checking and advisory warning collection for AeroTable."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aerotable.core.vehicle import RocketConfiguration


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None
    limit: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self):
        return iter(self.messages)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


class WarningSet(ValidationResult):
    """Advisory sink handed to an aerodynamic calculator for one evaluation.

    Calculators append modelling caveats here (transonic regime, large angle
    of attack, ...) instead of failing.  Unrecoverable problems are raised as
    ``CalculatorFailure`` and never recorded here.
    """


# --- Common validators ---


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Validate that a value is strictly positive."""
    if value <= 0:
        result.error(name, f"{name} must be positive, got {value}")


def validate_range(
    name: str,
    value: float,
    low: float,
    high: float,
    result: ValidationResult,
    severity: Severity = Severity.ERROR,
) -> None:
    """Validate that a value falls within [low, high]."""
    if value < low or value > high:
        result.add(severity, name, f"{name} = {value} is outside [{low}, {high}]")


def validate_vehicle(config: RocketConfiguration) -> ValidationResult:
    """Run design rule checks on a rocket configuration.

    Errors make the configuration unusable for aerodynamic evaluation;
    warnings flag geometry outside the range the Barrowman model was
    derived for.
    """
    result = ValidationResult()

    validate_positive("nose.length", config.nose.length, result)
    validate_positive("nose.diameter", config.nose.diameter, result)
    validate_positive("body.length", config.body.length, result)
    validate_positive("body.diameter", config.body.diameter, result)

    if config.nose.diameter > 0 and config.body.diameter > 0:
        if abs(config.nose.diameter - config.body.diameter) > 1e-9:
            result.warning(
                "nose.diameter",
                "Nose base diameter differs from body diameter; shoulder drag is not modelled",
                value=config.nose.diameter,
                limit=config.body.diameter,
            )

    fins = config.fins
    if fins is not None and fins.count < 0:
        result.error("fins.count", f"Fin count cannot be negative, got {fins.count}")
    elif fins is not None and fins.count > 0:
        if fins.count < 3:
            result.error("fins.count", f"At least 3 fins required, got {fins.count}")
        validate_positive("fins.root_chord", fins.root_chord, result)
        validate_positive("fins.semi_span", fins.semi_span, result)
        if fins.tip_chord < 0:
            result.error("fins.tip_chord", "Tip chord cannot be negative")
        if fins.thickness < 0:
            result.error("fins.thickness", "Fin thickness cannot be negative")
        if fins.count > 8:
            result.warning("fins.count", f"{fins.count} fins: fin-fin interference is not modelled")
        position = config.fin_position
        if position + fins.root_chord > config.length + 1e-9:
            result.error(
                "fins.position",
                "Fin root chord extends past the aft end of the body",
                value=position,
            )

    if result.is_valid:
        fineness = config.length / config.reference_diameter
        validate_range("fineness_ratio", fineness, 5.0, 40.0, result, Severity.WARNING)

    return result
