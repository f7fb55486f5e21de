"""Tests for design rule checks and warning collection."""

from aerotable.core.vehicle import BodyTube, FinSet, NoseCone, RocketConfiguration, example_configuration
from aerotable.utils.validation import (
    Severity,
    ValidationResult,
    WarningSet,
    validate_positive,
    validate_range,
    validate_vehicle,
)


class TestValidationResult:
    def test_empty_is_valid(self):
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert len(result) == 0

    def test_error_invalidates(self):
        result = ValidationResult()
        result.error("x", "bad")
        assert not result.is_valid
        assert result.errors[0].parameter == "x"

    def test_merge(self):
        a = ValidationResult()
        b = ValidationResult()
        a.warning("x", "w")
        b.info("y", "i")
        a.merge(b)
        assert [m.severity for m in a] == [Severity.WARNING, Severity.INFO]

    def test_warning_set_is_result(self):
        warnings = WarningSet()
        warnings.warning("mach", "transonic")
        assert warnings.has_warnings
        assert warnings.is_valid


class TestValidators:
    def test_positive(self):
        result = ValidationResult()
        validate_positive("d", 0.0, result)
        assert not result.is_valid

    def test_range_warning(self):
        result = ValidationResult()
        validate_range("f", 50.0, 5.0, 40.0, result, Severity.WARNING)
        assert result.is_valid
        assert result.has_warnings


class TestValidateVehicle:
    def test_example_is_clean(self):
        result = validate_vehicle(example_configuration())
        assert result.is_valid
        assert not result.has_warnings

    def test_negative_tip_chord(self):
        config = RocketConfiguration(fins=FinSet(tip_chord=-0.01))
        assert not validate_vehicle(config).is_valid

    def test_negative_fin_count(self):
        result = validate_vehicle(RocketConfiguration(fins=FinSet(count=-3)))
        assert not result.is_valid
        assert any(m.parameter == "fins.count" for m in result.errors)

    def test_fins_past_aft_end(self):
        config = RocketConfiguration(fins=FinSet(position=1.75))
        result = validate_vehicle(config)
        assert any(m.parameter == "fins.position" for m in result.errors)

    def test_mismatched_nose_warns(self):
        config = RocketConfiguration(nose=NoseCone(diameter=0.08), body=BodyTube(diameter=0.1))
        result = validate_vehicle(config)
        assert result.is_valid
        assert any(m.parameter == "nose.diameter" for m in result.warnings)

    def test_stubby_vehicle_warns(self):
        config = RocketConfiguration(
            nose=NoseCone(length=0.1, diameter=0.1),
            body=BodyTube(length=0.2, diameter=0.1),
            fins=None,
        )
        result = validate_vehicle(config)
        assert result.is_valid
        assert any(m.parameter == "fineness_ratio" for m in result.warnings)
