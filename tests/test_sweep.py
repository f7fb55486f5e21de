"""Tests for Mach range generation and sweep table building."""

import logging
import math

import numpy as np
import pytest

from aerotable.core.calculator import (
    AerodynamicCalculator,
    AerodynamicForces,
    CalculatorFailure,
)
from aerotable.core.sweep import (
    COLUMNS,
    AerodynamicTable,
    InvalidRangeError,
    build_table,
    mach_range,
)
from aerotable.core.vehicle import example_configuration


class LinearCalculator(AerodynamicCalculator):
    """Deterministic stand-in: coefficients are simple functions of Mach."""

    name = "linear"

    def __init__(self):
        self.calls = []

    def get_aerodynamic_forces(self, configuration, conditions, warnings):
        self.calls.append((id(conditions), conditions.mach, conditions.aoa, len(warnings)))
        warnings.warning("mach", "always warns")
        m = conditions.mach
        return AerodynamicForces(
            cd=0.5 + 0.1 * m,
            cn=0.0,
            cn_alpha=10.0 - m,
            cp=np.array([0.6, 0.8, 0.0]) * (1.0 + m),
        )


class FailingCalculator(AerodynamicCalculator):
    name = "failing"

    def __init__(self, fail_at):
        self.fail_at = fail_at
        self.calls = 0

    def get_aerodynamic_forces(self, configuration, conditions, warnings):
        self.calls += 1
        if conditions.mach >= self.fail_at:
            raise CalculatorFailure(f"no model at Mach {conditions.mach}")
        return AerodynamicForces(cd=0.5)


class TestMachRange:
    def test_exclusive_stop(self):
        r = mach_range(0.0, 2.0, 0.5)
        assert r.tolist() == [0.0, 0.5, 1.0, 1.5]

    def test_default_sweep_reaches_three(self):
        r = mach_range(0.0, 3.01, 0.01)
        assert len(r) == 301
        assert r[0] == 0.0
        assert r[-1] == pytest.approx(3.0)

    def test_partial_step_dropped(self):
        r = mach_range(0.0, 1.0, 0.3)
        assert len(r) == 3
        assert r[-1] == pytest.approx(0.6)

    @pytest.mark.parametrize(
        "start, stop, step",
        [(0.0, 1.0, 0.1), (0.3, 2.7, 0.05), (1.0, 1.5, 0.125), (-0.5, 0.5, 0.25)],
    )
    def test_count_and_spacing(self, start, stop, step):
        r = mach_range(start, stop, step)
        assert len(r) == int((stop - start) / step)
        assert r[0] == start
        assert np.all(np.diff(r) > 0)
        assert np.allclose(np.diff(r), step)
        assert r[-1] < stop

    def test_independent_calls(self):
        a = mach_range(0.0, 1.0, 0.1)
        b = mach_range(0.0, 1.0, 0.1)
        assert np.array_equal(a, b)

    @pytest.mark.parametrize(
        "start, stop, step",
        [
            (0.0, 1.0, 0.0),
            (0.0, 1.0, -0.1),
            (1.0, 1.0, 0.1),
            (2.0, 1.0, 0.1),
            (0.0, math.inf, 0.1),
            (math.nan, 1.0, 0.1),
        ],
    )
    def test_degenerate_raises(self, start, stop, step):
        with pytest.raises(InvalidRangeError):
            mach_range(start, stop, step)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            mach_range(0.0, 1.0, 0.0)


class TestBuildTable:
    def test_row_count_and_width(self):
        table = build_table(None, LinearCalculator(), 0.0, 2.0, 0.5)
        assert len(table) == 4
        assert all(len(row) == len(COLUMNS) for row in table)

    def test_rows_follow_range_order(self):
        table = build_table(None, LinearCalculator(), 0.0, 3.01, 0.01)
        assert table.column("mach").tolist() == mach_range(0.0, 3.01, 0.01).tolist()

    def test_row_contents(self):
        table = build_table(None, LinearCalculator(), 0.0, 2.0, 0.5)
        mach, cd, cp, cn, cna = table[2]
        assert mach == 1.0
        assert cd == pytest.approx(0.6)
        assert cp == pytest.approx(2.0)  # |(0.6, 0.8, 0)| * 2
        assert cn == 0.0
        assert cna == pytest.approx(9.0)

    def test_single_conditions_instance_reused(self):
        calc = LinearCalculator()
        build_table(None, calc, 0.0, 1.0, 0.25)
        assert len({c[0] for c in calc.calls}) == 1
        assert [c[1] for c in calc.calls] == [0.0, 0.25, 0.5, 0.75]

    def test_fresh_warning_set_per_sample(self):
        calc = LinearCalculator()
        build_table(None, calc, 0.0, 1.0, 0.25)
        assert all(c[3] == 0 for c in calc.calls)

    def test_default_aoa_is_zero(self):
        calc = LinearCalculator()
        build_table(None, calc, 0.0, 1.0, 0.5)
        assert all(c[2] == 0.0 for c in calc.calls)

    def test_fixed_aoa(self):
        calc = LinearCalculator()
        build_table(None, calc, 0.0, 1.0, 0.5, aoa=math.radians(4.0))
        assert all(c[2] == pytest.approx(math.radians(4.0)) for c in calc.calls)

    def test_idempotent(self):
        config = example_configuration()
        a = build_table(config, LinearCalculator(), 0.0, 3.01, 0.01)
        b = build_table(config, LinearCalculator(), 0.0, 3.01, 0.01)
        assert a == b

    def test_failure_aborts_sweep(self):
        calc = FailingCalculator(fail_at=1.0)
        with pytest.raises(CalculatorFailure):
            build_table(None, calc, 0.0, 2.0, 0.5)
        assert calc.calls == 3

    def test_invalid_range_before_any_evaluation(self):
        calc = LinearCalculator()
        with pytest.raises(InvalidRangeError):
            build_table(None, calc, 1.0, 0.5, 0.1)
        assert calc.calls == []

    def test_negative_start_rejected(self):
        calc = LinearCalculator()
        with pytest.raises(InvalidRangeError, match="negative"):
            build_table(None, calc, -0.5, 0.5, 0.25)
        assert calc.calls == []

    def test_warnings_logged_not_tabled(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="aerotable.core.sweep"):
            logged = build_table(None, LinearCalculator(), 0.0, 1.0, 0.5)
        assert "Ignored warning at Mach 0.500: always warns" in caplog.text
        assert logged == build_table(None, LinearCalculator(), 0.0, 1.0, 0.5)


class TestAerodynamicTable:
    def test_rows_are_immutable(self):
        table = build_table(None, LinearCalculator(), 0.0, 1.0, 0.5)
        assert isinstance(table.rows, tuple)
        with pytest.raises(AttributeError):
            table.rows = ()

    def test_rejects_wrong_width(self):
        with pytest.raises(ValueError):
            AerodynamicTable(rows=((0.0, 1.0),))

    def test_as_array_shape(self):
        table = build_table(None, LinearCalculator(), 0.0, 1.0, 0.25)
        assert table.as_array().shape == (4, 5)

    def test_empty_table(self):
        assert AerodynamicTable().as_array().shape == (0, 5)

    def test_unknown_column(self):
        with pytest.raises(KeyError):
            AerodynamicTable().column("cl")
