"""Tests for series evaluation.

Reference values are the complete VSOP87D results of Meeus, *Astronomical
Algorithms*, example 32.a (Venus and the Earth at JDE 2448976.5).
"""

import math

import jax
import jax.numpy as jnp
import numpy as np
import pytest

from ephemjax.body import Body
from ephemjax.series import (
    Axis,
    Series,
    Table,
    axis_value,
    evaluate_position,
    evaluate_rectangular,
    evaluate_spherical,
    load_default_table,
    series_value,
)
from ephemjax.time import julian_millennia

TAU_32A = -0.007032169747


@pytest.fixture(scope="module")
def venus():
    return load_default_table(Body.VENUS)


@pytest.fixture(scope="module")
def earth():
    return load_default_table(Body.EARTH)


class TestAxisValue:
    def test_tau_from_jde(self):
        assert float(julian_millennia(2448976.5)) == pytest.approx(TAU_32A, abs=1e-12)

    def test_venus_published_place(self, venus):
        lon = float(axis_value(venus, Axis.L, TAU_32A)) % (2.0 * math.pi)
        assert math.degrees(lon) == pytest.approx(26.1141, abs=1e-4)
        assert math.degrees(float(axis_value(venus, Axis.B, TAU_32A))) == pytest.approx(-2.6206, abs=1e-4)

    def test_venus_longitude_unreduced(self, venus):
        lon = float(axis_value(venus, Axis.L, TAU_32A))
        assert lon == pytest.approx(-68.6592610133, abs=1e-8)
        assert math.degrees(lon % (2.0 * math.pi)) == pytest.approx(26.114119, abs=1e-5)

    def test_venus_latitude(self, venus):
        assert math.degrees(float(axis_value(venus, "B", TAU_32A))) == pytest.approx(-2.620603, abs=1e-5)

    def test_venus_radius(self, venus):
        assert float(axis_value(venus, Axis.R, TAU_32A)) == pytest.approx(0.72460168, abs=1e-8)

    def test_earth(self, earth):
        lon = float(axis_value(earth, Axis.L, TAU_32A)) % (2.0 * math.pi)
        assert math.degrees(lon) == pytest.approx(88.357005, abs=1e-5)
        assert math.degrees(float(axis_value(earth, Axis.B, TAU_32A))) == pytest.approx(0.000166, abs=1e-5)
        assert float(axis_value(earth, Axis.R, TAU_32A)) == pytest.approx(0.98382416, abs=1e-8)

    def test_missing_axis_is_zero(self):
        table = Table.from_coefficients("l-only", {"L": [[[1.0, 0.0, 0.0]]]})
        assert float(axis_value(table, Axis.R, 0.3)) == 0.0
        assert float(axis_value(table, Axis.B, 0.3)) == 0.0

    def test_horner_combination(self):
        table = Table.from_coefficients(
            "poly",
            {"L": [[[1.0, 0.0, 0.0]], [[2.0, 0.0, 0.0]], [[3.0, 0.0, 1.0]]]},
        )
        tau = 0.25
        expected = 1.0 + 2.0 * tau + 3.0 * math.cos(tau) * tau**2
        assert float(axis_value(table, Axis.L, tau)) == pytest.approx(expected, abs=1e-15)

    def test_series_value_excludes_power_factor(self):
        series = Series(Axis.L, 3, ((2.0, 0.0, 0.0),))
        assert float(series_value(series, 0.5)) == 2.0

    def test_at_epoch_sums_amplitude_cosines(self):
        table = Table.from_coefficients("t0", {"L": [[[2.0, 0.0, 5.0], [1.0, math.pi, 9.0]]]})
        assert float(axis_value(table, Axis.L, 0.0)) == pytest.approx(1.0, abs=1e-15)

    def test_deterministic(self, venus):
        first = np.asarray(axis_value(venus, Axis.L, TAU_32A))
        for _ in range(3):
            assert np.asarray(axis_value(venus, Axis.L, TAU_32A)).tobytes() == first.tobytes()

    def test_jit_compatible(self, venus):
        fn = jax.jit(lambda tau: axis_value(venus, Axis.R, tau))
        assert float(fn(TAU_32A)) == pytest.approx(0.72460168, abs=1e-8)

    def test_differentiable(self, venus):
        # eccentricity 0.0068 bounds dR/dτ by a·e·n, about 50 AU per millennium
        rate = jax.grad(lambda tau: axis_value(venus, Axis.R, tau))(TAU_32A)
        assert jnp.isfinite(rate)
        assert abs(float(rate)) < 60.0


class TestEvaluatePosition:
    def test_all_axes(self, venus):
        pos = evaluate_position(venus, TAU_32A)
        assert set(pos) == {Axis.L, Axis.B, Axis.R}
        assert float(pos[Axis.R]) == pytest.approx(0.72460168, abs=1e-8)

    @pytest.mark.parametrize("tau", [math.nan, math.inf, -math.inf])
    def test_non_finite_tau_raises(self, venus, tau):
        with pytest.raises(ValueError, match="finite"):
            evaluate_position(venus, tau)

    def test_far_tau_accepted(self, venus):
        pos = evaluate_position(venus, 5.0)
        assert all(bool(jnp.isfinite(v)) for v in pos.values())


class TestEvaluateSpherical:
    def test_shape_and_values(self, venus):
        lbr = evaluate_spherical(venus, TAU_32A)
        assert lbr.shape == (3,)
        assert float(lbr[2]) == pytest.approx(0.72460168, abs=1e-8)

    def test_rectangular_table_raises(self):
        table = Table.from_coefficients("xyz", {"X": [[[1.0, 0.0, 0.0]]]})
        with pytest.raises(ValueError, match="rectangular"):
            evaluate_spherical(table, 0.0)

    def test_non_finite_tau_raises(self, venus):
        with pytest.raises(ValueError, match="finite"):
            evaluate_spherical(venus, jnp.nan)


class TestEvaluateRectangular:
    def test_values(self):
        table = Table.from_coefficients(
            "xyz",
            {
                "X": [[[1.0, 0.0, 0.0]]],
                "Y": [[[0.5, 0.0, 0.0]], [[1.0, 0.0, 0.0]]],
                "Z": [[[0.25, 0.0, 0.0]]],
            },
        )
        xyz = evaluate_rectangular(table, 0.1)
        assert jnp.allclose(xyz, jnp.array([1.0, 0.6, 0.25]), atol=1e-15)

    def test_spherical_table_raises(self, venus):
        with pytest.raises(ValueError, match="spherical"):
            evaluate_rectangular(venus, 0.0)
