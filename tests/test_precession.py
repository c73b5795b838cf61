"""Tests for precession between mean equinoxes.

Reference values are from Meeus, *Astronomical Algorithms (2nd Ed.)*,
chapters 21 and 24.
"""

import math

import jax
import jax.numpy as jnp
import pytest

from ephemjax.constants import AS2RAD, HOUR2RAD
from ephemjax.frames import (
    B1950_EPOCH,
    J2000_EPOCH,
    ecliptic_precessor,
    equatorial_precessor,
    position_rectangular_to_spherical,
    position_spherical_to_rectangular,
    precess_ecliptic,
    precess_equatorial,
    precess_rectangular_equatorial,
    reduce_elements,
    reduce_elements_b1950_fk4_to_j2000_fk5,
    reduce_elements_b1950_to_j2000,
    rotation_equatorial_precession,
)
from ephemjax.time import jde_from_besselian_year, julian_year_from_jde


def _hms(h, m, s):
    return (h + m / 60.0 + s / 3600.0) * HOUR2RAD


def _dms(d, m, s):
    return math.radians(d + m / 60.0 + s / 3600.0)


def _ra_seconds(ra):
    """Seconds-of-time part of a right ascension [rad]."""
    hours = math.degrees(float(ra)) / 15.0
    return (hours * 3600.0) % 60.0


def _dec_arcseconds(dec):
    """Arcseconds part of a declination [rad]."""
    return (math.degrees(float(dec)) * 3600.0) % 60.0


# ---------------------------------------------------------------------------
# Equatorial
# ---------------------------------------------------------------------------


class TestPrecessEquatorial:
    def test_theta_persei(self):
        # Example 21.b: θ Persei to 2028 Nov 13.19 TD
        ra, dec = precess_equatorial(
            _hms(2, 44, 11.986),
            _dms(49, 13, 42.48),
            J2000_EPOCH,
            julian_year_from_jde(2462088.69),
            mu_ra=0.03425 * 15.0 * AS2RAD,
            mu_dec=-0.0895 * AS2RAD,
        )
        assert math.degrees(float(ra)) == pytest.approx(41.547214, abs=1e-5)
        assert math.degrees(float(dec)) == pytest.approx(49.348483, abs=1e-5)

    @pytest.mark.parametrize(
        "epoch, hms, dms",
        [
            (float(julian_year_from_jde(jde_from_besselian_year(1900.0))), (1, 22, 33.897), (88, 46, 26.182)),
            (2050.0, (3, 48, 16.427), (89, 27, 15.376)),
            (2100.0, (5, 53, 29.166), (89, 32, 22.184)),
        ],
    )
    def test_polaris(self, epoch, hms, dms):
        ra, dec = precess_equatorial(
            _hms(2, 31, 48.704),
            _dms(89, 15, 50.72),
            J2000_EPOCH,
            epoch,
            mu_ra=0.19877 * 15.0 * AS2RAD,
            mu_dec=-0.0152 * AS2RAD,
        )
        assert math.degrees(float(ra)) / 15.0 == pytest.approx(hms[0] + hms[1] / 60.0 + hms[2] / 3600.0, abs=1e-6)
        assert _ra_seconds(ra) == pytest.approx(hms[2], abs=5e-3)
        assert _dec_arcseconds(dec) == pytest.approx(dms[2], abs=5e-3)
        assert float(dec) == pytest.approx(_dms(*dms), abs=1e-7)

    @pytest.mark.parametrize("epoch", [J2000_EPOCH, B1950_EPOCH, 1744.3])
    def test_identity(self, epoch):
        ra, dec = precess_equatorial(1.234, 0.567, epoch, epoch)
        assert float(ra) == pytest.approx(1.234, abs=1e-12)
        assert float(dec) == pytest.approx(0.567, abs=1e-12)

    @pytest.mark.parametrize("via", [2100.0, 1800.0])
    def test_associative(self, via):
        ra, dec = 0.72, 0.86
        direct = precess_equatorial(ra, dec, J2000_EPOCH, B1950_EPOCH)
        step = precess_equatorial(ra, dec, J2000_EPOCH, via)
        chained = precess_equatorial(step[0], step[1], via, B1950_EPOCH)
        assert float(chained[0]) == pytest.approx(float(direct[0]), abs=1e-8)
        assert float(chained[1]) == pytest.approx(float(direct[1]), abs=1e-8)

    def test_round_trip(self):
        ra, dec = precess_equatorial(4.1, -0.3, J2000_EPOCH, B1950_EPOCH)
        ra2, dec2 = precess_equatorial(ra, dec, B1950_EPOCH, J2000_EPOCH)
        assert float(ra2) == pytest.approx(4.1, abs=1e-8)
        assert float(dec2) == pytest.approx(-0.3, abs=1e-8)

    def test_precessor_vanishes_at_same_epoch(self):
        p = equatorial_precessor(1950.0, 1950.0)
        assert float(p.zeta) == 0.0 and float(p.z) == 0.0 and float(p.theta) == 0.0

    def test_jit_compatible(self):
        fn = jax.jit(precess_equatorial)
        ra, dec = fn(0.72, 0.86, J2000_EPOCH, B1950_EPOCH)
        ra_ref, dec_ref = precess_equatorial(0.72, 0.86, J2000_EPOCH, B1950_EPOCH)
        assert float(ra) == pytest.approx(float(ra_ref), abs=1e-14)
        assert float(dec) == pytest.approx(float(dec_ref), abs=1e-14)


class TestPrecessRectangular:
    def test_matches_angles(self):
        ra, dec = 0.72, 0.86
        r = position_spherical_to_rectangular(jnp.array([ra, dec, 1.0]))
        r_to = precess_rectangular_equatorial(r, J2000_EPOCH, 2100.0)
        sph = position_rectangular_to_spherical(r_to)
        ra_to, dec_to = precess_equatorial(ra, dec, J2000_EPOCH, 2100.0)
        assert float(sph[0]) == pytest.approx(float(ra_to), abs=1e-12)
        assert float(sph[1]) == pytest.approx(float(dec_to), abs=1e-12)

    def test_rotation_orthonormal(self):
        R = rotation_equatorial_precession(J2000_EPOCH, B1950_EPOCH)
        assert jnp.allclose(R @ R.T, jnp.eye(3), atol=1e-14)

    def test_identity_matrix(self):
        assert jnp.allclose(rotation_equatorial_precession(2000.0, 2000.0), jnp.eye(3), atol=0.0)


# ---------------------------------------------------------------------------
# Ecliptic
# ---------------------------------------------------------------------------


class TestPrecessEcliptic:
    def test_venus_minus_214(self):
        # Example 21.c: Venus to -214 June 30.0 (Julian calendar)
        lon, lat = precess_ecliptic(
            math.radians(149.48194),
            math.radians(1.76549),
            J2000_EPOCH,
            julian_year_from_jde(1643074.5),
        )
        assert math.degrees(float(lon)) == pytest.approx(118.70416774861883, abs=1e-8)
        assert math.degrees(float(lat)) == pytest.approx(1.6153320055611455, abs=1e-8)

    @pytest.mark.parametrize("epoch", [J2000_EPOCH, B1950_EPOCH, 1000.0])
    def test_identity(self, epoch):
        lon, lat = precess_ecliptic(5.5, -0.2, epoch, epoch)
        assert float(lon) == pytest.approx(5.5, abs=1e-12)
        assert float(lat) == pytest.approx(-0.2, abs=1e-12)

    @pytest.mark.parametrize("via", [2100.0, 1800.0])
    def test_associative(self, via):
        lon, lat = 2.6, 0.03
        direct = precess_ecliptic(lon, lat, J2000_EPOCH, B1950_EPOCH)
        step = precess_ecliptic(lon, lat, J2000_EPOCH, via)
        chained = precess_ecliptic(step[0], step[1], via, B1950_EPOCH)
        assert float(chained[0]) == pytest.approx(float(direct[0]), abs=1e-8)
        assert float(chained[1]) == pytest.approx(float(direct[1]), abs=1e-8)

    def test_longitude_wrapped(self):
        lon, _ = precess_ecliptic(6.28, 0.0, J2000_EPOCH, 2100.0)
        assert 0.0 <= float(lon) < 2.0 * math.pi

    def test_general_precession_rate(self):
        # about 50.29 arcsec per year
        q = ecliptic_precessor(J2000_EPOCH, 2001.0)
        assert float(q.p) / AS2RAD == pytest.approx(50.29, abs=0.01)


# ---------------------------------------------------------------------------
# Orbital elements
# ---------------------------------------------------------------------------


class TestReduceElements:
    def test_example_24a(self):
        epoch_from = julian_year_from_jde(jde_from_besselian_year(1744.0))
        epoch_to = julian_year_from_jde(jde_from_besselian_year(1950.0))
        inc, node, peri = reduce_elements(
            math.radians(47.122),
            math.radians(45.7481),
            math.radians(151.4486),
            epoch_from,
            epoch_to,
        )
        assert math.degrees(float(inc)) == pytest.approx(47.13795835860312, abs=1e-8)
        assert math.degrees(float(node)) == pytest.approx(48.6036896626305, abs=1e-8)
        assert math.degrees(float(peri)) == pytest.approx(151.47823843361917, abs=1e-8)

    def test_identity(self):
        inc, node, peri = reduce_elements(0.3, 1.2, 4.0, 1950.0, 1950.0)
        assert float(inc) == pytest.approx(0.3, abs=1e-12)
        assert float(node) == pytest.approx(1.2, abs=1e-12)
        assert float(peri) == pytest.approx(4.0, abs=1e-12)

    def test_b1950_to_j2000(self):
        # Example 24.b: comet Encke
        inc, node, peri = reduce_elements_b1950_to_j2000(
            math.radians(11.93911), math.radians(334.04096), math.radians(186.24444)
        )
        assert math.degrees(float(inc)) == pytest.approx(11.945236764689536, abs=1e-8)
        assert math.degrees(float(node)) == pytest.approx(334.7500602425115, abs=1e-8)
        assert math.degrees(float(peri)) == pytest.approx(186.23351531378918, abs=1e-8)

    def test_b1950_fk4_to_j2000_fk5(self):
        # Example 24.c: comet Encke, including the FK4 equinox correction
        inc, node, peri = reduce_elements_b1950_fk4_to_j2000_fk5(
            math.radians(11.93911), math.radians(334.04096), math.radians(186.24444)
        )
        assert math.degrees(float(inc)) == pytest.approx(11.945206561406797, abs=1e-8)
        assert math.degrees(float(node)) == pytest.approx(334.75042895869086, abs=1e-8)
        assert math.degrees(float(peri)) == pytest.approx(186.23327459848562, abs=1e-8)
