"""Dynamical equinox to FK5 conversions.

VSOP87 coordinates are referred to the dynamical ecliptic and equinox,
which differ slightly from the FK5 catalogue frame.  Two conversions
are provided:

- :func:`to_fk5`: closed-form additive correction to heliocentric
  ecliptic longitude and latitude (of date or J2000).
- :func:`rotation_vsop_to_fk5_j2000` and
  :func:`rotation_vsop_to_fk5_b1950`: fixed matrices taking rectangular
  coordinates on the dynamical ecliptic of J2000.0 to the FK5 equator of
  J2000.0 or B1950.0, and :func:`position_vsop_to_fk5_equinox` for any
  other equinox.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.constants import AS2RAD, DEG2RAD
from ephemjax.frames.precession import J2000_EPOCH, precess_rectangular_equatorial

# fmt: off
_VSOP_TO_FK5_J2000 = (
    (1.0,                 0.000000440360, -0.000000190919),
    (-0.000000479966,     0.917482137087, -0.397776982902),
    (0.0,                 0.397776982902,  0.917482137087),
)

_VSOP_TO_FK5_B1950 = (
    (0.999925702634,      0.012189716217,  0.000011134016),
    (-0.011179418036,     0.917413998946, -0.397777041885),
    (-0.004859003787,     0.397747363646,  0.917482111428),
)
# fmt: on


def fk5_correction(lon: ArrayLike, lat: ArrayLike, tau: ArrayLike) -> tuple[Array, Array]:
    """Corrections to add to VSOP87 longitude and latitude to reach FK5.

    Args:
        lon: Heliocentric ecliptic longitude L [rad].
        lat: Heliocentric ecliptic latitude B [rad].
        tau: Julian millennia from J2000.0.

    Returns:
        Tuple of (ΔL, ΔB) [rad].

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 32.3.
    """
    dtype = get_dtype()
    lon = jnp.asarray(lon, dtype=dtype)
    lat = jnp.asarray(lat, dtype=dtype)
    T = jnp.asarray(tau, dtype=dtype) * 10.0

    lon_p = lon - (1.397 + 0.00031 * T) * T * DEG2RAD
    s, c = jnp.sin(lon_p), jnp.cos(lon_p)

    dlon = (-0.09033 + 0.03916 * (c + s) * jnp.tan(lat)) * AS2RAD
    dlat = 0.03916 * (c - s) * AS2RAD
    return dlon, dlat


def to_fk5(lon: ArrayLike, lat: ArrayLike, tau: ArrayLike) -> tuple[Array, Array]:
    """Convert VSOP87 ecliptic longitude and latitude to the FK5 system.

    The correction is additive and leaves the radius vector unchanged.

    Args:
        lon: Heliocentric ecliptic longitude L [rad].
        lat: Heliocentric ecliptic latitude B [rad].
        tau: Julian millennia from J2000.0.

    Returns:
        Tuple of (L, B) in the FK5 system [rad].

    Examples:
        ```python
        from ephemjax.frames import to_fk5
        lon, lat = to_fk5(0.4558, -0.0457, -0.007032169747)
        ```
    """
    dlon, dlat = fk5_correction(lon, lat, tau)
    return jnp.asarray(lon, dtype=get_dtype()) + dlon, jnp.asarray(lat, dtype=get_dtype()) + dlat


def rotation_vsop_to_fk5_j2000() -> Array:
    """Compute the 3x3 matrix from the J2000 dynamical ecliptic to FK5 J2000 equatorial.

    Returns:
        3x3 matrix (VSOP87 ecliptic J2000 -> FK5 equator J2000).

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 26.2.
    """
    return jnp.array(_VSOP_TO_FK5_J2000, dtype=get_dtype())


def rotation_vsop_to_fk5_b1950() -> Array:
    """Compute the 3x3 matrix from the J2000 dynamical ecliptic to FK5 B1950 equatorial.

    Returns:
        3x3 matrix (VSOP87 ecliptic J2000 -> FK5 equator B1950).

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 26.3.
    """
    return jnp.array(_VSOP_TO_FK5_B1950, dtype=get_dtype())


def position_vsop_to_fk5_equinox(r_ecl: ArrayLike, epoch: ArrayLike) -> Array:
    """Express a J2000 dynamical-ecliptic position on the FK5 equator of *epoch*.

    The position is first taken to the FK5 equator of J2000.0 and then
    precessed to the requested equinox.

    Args:
        r_ecl: Rectangular position ``[x, y, z]`` on the dynamical ecliptic
            and equinox of J2000.0.
        epoch: Target equinox as a Julian epoch [years].

    Returns:
        Rectangular equatorial position ``[x, y, z]`` referred to the FK5
        equator and equinox of *epoch*.
    """
    r_ecl = jnp.asarray(r_ecl, dtype=get_dtype())
    r_fk5 = rotation_vsop_to_fk5_j2000() @ r_ecl
    return precess_rectangular_equatorial(r_fk5, J2000_EPOCH, epoch)
