"""Ecliptic-equatorial and heliocentric-geocentric transformations.

The ecliptic and equatorial frames of the same equinox differ by a
rotation about the x-axis (the equinox direction) by the obliquity of
the ecliptic.  The obliquity is an argument: pass the mean obliquity
for mean places or the true obliquity (mean plus nutation) for true
places.  See :mod:`ephemjax.frames.obliquity`.

Geocentric positions are obtained by subtracting the heliocentric
position of the Earth, evaluated for the same instant and equinox,
from that of the body.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.frames.spherical import (
    position_rectangular_to_spherical,
    position_spherical_to_rectangular,
)
from ephemjax.rotations import Rx
from ephemjax.utils import wrap_to_2pi


def rotation_ecliptic_to_equatorial(obliquity: ArrayLike) -> Array:
    """Compute the 3x3 rotation matrix from ecliptic to equatorial.

    Returns the matrix ``Rx(-ε)``.

    Args:
        obliquity: Obliquity of the ecliptic ε [rad].

    Returns:
        3x3 rotation matrix (ecliptic -> equatorial).

    Examples:
        ```python
        from ephemjax.frames import mean_obliquity, rotation_ecliptic_to_equatorial
        R = rotation_ecliptic_to_equatorial(mean_obliquity(0.0))
        R.shape
        ```
    """
    return Rx(-jnp.asarray(obliquity, dtype=get_dtype()))


def rotation_equatorial_to_ecliptic(obliquity: ArrayLike) -> Array:
    """Compute the 3x3 rotation matrix from equatorial to ecliptic.

    Returns the matrix ``Rx(ε)``, the transpose of
    :func:`rotation_ecliptic_to_equatorial`.

    Args:
        obliquity: Obliquity of the ecliptic ε [rad].

    Returns:
        3x3 rotation matrix (equatorial -> ecliptic).
    """
    return Rx(jnp.asarray(obliquity, dtype=get_dtype()))


def position_ecliptic_to_equatorial(r_ecl: ArrayLike, obliquity: ArrayLike) -> Array:
    """Rotate a Cartesian ecliptic position into the equatorial frame.

    Args:
        r_ecl: Position ``[x, y, z]`` in the ecliptic frame.
        obliquity: Obliquity of the ecliptic [rad].

    Returns:
        Position ``[x, y, z]`` in the equatorial frame of the same equinox.
    """
    r_ecl = jnp.asarray(r_ecl, dtype=get_dtype())
    return rotation_ecliptic_to_equatorial(obliquity) @ r_ecl


def position_equatorial_to_ecliptic(r_eq: ArrayLike, obliquity: ArrayLike) -> Array:
    """Rotate a Cartesian equatorial position into the ecliptic frame.

    Args:
        r_eq: Position ``[x, y, z]`` in the equatorial frame.
        obliquity: Obliquity of the ecliptic [rad].

    Returns:
        Position ``[x, y, z]`` in the ecliptic frame of the same equinox.
    """
    r_eq = jnp.asarray(r_eq, dtype=get_dtype())
    return rotation_equatorial_to_ecliptic(obliquity) @ r_eq


def ecliptic_to_equatorial(
    lon: ArrayLike, lat: ArrayLike, obliquity: ArrayLike
) -> tuple[Array, Array]:
    """Convert ecliptic longitude and latitude to right ascension and declination.

    Args:
        lon: Ecliptic longitude λ [rad].
        lat: Ecliptic latitude β [rad].
        obliquity: Obliquity of the ecliptic ε [rad].

    Returns:
        Tuple of (right ascension in ``[0, 2π)``, declination) [rad].

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 13.3-13.4.
    """
    dtype = get_dtype()
    lon = jnp.asarray(lon, dtype=dtype)
    lat = jnp.asarray(lat, dtype=dtype)
    obliquity = jnp.asarray(obliquity, dtype=dtype)

    s_eps, c_eps = jnp.sin(obliquity), jnp.cos(obliquity)
    s_lon = jnp.sin(lon)
    s_lat, c_lat = jnp.sin(lat), jnp.cos(lat)

    ra = jnp.arctan2(s_lon * c_eps * c_lat - s_lat * s_eps, jnp.cos(lon) * c_lat)
    dec = jnp.arcsin(s_lat * c_eps + c_lat * s_eps * s_lon)
    return wrap_to_2pi(ra), dec


def equatorial_to_ecliptic(
    ra: ArrayLike, dec: ArrayLike, obliquity: ArrayLike
) -> tuple[Array, Array]:
    """Convert right ascension and declination to ecliptic longitude and latitude.

    Args:
        ra: Right ascension α [rad].
        dec: Declination δ [rad].
        obliquity: Obliquity of the ecliptic ε [rad].

    Returns:
        Tuple of (longitude in ``[0, 2π)``, latitude) [rad].

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 13.1-13.2.

    Examples:
        ```python
        import jax.numpy as jnp
        from ephemjax.frames import equatorial_to_ecliptic
        lon, lat = equatorial_to_ecliptic(
            jnp.deg2rad(116.328942), jnp.deg2rad(28.026183), jnp.deg2rad(23.4392911)
        )
        ```
    """
    dtype = get_dtype()
    ra = jnp.asarray(ra, dtype=dtype)
    dec = jnp.asarray(dec, dtype=dtype)
    obliquity = jnp.asarray(obliquity, dtype=dtype)

    s_eps, c_eps = jnp.sin(obliquity), jnp.cos(obliquity)
    s_ra = jnp.sin(ra)
    s_dec, c_dec = jnp.sin(dec), jnp.cos(dec)

    lon = jnp.arctan2(s_ra * c_eps * c_dec + s_dec * s_eps, jnp.cos(ra) * c_dec)
    lat = jnp.arcsin(s_dec * c_eps - c_dec * s_eps * s_ra)
    return wrap_to_2pi(lon), lat


def heliocentric_to_geocentric(body_lbr: ArrayLike, earth_lbr: ArrayLike) -> Array:
    """Convert a heliocentric ecliptic position to a geocentric one.

    Both positions must be referred to the same equinox and, for a
    geometric position, evaluated at the same instant.  Light-time is
    the caller's concern: evaluate the body at the retarded time to
    obtain the astrometric direction.

    Args:
        body_lbr: Heliocentric ``[L, B, R]`` of the body [rad, rad, AU].
        earth_lbr: Heliocentric ``[L, B, R]`` of the Earth [rad, rad, AU].

    Returns:
        Geocentric ecliptic ``[λ, β, Δ]`` with λ in ``[0, 2π)``.

    Raises:
        ValueError: If the two positions coincide.  Under ``jax.jit`` the
            result is NaN instead.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 33.1-33.2.
    """
    r_body = position_spherical_to_rectangular(body_lbr)
    r_earth = position_spherical_to_rectangular(earth_lbr)
    return position_rectangular_to_spherical(r_body - r_earth)
