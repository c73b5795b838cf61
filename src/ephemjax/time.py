"""Time-argument scales used by the series and precession models.

VSOP87 series are polynomials in ``τ``, Julian millennia of dynamical
time measured from J2000.0.  Precession formulas use Julian centuries
and equinox epochs expressed as Julian or Besselian years.  Calendar
arithmetic is out of scope: every function here starts from a Julian
Ephemeris Date (JDE).
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import (
    B1900,
    BESSELIAN_YEAR,
    J2000,
    JULIAN_CENTURY,
    JULIAN_MILLENNIUM,
    JULIAN_YEAR,
)


def julian_centuries(jde: ArrayLike) -> Array:
    """Julian centuries of dynamical time elapsed since J2000.0.

    Args:
        jde: Julian Ephemeris Date.

    Returns:
        ``T = (JDE - 2451545.0) / 36525``.
    """
    jde = jnp.asarray(jde, dtype=get_dtype())
    return (jde - J2000) / JULIAN_CENTURY


def julian_millennia(jde: ArrayLike) -> Array:
    """Julian millennia of dynamical time elapsed since J2000.0.

    This is the ``τ`` argument of every VSOP87 series.

    Args:
        jde: Julian Ephemeris Date.

    Returns:
        ``τ = (JDE - 2451545.0) / 365250``.

    Examples:
        ```python
        from ephemjax.time import julian_millennia
        tau = julian_millennia(2448976.5)  # 1992-12-20 0h TD
        ```
    """
    jde = jnp.asarray(jde, dtype=get_dtype())
    return (jde - J2000) / JULIAN_MILLENNIUM


def jde_from_julian_millennia(tau: ArrayLike) -> Array:
    """Inverse of :func:`julian_millennia`."""
    tau = jnp.asarray(tau, dtype=get_dtype())
    return tau * JULIAN_MILLENNIUM + J2000


def julian_millennia_to_centuries(tau: ArrayLike) -> Array:
    """Convert a ``τ`` in millennia to Julian centuries."""
    return jnp.asarray(tau, dtype=get_dtype()) * 10.0


def julian_year_from_jde(jde: ArrayLike) -> Array:
    """Julian epoch (e.g. 2000.0 for J2000) corresponding to a JDE."""
    jde = jnp.asarray(jde, dtype=get_dtype())
    return 2000.0 + (jde - J2000) / JULIAN_YEAR


def jde_from_julian_year(year: ArrayLike) -> Array:
    """JDE of the Julian epoch *year*."""
    year = jnp.asarray(year, dtype=get_dtype())
    return J2000 + JULIAN_YEAR * (year - 2000.0)


def besselian_year_from_jde(jde: ArrayLike) -> Array:
    """Besselian epoch (e.g. 1950.0 for B1950) corresponding to a JDE."""
    jde = jnp.asarray(jde, dtype=get_dtype())
    return 1900.0 + (jde - B1900) / BESSELIAN_YEAR


def jde_from_besselian_year(year: ArrayLike) -> Array:
    """JDE of the Besselian epoch *year*.

    Args:
        year: Besselian year, e.g. ``1950.0``.

    Returns:
        Julian Ephemeris Date.

    Examples:
        ```python
        from ephemjax.time import jde_from_besselian_year, julian_year_from_jde
        epoch = julian_year_from_jde(jde_from_besselian_year(1950.0))
        ```
    """
    year = jnp.asarray(year, dtype=get_dtype())
    return B1900 + BESSELIAN_YEAR * (year - 1900.0)
