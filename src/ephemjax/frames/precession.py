"""Precession between mean equinoxes.

Implements the rigorous precession reductions of Lieske et al. (1977) in
the form given by Meeus, for both equatorial (α, δ) and ecliptic (λ, β)
coordinates and for orbital elements.  Equinoxes are identified by their
Julian epoch in years, e.g. ``2000.0`` for J2000.0; use
:func:`ephemjax.time.julian_year_from_jde` and
:func:`ephemjax.time.jde_from_besselian_year` to obtain epochs of other
kinds, and :data:`J2000_EPOCH` / :data:`B1950_EPOCH` for the standard
equinoxes.

Every reduction accepts an arbitrary starting equinox: the polynomial
coefficients depend on the starting epoch ``T`` (Julian centuries from
J2000.0) and reduce to the J2000.0 values when ``T = 0``.  Precessing
from an equinox to itself is the identity.

References:
    J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, chapters 21 and 24.
    J.H. Lieske et al., "Expressions for the precession quantities based
    upon the IAU (1976) system of astronomical constants", A&A 58, 1977.
"""

from __future__ import annotations

import math
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.constants import AS2RAD, B1950, DEG2RAD, J2000, JULIAN_YEAR, SMALL_ANGLE
from ephemjax.rotations import Ry, Rz
from ephemjax.utils import horner, wrap_to_2pi

J2000_EPOCH: float = 2000.0
"""Julian epoch of the J2000.0 equinox [years]."""

B1950_EPOCH: float = 2000.0 + (B1950 - J2000) / JULIAN_YEAR
"""Julian epoch of the B1950.0 equinox [years]."""

_COS_SMALL_ANGLE = math.cos(SMALL_ANGLE)

# Ecliptic reduction of orbital elements from B1950 (FK4-independent), Meeus eq. 24.4
_B1950_S = 0.0001139788
_B1950_C = 0.9999999935
_B1950_NODE_OFFSET = 174.298782 * DEG2RAD
_J2000_NODE_OFFSET = 174.997194 * DEG2RAD

# FK4 B1950 to FK5 J2000 reduction of orbital elements (Meeus p. 161)
_FK4_L_PRIME = 4.50001688 * DEG2RAD
_FK4_L = 5.19856209 * DEG2RAD
_FK4_J = 0.00651966 * DEG2RAD


def _centuries(epoch_from: ArrayLike, epoch_to: ArrayLike) -> tuple[Array, Array]:
    dtype = get_dtype()
    epoch_from = jnp.asarray(epoch_from, dtype=dtype)
    epoch_to = jnp.asarray(epoch_to, dtype=dtype)
    T = (epoch_from - J2000_EPOCH) * 0.01
    t = (epoch_to - epoch_from) * 0.01
    return T, t


class EquatorialPrecessor(NamedTuple):
    """Equatorial precession angles between two equinoxes.

    Attributes:
        zeta: Angle ζ [rad].
        z: Angle z [rad].
        theta: Angle θ [rad].
    """

    zeta: Array
    z: Array
    theta: Array


def equatorial_precessor(epoch_from: ArrayLike, epoch_to: ArrayLike) -> EquatorialPrecessor:
    """Compute the precession angles ζ, z, θ between two equinoxes.

    Args:
        epoch_from: Starting equinox as a Julian epoch [years].
        epoch_to: Target equinox as a Julian epoch [years].

    Returns:
        :class:`EquatorialPrecessor` with angles in radians.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 21.2-21.4.
    """
    T, t = _centuries(epoch_from, epoch_to)

    zeta_t = horner(T, [2306.2181, 1.39656, -0.000139])
    theta_t = horner(T, [2004.3109, -0.85330, -0.000217])

    zeta = horner(t, [zeta_t, 0.30188 - 0.000344 * T, 0.017998]) * t
    z = horner(t, [zeta_t, 1.09468 + 0.000066 * T, 0.018203]) * t
    theta = horner(t, [theta_t, -0.42665 - 0.000217 * T, -0.041833]) * t

    return EquatorialPrecessor(zeta=zeta * AS2RAD, z=z * AS2RAD, theta=theta * AS2RAD)


def precess_equatorial(
    ra: ArrayLike,
    dec: ArrayLike,
    epoch_from: ArrayLike,
    epoch_to: ArrayLike,
    mu_ra: ArrayLike = 0.0,
    mu_dec: ArrayLike = 0.0,
) -> tuple[Array, Array]:
    """Precess equatorial coordinates from one mean equinox to another.

    Annual proper motion, if given, is applied over the elapsed time
    before precessing.  Near the celestial poles the declination is
    recovered from its cosine to keep full precision.

    Args:
        ra: Right ascension α at *epoch_from* [rad].
        dec: Declination δ at *epoch_from* [rad].
        epoch_from: Starting equinox as a Julian epoch [years].
        epoch_to: Target equinox as a Julian epoch [years].
        mu_ra: Annual proper motion in right ascension [rad/year].
        mu_dec: Annual proper motion in declination [rad/year].

    Returns:
        Tuple of (right ascension in ``[0, 2π)``, declination) [rad].

    Examples:
        ```python
        from ephemjax.frames import B1950_EPOCH, J2000_EPOCH, precess_equatorial
        ra, dec = precess_equatorial(0.72, 0.86, J2000_EPOCH, B1950_EPOCH)
        ```
    """
    dtype = get_dtype()
    ra = jnp.asarray(ra, dtype=dtype)
    dec = jnp.asarray(dec, dtype=dtype)
    years = jnp.asarray(epoch_to, dtype=dtype) - jnp.asarray(epoch_from, dtype=dtype)
    ra = ra + jnp.asarray(mu_ra, dtype=dtype) * years
    dec = dec + jnp.asarray(mu_dec, dtype=dtype) * years

    p = equatorial_precessor(epoch_from, epoch_to)
    s_theta, c_theta = jnp.sin(p.theta), jnp.cos(p.theta)
    s_dec, c_dec = jnp.sin(dec), jnp.cos(dec)
    s_ra, c_ra = jnp.sin(ra + p.zeta), jnp.cos(ra + p.zeta)

    A = c_dec * s_ra
    B = c_theta * c_dec * c_ra - s_theta * s_dec
    C = s_theta * c_dec * c_ra + c_theta * s_dec

    ra_out = wrap_to_2pi(jnp.arctan2(A, B) + p.z)

    # Near a pole sin(dec) saturates; use the equatorial component instead
    dec_polar = jnp.sign(C) * jnp.arccos(jnp.clip(jnp.hypot(A, B), -1.0, 1.0))
    dec_out = jnp.where(
        jnp.abs(C) > _COS_SMALL_ANGLE,
        dec_polar,
        jnp.arcsin(jnp.clip(C, -1.0, 1.0)),
    )
    return ra_out, dec_out


def rotation_equatorial_precession(epoch_from: ArrayLike, epoch_to: ArrayLike) -> Array:
    """Compute the 3x3 precession matrix between two mean equatorial frames.

    Returns the matrix ``Rz(-z) @ Ry(θ) @ Rz(-ζ)``.

    Args:
        epoch_from: Starting equinox as a Julian epoch [years].
        epoch_to: Target equinox as a Julian epoch [years].

    Returns:
        3x3 rotation matrix (mean equator of *epoch_from* -> of *epoch_to*).
    """
    p = equatorial_precessor(epoch_from, epoch_to)
    return Rz(-p.z) @ Ry(p.theta) @ Rz(-p.zeta)


def precess_rectangular_equatorial(
    r_eq: ArrayLike, epoch_from: ArrayLike, epoch_to: ArrayLike
) -> Array:
    """Precess a Cartesian equatorial position between mean equinoxes.

    Args:
        r_eq: Position ``[x, y, z]`` referred to the equator and equinox
            of *epoch_from*.
        epoch_from: Starting equinox as a Julian epoch [years].
        epoch_to: Target equinox as a Julian epoch [years].

    Returns:
        Position ``[x, y, z]`` referred to the equinox of *epoch_to*.
    """
    r_eq = jnp.asarray(r_eq, dtype=get_dtype())
    return rotation_equatorial_precession(epoch_from, epoch_to) @ r_eq


class EclipticPrecessor(NamedTuple):
    """Ecliptic precession quantities between two equinoxes.

    Attributes:
        eta: Inclination η of the target ecliptic on the starting one [rad].
        pi: Longitude Π of the node of the two ecliptics [rad].
        p: General precession in longitude [rad].
    """

    eta: Array
    pi: Array
    p: Array


def ecliptic_precessor(epoch_from: ArrayLike, epoch_to: ArrayLike) -> EclipticPrecessor:
    """Compute the ecliptic precession quantities η, Π, p.

    Args:
        epoch_from: Starting equinox as a Julian epoch [years].
        epoch_to: Target equinox as a Julian epoch [years].

    Returns:
        :class:`EclipticPrecessor` with angles in radians.

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 21.5.
    """
    T, t = _centuries(epoch_from, epoch_to)

    eta = horner(t, [horner(T, [47.0029, -0.06603, 0.000598]), -0.03302 + 0.000598 * T, 0.000060]) * t
    pi_as = horner(t, [horner(T, [0.0, 3289.4789, 0.60622]), -869.8089 - 0.50491 * T, 0.03536])
    p = horner(t, [horner(T, [5029.0966, 2.22226, -0.000042]), 1.11113 - 0.000042 * T, -0.000006]) * t

    return EclipticPrecessor(
        eta=eta * AS2RAD,
        pi=174.876384 * DEG2RAD + pi_as * AS2RAD,
        p=p * AS2RAD,
    )


def precess_ecliptic(
    lon: ArrayLike, lat: ArrayLike, epoch_from: ArrayLike, epoch_to: ArrayLike
) -> tuple[Array, Array]:
    """Precess ecliptic coordinates from one mean equinox to another.

    Args:
        lon: Ecliptic longitude λ referred to *epoch_from* [rad].
        lat: Ecliptic latitude β referred to *epoch_from* [rad].
        epoch_from: Starting equinox as a Julian epoch [years].
        epoch_to: Target equinox as a Julian epoch [years].

    Returns:
        Tuple of (longitude in ``[0, 2π)``, latitude) [rad].

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 21.7.

    Examples:
        ```python
        import jax.numpy as jnp
        from ephemjax.frames import J2000_EPOCH, precess_ecliptic
        lon, lat = precess_ecliptic(
            jnp.deg2rad(149.48194), jnp.deg2rad(1.76549), J2000_EPOCH, -213.47
        )
        ```
    """
    dtype = get_dtype()
    lon = jnp.asarray(lon, dtype=dtype)
    lat = jnp.asarray(lat, dtype=dtype)

    q = ecliptic_precessor(epoch_from, epoch_to)
    s_eta, c_eta = jnp.sin(q.eta), jnp.cos(q.eta)
    s_lat, c_lat = jnp.sin(lat), jnp.cos(lat)
    s_d, c_d = jnp.sin(q.pi - lon), jnp.cos(q.pi - lon)

    A = c_eta * c_lat * s_d - s_eta * s_lat
    B = c_lat * c_d
    C = c_eta * s_lat + s_eta * c_lat * s_d

    lon_out = wrap_to_2pi(q.p + q.pi - jnp.arctan2(A, B))
    lat_out = jnp.arcsin(jnp.clip(C, -1.0, 1.0))
    return lon_out, lat_out


def reduce_elements(
    inclination: ArrayLike,
    node: ArrayLike,
    peri: ArrayLike,
    epoch_from: ArrayLike,
    epoch_to: ArrayLike,
) -> tuple[Array, Array, Array]:
    """Reduce ecliptic orbital elements from one equinox to another.

    Args:
        inclination: Inclination i [rad].
        node: Longitude of the ascending node Ω [rad].
        peri: Argument of perihelion ω [rad].
        epoch_from: Starting equinox as a Julian epoch [years].
        epoch_to: Target equinox as a Julian epoch [years].

    Returns:
        Tuple of (i, Ω in ``[0, 2π)``, ω in ``[0, 2π)``) [rad].

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 24.1-24.3.
    """
    dtype = get_dtype()
    inclination = jnp.asarray(inclination, dtype=dtype)
    node = jnp.asarray(node, dtype=dtype)
    peri = jnp.asarray(peri, dtype=dtype)

    q = ecliptic_precessor(epoch_from, epoch_to)
    s_eta, c_eta = jnp.sin(q.eta), jnp.cos(q.eta)
    s_i, c_i = jnp.sin(inclination), jnp.cos(inclination)
    s_d, c_d = jnp.sin(node - q.pi), jnp.cos(node - q.pi)

    inc_out = jnp.arccos(jnp.clip(c_i * c_eta + s_i * s_eta * c_d, -1.0, 1.0))
    node_out = jnp.arctan2(s_i * s_d, c_eta * s_i * c_d - s_eta * c_i) + q.pi + q.p
    peri_out = jnp.arctan2(-s_eta * s_d, s_i * c_eta - c_i * s_eta * c_d) + peri

    return inc_out, wrap_to_2pi(node_out), wrap_to_2pi(peri_out)


def reduce_elements_b1950_to_j2000(
    inclination: ArrayLike, node: ArrayLike, peri: ArrayLike
) -> tuple[Array, Array, Array]:
    """Reduce ecliptic orbital elements from the B1950 equinox to J2000.

    Uses the fixed reduction angles valid when the elements are already
    referred to the FK5 system.

    Args:
        inclination: Inclination i [rad].
        node: Longitude of the ascending node Ω [rad].
        peri: Argument of perihelion ω [rad].

    Returns:
        Tuple of (i, Ω, ω) referred to J2000.0 [rad].

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, eq. 24.4.
    """
    dtype = get_dtype()
    inclination = jnp.asarray(inclination, dtype=dtype)
    node = jnp.asarray(node, dtype=dtype)
    peri = jnp.asarray(peri, dtype=dtype)

    w = node - _B1950_NODE_OFFSET
    s_w, c_w = jnp.sin(w), jnp.cos(w)
    s_i, c_i = jnp.sin(inclination), jnp.cos(inclination)

    A = s_i * s_w
    B = _B1950_C * s_i * c_w - _B1950_S * c_i

    inc_out = jnp.arcsin(jnp.clip(jnp.hypot(A, B), -1.0, 1.0))
    node_out = _J2000_NODE_OFFSET + jnp.arctan2(A, B)
    peri_out = peri + jnp.arctan2(-_B1950_S * s_w, _B1950_C * s_i - _B1950_S * c_i * c_w)

    return inc_out, wrap_to_2pi(node_out), wrap_to_2pi(peri_out)


def reduce_elements_b1950_fk4_to_j2000_fk5(
    inclination: ArrayLike, node: ArrayLike, peri: ArrayLike
) -> tuple[Array, Array, Array]:
    """Reduce orbital elements from the FK4 B1950 system to FK5 J2000.

    Includes the FK4 equinox correction in addition to precession.

    Args:
        inclination: Inclination i [rad].
        node: Longitude of the ascending node Ω [rad].
        peri: Argument of perihelion ω [rad].

    Returns:
        Tuple of (i, Ω, ω) referred to FK5 J2000.0 [rad].

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, pp. 161-162.
    """
    dtype = get_dtype()
    inclination = jnp.asarray(inclination, dtype=dtype)
    node = jnp.asarray(node, dtype=dtype)
    peri = jnp.asarray(peri, dtype=dtype)

    w = _FK4_L + node
    s_w, c_w = jnp.sin(w), jnp.cos(w)
    s_i, c_i = jnp.sin(inclination), jnp.cos(inclination)
    s_j, c_j = jnp.sin(_FK4_J), jnp.cos(_FK4_J)

    inc_out = jnp.arccos(jnp.clip(c_i * c_j - s_i * s_j * c_w, -1.0, 1.0))
    node_out = jnp.arctan2(s_i * s_w, c_i * s_j + s_i * c_j * c_w) - _FK4_L_PRIME
    peri_out = peri + jnp.arctan2(s_j * s_w, s_i * c_j + c_i * s_j * c_w)

    return inc_out, wrap_to_2pi(node_out), wrap_to_2pi(peri_out)
