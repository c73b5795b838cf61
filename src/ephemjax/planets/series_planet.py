"""Planet positions from periodic-series tables.

:class:`SeriesPlanet` binds one :class:`~ephemjax.series.Table` to a
:class:`~ephemjax.body.Body`.  The table is evaluated directly in its
native equinox; the other equinox is reached through ecliptic
precession.  Nothing is cached: every query is an independent
evaluation of the series.

Positions are heliocentric ecliptic ``[L, B, R]`` with ``L`` in
``[0, 2π)``, ``B`` in radians and ``R`` in AU.  Time is ``τ``, Julian
millennia of dynamical time from J2000.0
(see :func:`ephemjax.time.julian_millennia`).
"""

from __future__ import annotations

from dataclasses import dataclass

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.body import Body
from ephemjax.config import get_dtype
from ephemjax.constants import LIGHT_TIME_AU, JULIAN_MILLENNIUM
from ephemjax.frames.ecliptic import ecliptic_to_equatorial, heliocentric_to_geocentric
from ephemjax.frames.fk5 import to_fk5
from ephemjax.frames.obliquity import mean_obliquity
from ephemjax.frames.precession import J2000_EPOCH, precess_ecliptic
from ephemjax.frames.spherical import (
    position_rectangular_to_spherical,
    position_spherical_to_rectangular,
)
from ephemjax.planets._types import PositionSource
from ephemjax.series import Equinox, Table, evaluate_rectangular, evaluate_spherical
from ephemjax.utils import check_finite, wrap_to_2pi

_LIGHT_TIME_ITERATIONS = 2


def epoch_of_date(tau: ArrayLike) -> Array:
    """Julian epoch [years] of the equinox of date for ``τ``."""
    return J2000_EPOCH + jnp.asarray(tau, dtype=get_dtype()) * 1000.0


def _precess_lbr(lbr: Array, epoch_from: ArrayLike, epoch_to: ArrayLike) -> Array:
    lon, lat = precess_ecliptic(lbr[0], lbr[1], epoch_from, epoch_to)
    return jnp.array([lon, lat, lbr[2]])


@dataclass(frozen=True)
class SeriesPlanet:
    """Series-backed position model of one body.

    Attributes:
        body: Body modelled.
        table: Coefficient table, full or truncated.  It may be shared
            with other planets; it is never modified.

    Raises:
        ValueError: If the table declares a different body.

    Examples:
        ```python
        from ephemjax.body import Body
        from ephemjax.planets import SeriesPlanet
        from ephemjax.series import load_default_table
        venus = SeriesPlanet(Body.VENUS, load_default_table(Body.VENUS))
        lbr = venus.position_at_epoch(-0.007032169747)
        ```
    """

    body: Body
    table: Table

    def __post_init__(self):
        if self.table.body is not None and self.table.body is not self.body:
            raise ValueError(
                f"Table '{self.table.name}' describes {self.table.body.value}, "
                f"not {self.body.value}"
            )

    def _native_position(self, tau: ArrayLike) -> Array:
        check_finite(tau, "tau")
        if self.table.is_spherical:
            lbr = evaluate_spherical(self.table, tau)
        else:
            lbr = position_rectangular_to_spherical(evaluate_rectangular(self.table, tau))
        return jnp.array([wrap_to_2pi(lbr[0]), lbr[1], lbr[2]])

    def position_at_epoch(self, tau: ArrayLike) -> Array:
        """Heliocentric ecliptic position referred to the equinox of date.

        Args:
            tau: Julian millennia from J2000.0.

        Returns:
            ``[L, B, R]`` [rad, rad, AU]. Shape ``(3,)``.

        Raises:
            ValueError: If *tau* is concrete and not finite.
        """
        lbr = self._native_position(tau)
        if self.table.equinox is Equinox.DATE:
            return lbr
        return _precess_lbr(lbr, J2000_EPOCH, epoch_of_date(tau))

    def position_at_j2000(self, tau: ArrayLike) -> Array:
        """Heliocentric ecliptic position referred to the J2000.0 equinox.

        Args:
            tau: Julian millennia from J2000.0.

        Returns:
            ``[L, B, R]`` [rad, rad, AU]. Shape ``(3,)``.

        Raises:
            ValueError: If *tau* is concrete and not finite.
        """
        lbr = self._native_position(tau)
        if self.table.equinox is Equinox.J2000:
            return lbr
        return _precess_lbr(lbr, epoch_of_date(tau), J2000_EPOCH)

    def position_rectangular(self, tau: ArrayLike, equinox: Equinox = Equinox.DATE) -> Array:
        """Heliocentric ecliptic rectangular position.

        Args:
            tau: Julian millennia from J2000.0.
            equinox: Equinox to refer the coordinates to.

        Returns:
            ``[x, y, z]`` in AU. Shape ``(3,)``.
        """
        if Equinox(equinox) is Equinox.DATE:
            lbr = self.position_at_epoch(tau)
        else:
            lbr = self.position_at_j2000(tau)
        return position_spherical_to_rectangular(lbr)

    def to_fk5(self, lon: ArrayLike, lat: ArrayLike, tau: ArrayLike) -> tuple[Array, Array]:
        """Apply the FK5 correction to a longitude and latitude of this body.

        Args:
            lon: Heliocentric ecliptic longitude [rad].
            lat: Heliocentric ecliptic latitude [rad].
            tau: Julian millennia from J2000.0.

        Returns:
            Tuple of (L, B) in the FK5 system [rad].
        """
        return to_fk5(lon, lat, tau)

    def geocentric_position(
        self, earth: PositionSource, tau: ArrayLike, light_time: bool = True
    ) -> Array:
        """Geocentric ecliptic position referred to the equinox of date.

        With ``light_time=True`` the body is evaluated at the time the
        observed light left it, giving the geometric position corrected
        for light-time but not for aberration or nutation.

        Args:
            earth: Position model of the Earth.
            tau: Julian millennia from J2000.0.
            light_time: Correct for light-time. Default: ``True``.

        Returns:
            ``[λ, β, Δ]`` [rad, rad, AU]. Shape ``(3,)``.
        """
        earth_lbr = earth.position_at_epoch(tau)
        geo = heliocentric_to_geocentric(self.position_at_epoch(tau), earth_lbr)
        if light_time:
            for _ in range(_LIGHT_TIME_ITERATIONS):
                tau_emit = tau - geo[2] * LIGHT_TIME_AU / JULIAN_MILLENNIUM
                geo = heliocentric_to_geocentric(self.position_at_epoch(tau_emit), earth_lbr)
        return geo

    def equatorial_position(
        self,
        earth: PositionSource,
        tau: ArrayLike,
        obliquity: ArrayLike | None = None,
        light_time: bool = True,
    ) -> Array:
        """Geocentric equatorial position referred to the equinox of date.

        Args:
            earth: Position model of the Earth.
            tau: Julian millennia from J2000.0.
            obliquity: Obliquity of the ecliptic [rad].  Defaults to the
                mean obliquity of date; pass the true obliquity for true
                places.
            light_time: Correct for light-time. Default: ``True``.

        Returns:
            ``[α, δ, Δ]`` [rad, rad, AU]. Shape ``(3,)``.
        """
        if obliquity is None:
            obliquity = mean_obliquity(tau)
        geo = self.geocentric_position(earth, tau, light_time=light_time)
        ra, dec = ecliptic_to_equatorial(geo[0], geo[1], obliquity)
        return jnp.array([ra, dec, geo[2]])


def sun_position(earth: PositionSource, tau: ArrayLike) -> Array:
    """Geometric geocentric ecliptic position of the Sun.

    Args:
        earth: Position model of the Earth.
        tau: Julian millennia from J2000.0.

    Returns:
        ``[λ, β, R]`` referred to the equinox of date [rad, rad, AU].

    References:
        J. Meeus, *Astronomical Algorithms (2nd Ed.)*, 1998, chapter 25.
    """
    lbr = earth.position_at_epoch(tau)
    return jnp.array([wrap_to_2pi(lbr[0] + jnp.pi), -lbr[1], lbr[2]])
