"""Approximate planet positions from linearly varying Keplerian elements.

Implements the JPL algorithm: propagate the Table 1 elements to the
requested time, solve Kepler's equation, and rotate from the orbital
plane to the ecliptic.  The elements are referred to the J2000.0
ecliptic and equinox, so :meth:`ElementsPlanet.position_at_j2000` is the
direct evaluation and :meth:`ElementsPlanet.position_at_epoch` applies
ecliptic precession.

Accuracy is approximately 1 arcminute for inner planets and up to 10
arcminutes for outer planets over 1800-2050 AD.  For ``Body.EARTH`` the
elements describe the Earth-Moon barycenter.

References:
    E.M. Standish & J.G. Williams, "Keplerian Elements for
    Approximate Positions of the Major Planets",
    https://ssd.jpl.nasa.gov/planets/approx_pos.html
"""

from __future__ import annotations

from dataclasses import dataclass

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.body import Body
from ephemjax.config import get_dtype
from ephemjax.frames.precession import J2000_EPOCH, precess_ecliptic
from ephemjax.frames.spherical import position_rectangular_to_spherical
from ephemjax.planets._jpl_elements import ELEMENTS
from ephemjax.planets.series_planet import epoch_of_date
from ephemjax.rotations import Rx, Rz
from ephemjax.utils import check_finite


def _eccentric_anomaly(M: Array, e: Array) -> Array:
    """Solve Kepler's equation ``M = E - e * sin(E)`` for ``E`` [rad].

    Newton-Raphson iteration implemented with ``jax.lax.fori_loop`` for
    JAX traceability.
    """
    M = M % (2.0 * jnp.pi)

    # Initial guess: M for low eccentricity, pi for high eccentricity
    E0 = jnp.where(e < 0.8, M, jnp.pi)

    def newton_step(_, E):
        f = E - e * jnp.sin(E) - M
        return E - f / (1.0 - e * jnp.cos(E))

    return jax.lax.fori_loop(0, 10, newton_step, E0)


@dataclass(frozen=True)
class ElementsPlanet:
    """Keplerian-element position model of one body.

    Attributes:
        body: Body modelled.

    Examples:
        ```python
        from ephemjax.body import Body
        from ephemjax.planets import ElementsPlanet
        mars = ElementsPlanet(Body.MARS)
        lbr = mars.position_at_j2000(0.0245)
        ```
    """

    body: Body

    def position_rectangular_j2000(self, tau: ArrayLike) -> Array:
        """Heliocentric ecliptic rectangular position, J2000.0 equinox.

        Args:
            tau: Julian millennia from J2000.0.

        Returns:
            ``[x, y, z]`` in AU. Shape ``(3,)``.

        Raises:
            ValueError: If *tau* is concrete and not finite.
        """
        check_finite(tau, "tau")
        dtype = get_dtype()
        T = jnp.asarray(tau, dtype=dtype) * 10.0
        coeffs = jnp.asarray(ELEMENTS[self.body], dtype=dtype)

        # element = element_0 + element_dot * T
        a, e, incl, L, lon_peri, lon_node = coeffs[:, 0] + coeffs[:, 1] * T

        omega = jnp.deg2rad(lon_peri - lon_node)
        M = jnp.deg2rad(L - lon_peri)
        E = _eccentric_anomaly(M, e)

        # Orbital plane coordinates (AU)
        x_prime = a * (jnp.cos(E) - e)
        y_prime = a * jnp.sqrt(1.0 - e * e) * jnp.sin(E)
        r_orbital = jnp.array([x_prime, y_prime, 0.0])

        # Rotate from orbital plane to ecliptic: Rz(-lon_node) @ Rx(-incl) @ Rz(-omega)
        return Rz(-lon_node, use_degrees=True) @ (
            Rx(-incl, use_degrees=True) @ (Rz(-omega) @ r_orbital)
        )

    def position_at_j2000(self, tau: ArrayLike) -> Array:
        """Heliocentric ecliptic ``[L, B, R]`` referred to the J2000.0 equinox.

        Args:
            tau: Julian millennia from J2000.0.

        Returns:
            ``[L, B, R]`` [rad, rad, AU]. Shape ``(3,)``.
        """
        return position_rectangular_to_spherical(self.position_rectangular_j2000(tau))

    def position_at_epoch(self, tau: ArrayLike) -> Array:
        """Heliocentric ecliptic ``[L, B, R]`` referred to the equinox of date.

        Args:
            tau: Julian millennia from J2000.0.

        Returns:
            ``[L, B, R]`` [rad, rad, AU]. Shape ``(3,)``.
        """
        lbr = self.position_at_j2000(tau)
        lon, lat = precess_ecliptic(lbr[0], lbr[1], J2000_EPOCH, epoch_of_date(tau))
        return jnp.array([lon, lat, lbr[2]])
