"""Spherical-rectangular coordinate conversions.

Converts between spherical coordinates ``[lon, lat, r]`` (longitude,
latitude, radius) and Cartesian coordinates ``[x, y, z]`` in the same
frame.  The frame itself (ecliptic or equatorial, any equinox) is left
unchanged.

Angles are in radians unless ``use_degrees=True``; distances are in
the caller's unit (AU for series positions).
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.utils import is_concrete, wrap_to_2pi


def position_spherical_to_rectangular(
    x_sph: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert spherical coordinates to Cartesian coordinates.

    Args:
        x_sph: Spherical coordinates ``[lon, lat, r]``.
            Longitude and latitude in *rad* (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret longitude and latitude as degrees.

    Returns:
        jax.Array: Cartesian position ``[x, y, z]``, same unit as ``r``.

    Example:
        >>> import jax.numpy as jnp
        >>> from ephemjax.frames import position_spherical_to_rectangular
        >>> xyz = position_spherical_to_rectangular(jnp.array([0.0, 0.0, 1.0]))
        >>> float(xyz[0])
        1.0
    """
    x_sph = jnp.asarray(x_sph, dtype=get_dtype())

    lon = x_sph[0]
    lat = x_sph[1]
    r = x_sph[2]

    if use_degrees:
        lon = jnp.deg2rad(lon)
        lat = jnp.deg2rad(lat)

    x = r * jnp.cos(lat) * jnp.cos(lon)
    y = r * jnp.cos(lat) * jnp.sin(lon)
    z = r * jnp.sin(lat)

    return jnp.array([x, y, z])


def position_rectangular_to_spherical(
    x_rect: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert Cartesian coordinates to spherical coordinates.

    Longitude is returned in ``[0, 2π)`` and latitude in ``[-π/2, π/2]``,
    so a round trip from spherical coordinates recovers the input
    longitude modulo ``2π``.

    Args:
        x_rect: Cartesian position ``[x, y, z]``.
        use_degrees: If ``True``, return longitude and latitude in degrees.

    Returns:
        jax.Array: Spherical coordinates ``[lon, lat, r]``.

    Raises:
        ValueError: If the position is concrete and its radius is zero,
            since longitude and latitude are then undefined.
            A traced zero-length position evaluates to NaN instead.

    Example:
        >>> import jax.numpy as jnp
        >>> from ephemjax.frames import position_rectangular_to_spherical
        >>> lbr = position_rectangular_to_spherical(jnp.array([0.0, 2.0, 0.0]))
        >>> float(lbr[2])
        2.0
    """
    x_rect = jnp.asarray(x_rect, dtype=get_dtype())

    x = x_rect[0]
    y = x_rect[1]
    z = x_rect[2]

    rho = jnp.sqrt(x * x + y * y)
    r = jnp.sqrt(rho * rho + z * z)

    if is_concrete(r) and float(r) == 0.0:
        raise ValueError("Cannot convert a zero-length vector to spherical coordinates")

    lon = wrap_to_2pi(jnp.arctan2(y, x))
    lat = jnp.arctan2(z, rho)

    if use_degrees:
        lon = jnp.rad2deg(lon)
        lat = jnp.rad2deg(lat)

    # a traced zero-length vector has no direction
    return jnp.where(r == 0.0, jnp.nan, jnp.array([lon, lat, r]))
