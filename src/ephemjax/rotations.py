"""Elementary frame rotations.

``Rx``, ``Ry`` and ``Rz`` rotate the *coordinate frame* (passive
rotation) counter-clockwise about the named axis, so that
``Rx(-eps) @ r_ecliptic`` expresses an ecliptic vector in the equatorial
frame of obliquity ``eps``.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.utils import to_radians


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle: Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees: Handle input in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    zero = jnp.zeros_like(c)
    one = jnp.ones_like(c)

    return jnp.array([[one, zero, zero],
                      [zero,  +c,   +s],
                      [zero,  -s,   +c]])


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the y-axis.

    Args:
        angle: Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees: Handle input in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    zero = jnp.zeros_like(c)
    one = jnp.ones_like(c)

    return jnp.array([[  +c, zero,   -s],
                      [zero,  one, zero],
                      [  +s, zero,   +c]])


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle: Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees: Handle input in degrees. Default: ``False``

    Returns:
        3x3 rotation matrix.
    """
    angle = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    zero = jnp.zeros_like(c)
    one = jnp.ones_like(c)

    return jnp.array([[  +c,   +s, zero],
                      [  -s,   +c, zero],
                      [zero, zero,  one]])
