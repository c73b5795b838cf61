"""Obliquity of the ecliptic.

The ecliptic-equatorial rotation needs the obliquity of the date.  The
mean obliquity is computed here from the IAU 2006 polynomial; the true
obliquity additionally needs the nutation in obliquity, which callers
supply from their own nutation model.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.constants import AS2RAD, OBLIQUITY_J2000


def mean_obliquity(tau: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession.

    Args:
        tau: Julian millennia of TT from J2000.0.

    Returns:
        Mean obliquity in radians.

    References:
        N. Capitaine et al., "Expressions for IAU 2000 precession
        quantities", A&A 412, 567-586, 2003, eq. 39.

    Examples:
        ```python
        from ephemjax.frames import mean_obliquity
        eps = mean_obliquity(0.0)  # 84381.406 arcsec
        ```
    """
    t = jnp.asarray(tau, dtype=get_dtype()) * 10.0
    eps0 = OBLIQUITY_J2000 + t * (
        -46.836769 + t * (-0.0001831 + t * (0.00200340 + t * (-0.000000576 + t * (-0.0000000434))))
    )
    return eps0 * AS2RAD


def true_obliquity(tau: ArrayLike, deps: ArrayLike) -> Array:
    """True obliquity: mean obliquity plus nutation in obliquity.

    Args:
        tau: Julian millennia of TT from J2000.0.
        deps: Nutation in obliquity [rad].

    Returns:
        True obliquity in radians.
    """
    return mean_obliquity(tau) + jnp.asarray(deps, dtype=get_dtype())
