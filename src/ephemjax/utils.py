"""Shared utility functions for angle handling and argument checks.

These helpers wrap the ``use_degrees`` convention used throughout
ephemjax, providing JAX-traceable degree/radian conversion via
``jnp.where``, plus polynomial evaluation and finite-value guards
that are skipped when arguments are being traced.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.core import Tracer
from jax.typing import ArrayLike

from ephemjax.constants import TWO_PI


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def wrap_to_2pi(angle: ArrayLike) -> Array:
    """Reduce an angle to the interval ``[0, 2π)``.

    Args:
        angle: Angle in radians.

    Returns:
        Equivalent angle in ``[0, 2π)``.
    """
    return jnp.mod(angle, TWO_PI)


def horner(x: ArrayLike, coeffs: Sequence[ArrayLike]) -> Array:
    """Evaluate ``c[0] + c[1]*x + c[2]*x**2 + ...`` in Horner form.

    Args:
        x: Polynomial argument.
        coeffs: Coefficients in ascending order of power.

    Returns:
        Polynomial value.

    Examples:
        ```python
        from ephemjax.utils import horner
        horner(2.0, [1.0, 0.0, 3.0])  # 1 + 3 * 4 = 13
        ```
    """
    if len(coeffs) == 0:
        return jnp.zeros_like(jnp.asarray(x))
    acc = jnp.asarray(coeffs[-1])
    for c in reversed(coeffs[:-1]):
        acc = acc * x + c
    return acc


def is_concrete(value) -> bool:
    """Return ``True`` when *value* holds a concrete (non-traced) value."""
    return not isinstance(value, Tracer)


def check_finite(value, name: str) -> None:
    """Raise if a concrete argument contains NaN or infinity.

    Traced values are accepted unchecked, so callers stay ``jax.jit``
    compatible.

    Args:
        value: Scalar or array to check.
        name: Argument name used in the error message.

    Raises:
        ValueError: If *value* is concrete and not finite.
    """
    if not is_concrete(value):
        return
    if isinstance(value, (int, float)):
        ok = math.isfinite(value)
    else:
        ok = bool(np.all(np.isfinite(np.asarray(value))))
    if not ok:
        raise ValueError(f"{name} must be finite, got {value}")
