"""Evaluation of periodic-series tables.

Each axis is the polynomial ``Σₙ τⁿ · Sₙ(τ)`` where ``Sₙ`` is the series
of power ``n``.  Powers are combined in Horner form, from the highest
power down.  Results are raw: radians for L and B (longitude is *not*
reduced to ``[0, 2π)``) and AU for R, X, Y, Z.

``τ`` outside the fitted range of a theory is accepted; accuracy simply
degrades.  Non-finite ``τ`` is rejected when concrete.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from ephemjax.config import get_dtype
from ephemjax.series._types import Axis, Series, Table
from ephemjax.utils import check_finite


def series_value(series: Series, tau: ArrayLike) -> Array:
    """Sum of the terms of one series at ``τ``, without the ``τⁿ`` factor."""
    return series.value(tau)


def axis_value(table: Table, axis: Axis | str, tau: ArrayLike) -> Array:
    """Evaluate one coordinate of *table* at ``τ``.

    Args:
        table: Series table.
        axis: Axis to evaluate.
        tau: Julian millennia from J2000.0.

    Returns:
        ``Σₙ τⁿ · Sₙ(τ)``; zero if the table has no series for *axis*.
    """
    tau = jnp.asarray(tau, dtype=get_dtype())
    series_list = table.axes.get(Axis.from_name(axis), ())

    value = jnp.zeros_like(tau)
    for series in reversed(series_list):
        value = value * tau + series.value(tau)
    return value


def evaluate_position(table: Table, tau: ArrayLike) -> dict[Axis, Array]:
    """Evaluate every axis present in *table*.

    Args:
        table: Series table.
        tau: Julian millennia from J2000.0.

    Returns:
        Mapping of axis to value.

    Raises:
        ValueError: If *tau* is concrete and not finite.

    Examples:
        ```python
        from ephemjax.body import Body
        from ephemjax.series import Axis, evaluate_position, load_default_table
        pos = evaluate_position(load_default_table(Body.VENUS), -0.007032169747)
        pos[Axis.R]  # ~0.724602 AU
        ```
    """
    check_finite(tau, "tau")
    return {axis: axis_value(table, axis, tau) for axis in table.axes}


def evaluate_spherical(table: Table, tau: ArrayLike) -> Array:
    """Evaluate a spherical table as ``[L, B, R]``.

    Axes missing from the table contribute zero.

    Args:
        table: Table with L, B, R series.
        tau: Julian millennia from J2000.0.

    Returns:
        ``[L (rad), B (rad), R (AU)]``. Shape ``(3,)``.

    Raises:
        ValueError: If the table is rectangular or *tau* is not finite.
    """
    if not table.is_spherical:
        raise ValueError(f"Table '{table.name}' is rectangular, not spherical")
    check_finite(tau, "tau")
    return jnp.stack([axis_value(table, axis, tau) for axis in (Axis.L, Axis.B, Axis.R)])


def evaluate_rectangular(table: Table, tau: ArrayLike) -> Array:
    """Evaluate a rectangular table as ``[X, Y, Z]``.

    Args:
        table: Table with X, Y, Z series.
        tau: Julian millennia from J2000.0.

    Returns:
        ``[X, Y, Z]`` in AU. Shape ``(3,)``.

    Raises:
        ValueError: If the table is spherical or *tau* is not finite.
    """
    if table.is_spherical:
        raise ValueError(f"Table '{table.name}' is spherical, not rectangular")
    check_finite(tau, "tau")
    return jnp.stack([axis_value(table, axis, tau) for axis in (Axis.X, Axis.Y, Axis.Z)])
