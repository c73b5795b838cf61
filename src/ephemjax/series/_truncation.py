"""Worst-case truncation of periodic-series tables.

A term of power ``n`` contributes at most ``|A| * T**n`` over a horizon
of ``T`` Julian centuries.  Truncation keeps each term whose bound
reaches the axis threshold and drops the rest.  Terms are judged
independently; there is no cumulative error budget.

Truncation never mutates its input and is idempotent: truncating an
already-truncated table with the same or a looser truncation retains the same
terms.
"""

from __future__ import annotations

import logging
import math

from ephemjax.series._types import Series, Table, Term, TruncationSpec

logger = logging.getLogger(__name__)


def worst_case_magnitude(term: Term, power: int, horizon: float) -> float:
    """Largest contribution of *term* over the horizon.

    Args:
        term: Periodic term.
        power: Power of ``τ`` multiplying the term's series.
        horizon: Horizon ``T`` in Julian centuries.

    Returns:
        ``|A| * T**power``; ``|A|`` for power zero.
    """
    if power == 0:
        return abs(term.amplitude)
    return abs(term.amplitude) * horizon**power


def truncate_series(series: Series, threshold: float, horizon: float) -> Series:
    """Drop the terms of *series* whose worst-case contribution is below *threshold*.

    Args:
        series: Series to truncate.
        threshold: Minimum worst-case contribution, in the axis's native unit.
        horizon: Horizon ``T`` in Julian centuries.

    Returns:
        New :class:`Series` with the retained terms in their original order.

    Raises:
        ValueError: If *threshold* or *horizon* is non-positive or not finite.
    """
    if not math.isfinite(threshold) or threshold <= 0.0:
        raise ValueError(f"Truncation threshold must be positive and finite, got {threshold}")
    if not math.isfinite(horizon) or horizon <= 0.0:
        raise ValueError(f"Truncation horizon must be positive and finite, got {horizon}")

    kept = tuple(
        t for t in series.terms
        if worst_case_magnitude(t, series.power, horizon) >= threshold
    )
    return Series(series.axis, series.power, kept)


def truncate_table(table: Table, spec: TruncationSpec) -> Table:
    """Return a reduced copy of *table* following *spec*.

    Axes without a threshold in *spec* are carried over unchanged.  The
    power structure of every axis is preserved even when a series loses
    all of its terms.

    Args:
        table: Full table.
        spec: Thresholds and horizon.

    Returns:
        New :class:`Table` with the same name, equinox and body.

    Examples:
        ```python
        from ephemjax.body import Body
        from ephemjax.series import TruncationSpec, load_default_table, truncate_table
        full = load_default_table(Body.VENUS)
        small = truncate_table(full, TruncationSpec.from_arcseconds(30.0, L=1.0, B=1.0, R=1e-6))
        ```
    """
    axes = {}
    for axis, series_list in table.axes.items():
        threshold = spec.threshold(axis)
        if threshold is None:
            axes[axis] = series_list
            continue
        axes[axis] = tuple(truncate_series(s, threshold, spec.horizon) for s in series_list)

    truncated = Table(name=table.name, axes=axes, equinox=table.equinox, body=table.body)
    logger.debug(
        "Truncated table '%s' over %.1f centuries: kept %d of %d terms",
        table.name,
        spec.horizon,
        truncated.term_count(),
        table.term_count(),
    )
    return truncated
