"""Capability interface shared by all planet position models."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from jax import Array
from jax.typing import ArrayLike

from ephemjax.body import Body


@runtime_checkable
class PositionSource(Protocol):
    """Anything that produces heliocentric ``[L, B, R]`` of a body at ``τ``.

    Implemented by :class:`~ephemjax.planets.SeriesPlanet` (periodic
    series) and :class:`~ephemjax.planets.ElementsPlanet` (Keplerian
    elements).  Callers that only need positions should depend on this
    protocol rather than on either variant.
    """

    @property
    def body(self) -> Body: ...

    def position_at_epoch(self, tau: ArrayLike) -> Array:
        """Heliocentric ecliptic ``[L, B, R]`` referred to the equinox of date."""
        ...

    def position_at_j2000(self, tau: ArrayLike) -> Array:
        """Heliocentric ecliptic ``[L, B, R]`` referred to the J2000.0 equinox."""
        ...
