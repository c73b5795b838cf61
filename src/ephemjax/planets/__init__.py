"""Planet position models.

Provides two interchangeable implementations of :class:`PositionSource`:

- :class:`SeriesPlanet`: evaluates a VSOP87-style series table, with
  geocentric, equatorial and FK5 conveniences.
- :class:`ElementsPlanet`: propagates JPL approximate Keplerian elements.

:class:`BodyRegistry` maps bodies to tables and hands out
:class:`SeriesPlanet` instances.
"""

from ephemjax.planets._types import PositionSource
from ephemjax.planets.elements_planet import ElementsPlanet
from ephemjax.planets.registry import BodyRegistry, default_registry
from ephemjax.planets.series_planet import SeriesPlanet, epoch_of_date, sun_position

__all__ = [
    "BodyRegistry",
    "ElementsPlanet",
    "PositionSource",
    "SeriesPlanet",
    "default_registry",
    "epoch_of_date",
    "sun_position",
]
