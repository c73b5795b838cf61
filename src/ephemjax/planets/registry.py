"""Explicit ownership of coefficient tables by body.

A :class:`BodyRegistry` is an immutable mapping from :class:`Body` to
:class:`~ephemjax.series.Table`, built by whoever loads the tables and
passed to the code that needs them.  There is no process-wide registry:
:func:`default_registry` builds a fresh one on every call.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ephemjax.body import Body
from ephemjax.planets.series_planet import SeriesPlanet
from ephemjax.series import Table, TruncationSpec, default_table_bodies, load_default_table, truncate_table

logger = logging.getLogger(__name__)


class BodyRegistry(Mapping):
    """Read-only mapping of body to coefficient table.

    Args:
        tables: Tables keyed by body.

    Raises:
        ValueError: If a key is not a :class:`Body` or a table declares
            a different body than its key.

    Examples:
        ```python
        from ephemjax.body import Body
        from ephemjax.planets import default_registry
        registry = default_registry([Body.VENUS, Body.EARTH])
        venus = registry.planet(Body.VENUS)
        ```
    """

    def __init__(self, tables: Mapping[Body, Table]):
        checked = {}
        for body, table in tables.items():
            if not isinstance(body, Body):
                raise ValueError(f"Registry keys must be Body members, got {body!r}")
            if table.body is not None and table.body is not body:
                raise ValueError(
                    f"Table '{table.name}' describes {table.body.value}, "
                    f"registered as {body.value}"
                )
            checked[body] = table
        self._tables = MappingProxyType(checked)

    def __getitem__(self, body: Body) -> Table:
        try:
            return self._tables[body]
        except KeyError:
            raise KeyError(
                f"No table registered for {body}. Registered: "
                f"{', '.join(b.value for b in self._tables)}"
            ) from None

    def __iter__(self) -> Iterator[Body]:
        return iter(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"BodyRegistry({', '.join(b.value for b in self._tables)})"

    def planet(self, body: Body) -> SeriesPlanet:
        """Return a :class:`SeriesPlanet` bound to the table of *body*.

        Raises:
            KeyError: If no table is registered for *body*.
        """
        return SeriesPlanet(body, self[body])

    def truncated(self, spec: TruncationSpec) -> BodyRegistry:
        """Return a new registry with every table truncated by *spec*."""
        return BodyRegistry({body: truncate_table(table, spec) for body, table in self._tables.items()})


def default_registry(bodies: Iterable[Body | str] | None = None) -> BodyRegistry:
    """Build a registry from the bundled tables.

    Args:
        bodies: Bodies to load, as members or names. Defaults to every body
            with a bundled table.

    Returns:
        New :class:`BodyRegistry`; tables are rebuilt on every call.

    Raises:
        ValueError: If *bodies* names an unknown body.
    """
    if bodies is None:
        bodies = default_table_bodies()
    tables = (load_default_table(body) for body in bodies)
    registry = BodyRegistry({table.body: table for table in tables})
    logger.debug("Built default registry: %r", registry)
    return registry
