"""Factory functions for creating Table instances.

Provides convenience constructors for the supported coefficient sources:

- :func:`load_table_from_vsop87_file`: Load a VSOP87 text file.
- :func:`load_default_table`: Load one of the bundled VSOP87D files.
- :func:`default_table_bodies`: Bodies with a bundled table.

Every call builds a new table; nothing is cached at module level.
"""

from __future__ import annotations

import importlib.resources
import logging
from pathlib import Path

from ephemjax.body import Body
from ephemjax.series._parsers import parse_vsop87_text
from ephemjax.series._types import Table

logger = logging.getLogger(__name__)

_PACKAGED_TABLES = {
    Body.MERCURY: "VSOP87D.mer",
    Body.VENUS: "VSOP87D.ven",
    Body.EARTH: "VSOP87D.ear",
    Body.MARS: "VSOP87D.mar",
    Body.JUPITER: "VSOP87D.jup",
    Body.SATURN: "VSOP87D.sat",
    Body.URANUS: "VSOP87D.ura",
    Body.NEPTUNE: "VSOP87D.nep",
}


def load_table_from_vsop87_file(filepath: str | Path, name: str | None = None) -> Table:
    """Load a table from a VSOP87 coefficient file.

    Args:
        filepath: Path to a VSOP87 file (e.g. ``VSOP87D.ven``).
        name: Table name. Defaults to ``"VSOP87<version> <body>"``.

    Returns:
        Validated, immutable :class:`Table`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file holds no valid VSOP87 data.

    Examples:
        ```python
        from ephemjax.series import load_table_from_vsop87_file
        table = load_table_from_vsop87_file("path/to/VSOP87D.ven")
        ```
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"VSOP87 file not found: {filepath}")

    logger.info("Loading VSOP87 table from %s", filepath)
    return parse_vsop87_text(filepath.read_text(), name=name)


def default_table_bodies() -> tuple[Body, ...]:
    """Bodies for which :func:`load_default_table` has a bundled file."""
    return tuple(_PACKAGED_TABLES)


def load_default_table(body: Body | str) -> Table:
    """Load the bundled VSOP87D table for *body*.

    Uses ``importlib.resources`` to locate the coefficient file bundled
    with the package.  The tables hold every term of the theory and are
    referred to the mean dynamical ecliptic and equinox of date.

    Args:
        body: Body to load, as a :class:`Body` or a body name.

    Returns:
        New :class:`Table` with ``equinox == Equinox.DATE``.

    Raises:
        ValueError: If *body* is not a known body.

    Examples:
        ```python
        from ephemjax.body import Body
        from ephemjax.series import load_default_table
        venus = load_default_table(Body.VENUS)
        venus.term_count()
        ```
    """
    if not isinstance(body, Body):
        body = Body.from_name(body)
    filename = _PACKAGED_TABLES[body]
    data_pkg = importlib.resources.files("ephemjax.data.vsop87")
    resource = data_pkg.joinpath(filename)
    with importlib.resources.as_file(resource) as path:
        return load_table_from_vsop87_file(path)
