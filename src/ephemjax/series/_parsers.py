"""Parsers for VSOP87 coefficient files.

Supports the fixed-column text format distributed by the Bureau des
Longitudes / IMCCE (``VSOP87A.ven`` ... ``VSOP87D.nep``).  Each block
starts with a header line such as::

     VSOP87 VERSION D2    VENUS     VARIABLE 1 (LBR)       *T**0    367 TERMS    MAIN PROBLEM

followed by one line per term.  The amplitude, phase and frequency of a
term are read from fixed columns 80-97, 98-111 and 112-131 (1-indexed).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import NamedTuple

from ephemjax.body import Body
from ephemjax.series._types import Axis, Equinox, Series, Table

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(
    r"^\s*VSOP87\s+VERSION\s+(?P<version>[A-E])\d\s+(?P<body>\w+)\s+"
    r"VARIABLE\s+(?P<variable>\d)\s+\((?P<coordinates>LBR|XYZ)\)\s+"
    r"\*T\*\*(?P<power>\d)\s+(?P<count>\d+)\s+TERMS"
)

# Column ranges for term lines (0-indexed Python slices)
_A_RANGE = slice(79, 97)
_B_RANGE = slice(97, 111)
_C_RANGE = slice(111, 131)
_TERM_MIN_LENGTH = 80

_AXES = {
    "LBR": (Axis.L, Axis.B, Axis.R),
    "XYZ": (Axis.X, Axis.Y, Axis.Z),
}

_EQUINOX_BY_VERSION = {
    "A": Equinox.J2000,
    "B": Equinox.J2000,
    "C": Equinox.DATE,
    "D": Equinox.DATE,
    "E": Equinox.J2000,
}


class VSOP87Header(NamedTuple):
    """Parsed VSOP87 block header.

    Attributes:
        version: Version letter ``A``-``E``.
        body: Body name as written in the file, e.g. ``"VENUS"``.
        axis: Coordinate the block contributes to.
        power: Power of ``τ`` of the block.
        count: Number of term lines that follow.
    """

    version: str
    body: str
    axis: Axis
    power: int
    count: int


def parse_vsop87_header(line: str) -> VSOP87Header | None:
    """Parse a VSOP87 block header line.

    Args:
        line: A single line from a VSOP87 file.

    Returns:
        The parsed header, or ``None`` if *line* is not a header.
    """
    match = _HEADER_RE.match(line)
    if match is None:
        return None
    variable = int(match["variable"])
    if not 1 <= variable <= 3:
        return None
    return VSOP87Header(
        version=match["version"],
        body=match["body"],
        axis=_AXES[match["coordinates"]][variable - 1],
        power=int(match["power"]),
        count=int(match["count"]),
    )


def parse_vsop87_term(line: str) -> tuple[float, float, float] | None:
    """Parse the amplitude, phase and frequency columns of a term line.

    Args:
        line: A single term line.

    Returns:
        Tuple of (A, B [rad], C [rad / millennium]), or ``None`` if the
        line is too short to hold a term.

    Raises:
        ValueError: If the coefficient columns are not numeric.
    """
    if len(line.rstrip()) < _TERM_MIN_LENGTH:
        return None
    try:
        return (
            float(line[_A_RANGE]),
            float(line[_B_RANGE]),
            float(line[_C_RANGE]),
        )
    except ValueError:
        raise ValueError(f"Malformed VSOP87 term line: {line.rstrip()!r}") from None


def _table_body(name: str) -> Body | None:
    try:
        return Body.from_name(name)
    except ValueError:
        logger.debug("VSOP87 body '%s' has no Body identifier", name)
        return None


def parse_vsop87_lines(lines: Iterable[str], name: str | None = None) -> Table:
    """Build a :class:`Table` from the lines of a VSOP87 file.

    Args:
        lines: Lines of one VSOP87 file (one body, one version).
        name: Table name. Defaults to ``"VSOP87<version> <body>"``.

    Returns:
        Validated, immutable :class:`Table`.

    Raises:
        ValueError: If no header is found, a term precedes the first
            header, a block's term count disagrees with its header, or the
            file mixes versions or bodies.
    """
    blocks: dict[Axis, dict[int, list[tuple[float, float, float]]]] = {}
    header: VSOP87Header | None = None
    first: VSOP87Header | None = None
    counts: list[tuple[VSOP87Header, int]] = []

    for lineno, line in enumerate(lines, start=1):
        parsed = parse_vsop87_header(line)
        if parsed is not None:
            if first is None:
                first = parsed
            elif (parsed.version, parsed.body) != (first.version, first.body):
                raise ValueError(
                    f"Line {lineno}: VSOP87{parsed.version} {parsed.body} block in a "
                    f"VSOP87{first.version} {first.body} file"
                )
            header = parsed
            blocks.setdefault(parsed.axis, {})[parsed.power] = []
            counts.append((parsed, 0))
            continue

        if not line.strip():
            continue

        term = parse_vsop87_term(line)
        if term is None:
            logger.warning("Skipping unrecognised VSOP87 line %d: %r", lineno, line.rstrip())
            continue
        if header is None:
            raise ValueError(f"Line {lineno}: VSOP87 term before any header")
        blocks[header.axis][header.power].append(term)
        counts[-1] = (header, counts[-1][1] + 1)

    if first is None:
        raise ValueError("No VSOP87 headers found")

    for block, n_terms in counts:
        if n_terms != block.count:
            raise ValueError(
                f"VSOP87 block {block.axis.value}{block.power} declares "
                f"{block.count} terms but contains {n_terms}"
            )

    axes = {}
    for axis, powers in blocks.items():
        if sorted(powers) != list(range(len(powers))):
            raise ValueError(
                f"VSOP87 axis {axis.value} has non-contiguous powers {sorted(powers)}"
            )
        axes[axis] = tuple(Series(axis, n, tuple(powers[n])) for n in range(len(powers)))

    table = Table(
        name=name or f"VSOP87{first.version} {first.body.lower()}",
        axes=axes,
        equinox=_EQUINOX_BY_VERSION[first.version],
        body=_table_body(first.body),
    )
    logger.info(
        "Parsed VSOP87%s table for %s: %d terms", first.version, first.body, table.term_count()
    )
    return table


def parse_vsop87_text(text: str, name: str | None = None) -> Table:
    """Build a :class:`Table` from the full text of a VSOP87 file.

    Examples:
        ```python
        from pathlib import Path
        from ephemjax.series import parse_vsop87_text
        table = parse_vsop87_text(Path("VSOP87D.ven").read_text())
        ```
    """
    return parse_vsop87_lines(text.splitlines(), name=name)
