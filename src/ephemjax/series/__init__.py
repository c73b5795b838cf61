"""Periodic-series planetary theories.

Provides the data model, truncation and evaluation of VSOP87-style
series:

- **Types**: :class:`Term`, :class:`Series`, :class:`Table`,
  :class:`TruncationSpec`, :class:`Axis`, :class:`Equinox`.
- **Truncation**: :func:`truncate_table` drops terms whose worst-case
  contribution over a horizon falls below a per-axis threshold.
- **Evaluation**: :func:`evaluate_position`, :func:`evaluate_spherical`
  and :func:`evaluate_rectangular` sum a table at ``τ``.
- **Loading**: :func:`load_table_from_vsop87_file` and
  :func:`load_default_table`.
"""

from ephemjax.series._evaluate import (
    axis_value,
    evaluate_position,
    evaluate_rectangular,
    evaluate_spherical,
    series_value,
)
from ephemjax.series._parsers import (
    VSOP87Header,
    parse_vsop87_header,
    parse_vsop87_lines,
    parse_vsop87_term,
    parse_vsop87_text,
)
from ephemjax.series._providers import (
    default_table_bodies,
    load_default_table,
    load_table_from_vsop87_file,
)
from ephemjax.series._truncation import (
    truncate_series,
    truncate_table,
    worst_case_magnitude,
)
from ephemjax.series._types import (
    MAX_POWER,
    Axis,
    Equinox,
    Series,
    Table,
    Term,
    TruncationSpec,
)

__all__ = [
    # Types
    "Axis",
    "Equinox",
    "MAX_POWER",
    "Series",
    "Table",
    "Term",
    "TruncationSpec",
    # Truncation
    "truncate_series",
    "truncate_table",
    "worst_case_magnitude",
    # Evaluation
    "axis_value",
    "evaluate_position",
    "evaluate_rectangular",
    "evaluate_spherical",
    "series_value",
    # Loading
    "VSOP87Header",
    "default_table_bodies",
    "load_default_table",
    "load_table_from_vsop87_file",
    "parse_vsop87_header",
    "parse_vsop87_lines",
    "parse_vsop87_term",
    "parse_vsop87_text",
]
