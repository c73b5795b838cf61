"""
ephemjax computes planetary positions from truncated periodic series and converts them between astronomical reference frames, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    J2000,
    B1900,
    B1950,
    JULIAN_YEAR,
    BESSELIAN_YEAR,
    JULIAN_CENTURY,
    JULIAN_MILLENNIUM,
    C_LIGHT,
    AU,
    OBLIQUITY_J2000,
)

from .rotations import (
    Rx,
    Ry,
    Rz
)

from .config import set_dtype, get_dtype
from .body import Body

from .time import (
    julian_centuries,
    julian_millennia,
    jde_from_julian_millennia,
    julian_year_from_jde,
    jde_from_julian_year,
    besselian_year_from_jde,
    jde_from_besselian_year,
)

from .series import (
    Axis,
    Equinox,
    Term,
    Series,
    Table,
    TruncationSpec,
    truncate_table,
    evaluate_position,
    load_default_table,
    load_table_from_vsop87_file,
)

from .frames import (
    J2000_EPOCH,
    B1950_EPOCH,
    position_spherical_to_rectangular,
    position_rectangular_to_spherical,
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
    heliocentric_to_geocentric,
    precess_equatorial,
    precess_ecliptic,
    to_fk5,
)

from .planets import (
    PositionSource,
    SeriesPlanet,
    ElementsPlanet,
    BodyRegistry,
    default_registry,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "J2000",
    "B1900",
    "B1950",
    "JULIAN_YEAR",
    "BESSELIAN_YEAR",
    "JULIAN_CENTURY",
    "JULIAN_MILLENNIUM",
    "C_LIGHT",
    "AU",
    "OBLIQUITY_J2000",
    # Rotations
    "Rx",
    "Ry",
    "Rz",
    # Config
    "set_dtype",
    "get_dtype",
    # Bodies and time
    "Body",
    "julian_centuries",
    "julian_millennia",
    "jde_from_julian_millennia",
    "julian_year_from_jde",
    "jde_from_julian_year",
    "besselian_year_from_jde",
    "jde_from_besselian_year",
    # Series
    "Axis",
    "Equinox",
    "Term",
    "Series",
    "Table",
    "TruncationSpec",
    "truncate_table",
    "evaluate_position",
    "load_default_table",
    "load_table_from_vsop87_file",
    # Frames
    "J2000_EPOCH",
    "B1950_EPOCH",
    "position_spherical_to_rectangular",
    "position_rectangular_to_spherical",
    "ecliptic_to_equatorial",
    "equatorial_to_ecliptic",
    "heliocentric_to_geocentric",
    "precess_equatorial",
    "precess_ecliptic",
    "to_fk5",
    # Planets
    "PositionSource",
    "SeriesPlanet",
    "ElementsPlanet",
    "BodyRegistry",
    "default_registry",
]
