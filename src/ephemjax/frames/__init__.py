"""Frame transformations.

This sub-module provides pure functions for moving planetary positions
between reference frames:

- **Spherical/rectangular**: ``[lon, lat, r]`` <-> ``[x, y, z]``.
- **Ecliptic/equatorial**: rotation by the obliquity of the ecliptic, and
  heliocentric to geocentric conversion.
- **Precession**: equatorial and ecliptic coordinates and orbital
  elements between mean equinoxes (J2000, B1950 or any Julian epoch).
- **FK5**: correction of VSOP87 dynamical coordinates to the FK5 system.

Stages compose by plain function application; none of them hold state.
"""

from .ecliptic import (
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
    heliocentric_to_geocentric,
    position_ecliptic_to_equatorial,
    position_equatorial_to_ecliptic,
    rotation_ecliptic_to_equatorial,
    rotation_equatorial_to_ecliptic,
)
from .fk5 import (
    fk5_correction,
    position_vsop_to_fk5_equinox,
    rotation_vsop_to_fk5_b1950,
    rotation_vsop_to_fk5_j2000,
    to_fk5,
)
from .obliquity import mean_obliquity, true_obliquity
from .precession import (
    B1950_EPOCH,
    J2000_EPOCH,
    EclipticPrecessor,
    EquatorialPrecessor,
    ecliptic_precessor,
    equatorial_precessor,
    precess_ecliptic,
    precess_equatorial,
    precess_rectangular_equatorial,
    reduce_elements,
    reduce_elements_b1950_fk4_to_j2000_fk5,
    reduce_elements_b1950_to_j2000,
    rotation_equatorial_precession,
)
from .spherical import (
    position_rectangular_to_spherical,
    position_spherical_to_rectangular,
)

__all__ = [
    # Spherical/rectangular
    "position_spherical_to_rectangular",
    "position_rectangular_to_spherical",
    # Ecliptic/equatorial
    "rotation_ecliptic_to_equatorial",
    "rotation_equatorial_to_ecliptic",
    "position_ecliptic_to_equatorial",
    "position_equatorial_to_ecliptic",
    "ecliptic_to_equatorial",
    "equatorial_to_ecliptic",
    "heliocentric_to_geocentric",
    # Obliquity
    "mean_obliquity",
    "true_obliquity",
    # Precession
    "J2000_EPOCH",
    "B1950_EPOCH",
    "EquatorialPrecessor",
    "EclipticPrecessor",
    "equatorial_precessor",
    "ecliptic_precessor",
    "precess_equatorial",
    "precess_ecliptic",
    "rotation_equatorial_precession",
    "precess_rectangular_equatorial",
    "reduce_elements",
    "reduce_elements_b1950_to_j2000",
    "reduce_elements_b1950_fk4_to_j2000_fk5",
    # FK5
    "fk5_correction",
    "to_fk5",
    "rotation_vsop_to_fk5_j2000",
    "rotation_vsop_to_fk5_b1950",
    "position_vsop_to_fk5_equinox",
]
