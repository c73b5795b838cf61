"""JPL approximate Keplerian elements (Table 1, 1800-2050 AD).

Mean elements of the eight major planets referred to the mean ecliptic
and equinox of J2000.0.  Each element varies linearly with time:

    element(T) = element_0 + element_dot * T

where *T* is Julian centuries from J2000 (TT).  For each body the rows
are, in order:

    [a (AU), e, I (deg), L (deg), lon_peri (deg), lon_node (deg)]

and each row is ``(value_at_J2000, rate_per_century)``.  The Earth entry
is the Earth-Moon barycenter.

References:
    E.M. Standish & J.G. Williams, "Keplerian Elements for
    Approximate Positions of the Major Planets",
    https://ssd.jpl.nasa.gov/planets/approx_pos.html
"""

from ephemjax.body import Body

# fmt: off
ELEMENTS: dict[Body, tuple[tuple[float, float], ...]] = {
    Body.MERCURY: (
        (0.38709927,    0.00000037),
        (0.20563593,    0.00001906),
        (7.00497902,   -0.00594749),
        (252.25032350,  149472.67411175),
        (77.45779628,   0.16047689),
        (48.33076593,  -0.12534081),
    ),
    Body.VENUS: (
        (0.72333566,    0.00000390),
        (0.00677672,   -0.00004107),
        (3.39467605,   -0.00078890),
        (181.97909950,  58517.81538729),
        (131.60246718,  0.00268329),
        (76.67984255,  -0.27769418),
    ),
    Body.EARTH: (
        (1.00000261,    0.00000562),
        (0.01671123,   -0.00004392),
        (-0.00001531,  -0.01294668),
        (100.46457166,  35999.37244981),
        (102.93768193,  0.32327364),
        (0.0,           0.0),
    ),
    Body.MARS: (
        (1.52371034,    0.00001847),
        (0.09339410,    0.00007882),
        (1.84969142,   -0.00813131),
        (-4.55343205,   19140.30268499),
        (-23.94362959,  0.44441088),
        (49.55953891,  -0.29257343),
    ),
    Body.JUPITER: (
        (5.20288700,   -0.00011607),
        (0.04838624,   -0.00013253),
        (1.30439695,   -0.00183714),
        (34.39644051,   3034.74612775),
        (14.72847983,   0.21252668),
        (100.47390909,  0.20469106),
    ),
    Body.SATURN: (
        (9.53667594,   -0.00125060),
        (0.05386179,   -0.00050991),
        (2.48599187,    0.00193609),
        (49.95424423,   1222.49362201),
        (92.59887831,  -0.41897216),
        (113.66242448, -0.28867794),
    ),
    Body.URANUS: (
        (19.18916464,  -0.00196176),
        (0.04725744,   -0.00004397),
        (0.77263783,   -0.00242939),
        (313.23810451,  428.48202785),
        (170.95427630,  0.40805281),
        (74.01692503,   0.04240589),
    ),
    Body.NEPTUNE: (
        (30.06992276,   0.00026291),
        (0.00859048,    0.00005105),
        (1.77004347,    0.00035372),
        (-55.12002969,  218.45945325),
        (44.96476227,  -0.32241464),
        (131.78422574, -0.00508664),
    ),
}
# fmt: on
