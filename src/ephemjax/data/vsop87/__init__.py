"""Complete VSOP87D series for the eight planets.

One file per body (``VSOP87D.mer`` ... ``VSOP87D.nep``) in the fixed-column
layout of the Bureau des Longitudes distribution: heliocentric ecliptic
L, B, R referred to the mean dynamical ecliptic and equinox of date.
Only the amplitude, phase and frequency columns are filled; the argument
multipliers are left blank.

References:
    P. Bretagnon and G. Francou, "Planetary theories in rectangular and
    spherical variables. VSOP87 solutions", *Astronomy and Astrophysics*
    202, 309-315, 1988.
"""
