"""
The `constants` module defines the mathematical, time-scale and astronomical constants used by ephemjax.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Full turn in radians. Units: *rad*
"""
TWO_PI = 2.0 * PI

"""
Constant to convert degrees to radians. Equal to 2pi/360. Units: *rad/deg*
"""
DEG2RAD = 2.0 * PI / 360.0

"""
Constant to convert radians to degrees. Equal to 360/2pi. Units: *deg/rad*
"""
RAD2DEG = 360.0 / (PI * 2.0)

"""
Constant to convert arcseconds to radians. Equal to 2pi/(360*3600). Units: *rad/as*
"""
AS2RAD = 2.0 * PI / 360.0 / 3600.0

"""
Constant to convert radians to arcseconds. Equal to (360*3600)/(2pi). Units: *as/rad*
"""
RAD2AS = 360.0 * 3600.0 / PI / 2.0

"""
Constant to convert hours of right ascension to radians. Units: *rad/h*
"""
HOUR2RAD = 2.0 * PI / 24.0

"""
Ten arcminutes in radians. Declinations closer than this to a pole are
recovered from the cosine rather than the sine to keep full precision. Units: *rad*
"""
SMALL_ANGLE = 10.0 * PI / 180.0 / 60.0

# Time Constants
"""
Julian Ephemeris Date of the J2000.0 epoch (2000-01-01 12:00:00 TT). Units: *days*
"""
J2000 = 2451545.0

"""
Julian Ephemeris Date of the Besselian epoch B1900.0. Units: *days*
"""
B1900 = 2415020.3135

"""
Julian Ephemeris Date of the Besselian epoch B1950.0. Units: *days*
"""
B1950 = 2433282.4235

"""
Length of the Julian year. Units: *days*
"""
JULIAN_YEAR = 365.25

"""
Length of the Besselian (tropical) year at B1900. Units: *days*
"""
BESSELIAN_YEAR = 365.2421988

"""
Length of the Julian century. Units: *days*
"""
JULIAN_CENTURY = 36525.0

"""
Length of the Julian millennium, the time unit of VSOP87 series. Units: *days*
"""
JULIAN_MILLENNIUM = 365250.0

# Physical Constants
"""
Speed of light in vacuum. Units: *m/s*

References:

1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, 2010
"""
C_LIGHT = 299792458.0  # [m/s]Exact definition Vallado

"""
Astronomical Unit. Equal to the mean distance of the Earth from the sun.
TDB-compatible value. Units: *m*

References:

1. P. Gérard and B. Luzum, *IERS Technical Note 36*, 2010
"""
AU = 1.49597870700e11  # [m] Astronomical Unit IAU 2010

"""
Light travel time over one astronomical unit. Units: *days*
"""
LIGHT_TIME_AU = AU / C_LIGHT / 86400.0

"""
Mean obliquity of the ecliptic at J2000 (IAU 2006). Units: *arcseconds*

References:

1. N. Capitaine, P. Wallace and J. Chapront, *Expressions for IAU 2000
   precession quantities*, A&A 412, 2003
"""
OBLIQUITY_J2000 = 84381.406
