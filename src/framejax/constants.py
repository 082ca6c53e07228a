"""
The `constants` module defines the mathematical, time and Earth constants used by the frame transformations.
"""

from jax.numpy import pi as PI

# Mathematical Constants
"""
Constant to convert arcseconds to radians. Equal to pi/648000. Units: *rad/as*
"""
AS2RAD = PI / 648000.0

# Time Constants

"""
Offset between Julian Date and Modified Julian Date. Units: *days*
"""
JD_MJD_OFFSET = 2400000.5  # Offset between Julian Date and Modified Julian Date

"""
Number of SI seconds in a day. Units: *s*
"""
SECONDS_PER_DAY = 86400.0

# Earth Constants

"""
Earth axial rotation rate. [rad/s]

References:

1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, p. 222, 2010
"""
OMEGA_EARTH = 7.292115146706979e-5  # [rad/s] Taken from Vallado 4th Ed page 222
