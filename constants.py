"""Physical constants shared by every body in a simulation.

Masses are in scaled "screen" units: a main-sequence star is SOLAR_MASS, and
with G below it gives orbital speeds of a few pixels per frame at a few
hundred pixels of separation.
"""

G = 6.67e-11                    # Gravitational constant
SOLAR_MASS = 1e14               # Base stellar mass unit (M)
PLANET_MASS = SOLAR_MASS / 1e6  # Rocky planet (P)
MOON_MASS = PLANET_MASS / 1e4   # Moon
