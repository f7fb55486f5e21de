"""Physical constants used throughout AeroTable.

All values in SI units unless otherwise noted.
"""

import math

# Atmospheric (ISA sea level)
SPEED_OF_SOUND_SL = 340.294  # m/s
KINEMATIC_VISCOSITY_SL = 1.4607e-5  # m²/s

# Mathematical
DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi

# Prandtl-Glauert / Ackeret factor floor, keeps 1/beta bounded near Mach 1
BETA_MIN = 0.3
