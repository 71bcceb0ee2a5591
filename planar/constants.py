"""Named numeric constants for the geometry kernel.

Angles in radians unless noted.
"""
import math

FULL_ROTATION_RAD = 2.0 * math.pi
FULL_ROTATION_DEG = 360.0
HALF_ROTATION_RAD = math.pi
RIGHT_ANGLE_DEG = 90.0

# Polygon edge counts
TRIANGLE_EDGES = 3
RECT_EDGES = 4

# SVG path output
SVG_PRECISION = 2                 # decimals per coordinate
