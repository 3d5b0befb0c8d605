import math
from collections import namedtuple

Point = namedtuple('Point', ['x', 'y'])

# Polygon edge between two consecutive vertices, only used during fills.
Edge = namedtuple('Edge', ['x1', 'y1', 'x2', 'y2'])


def round_half_up(value):
    return int(math.floor(value + 0.5))


def as_point(p):
    """
    Coerce P (a Point or any (x, y) pair) to an integer Point. Float
    coordinates are rounded half-up so that 2.5 and -2.5 land on 3 and -2,
    keeping rounding direction independent of the sign of the coordinate.
    """
    if isinstance(p, Point) and isinstance(p.x, int) and isinstance(p.y, int):
        return p
    x, y = p
    return Point(round_half_up(x), round_half_up(y))


def interpolate_x(y, x1, y1, x2, y2):
    """
    X coordinate of the segment (x1, y1)-(x2, y2) at row Y, rounded to the
    nearest pixel. A zero-height segment returns X1.
    """
    if y2 == y1:
        return x1
    return round_half_up(x1 + (y - y1) * (x2 - x1) / (y2 - y1))


def polygon_edges(points):
    n = len(points)
    for i in range(n):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % n]
        yield Edge(x1, y1, x2, y2)


def rotate(origin, vector, angle):
    """Return ORIGIN + VECTOR rotated by ANGLE radians, as float coordinates."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    vx, vy = vector
    ox, oy = origin
    return (ox + vx * cos_a - vy * sin_a, oy + vx * sin_a + vy * cos_a)
