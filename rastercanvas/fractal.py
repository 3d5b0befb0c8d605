import logging
import math

from .geometry import rotate

logger = logging.getLogger(__name__)

# 3 * 4**10 segments is already far more than any canvas can show.
MAX_DEPTH = 10

SQRT3 = math.sqrt(3)


def check_depth(depth):
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ValueError(f'recursion depth must be an int, got {depth!r}')
    if depth < 0 or depth > MAX_DEPTH:
        raise ValueError(f'recursion depth must be in [0, {MAX_DEPTH}], got {depth}')


def koch_snowflake_segments(center, radius, depth):
    """
    Yield the (p1, p2) leaf segments of a Koch snowflake inscribed in the
    circle of RADIUS around CENTER. Points are float (x, y) pairs; there are
    exactly 3 * 4**DEPTH of them. DEPTH is checked before anything is
    generated.
    """
    check_depth(depth)
    cx, cy = center
    vertices = []
    for k in range(3):
        angle = -math.pi / 2 + k * 2 * math.pi / 3
        vertices.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    logger.debug('koch snowflake: center=%s radius=%s depth=%d segments=%d',
                 center, radius, depth, 3 * 4 ** depth)
    return _koch_snowflake(vertices, depth)


def _koch_snowflake(vertices, depth):
    for i in range(3):
        yield from koch_curve_segments(vertices[i], vertices[(i + 1) % 3], depth)


def koch_curve_segments(p1, p2, depth):
    if depth == 0:
        yield (p1, p2)
        return
    x1, y1 = p1
    x2, y2 = p2
    dx = (x2 - x1) / 3
    dy = (y2 - y1) / 3
    pa = (x1 + dx, y1 + dy)
    pb = (x1 + 2 * dx, y1 + 2 * dy)
    apex = rotate(pa, (dx, dy), -math.pi / 3)
    yield from koch_curve_segments(p1, pa, depth - 1)
    yield from koch_curve_segments(pa, apex, depth - 1)
    yield from koch_curve_segments(apex, pb, depth - 1)
    yield from koch_curve_segments(pb, p2, depth - 1)


def sierpinski_triangles(start, width, depth):
    """
    Yield the (p1, p2, p3) leaf triangles of a Sierpinski subdivision.

    The depth-0 triangle is equilateral with side WIDTH, its base running
    right from START and its third vertex below the base. Each level keeps
    three sub-triangles of a third of the width, anchored at the start
    vertex, at the midpoint of the base and at the midpoint of the edge from
    the start vertex to the third vertex.
    """
    check_depth(depth)
    logger.debug('sierpinski triangle: start=%s width=%s depth=%d triangles=%d',
                 start, width, depth, 3 ** depth)
    return _sierpinski(start, width, depth)


def _sierpinski(start, width, depth):
    x, y = start
    if depth == 0:
        yield ((x, y), (x + width, y), (x + width / 2, y + SQRT3 * width / 2))
        return
    sub_width = width / 3
    yield from _sierpinski((x, y), sub_width, depth - 1)
    yield from _sierpinski((x + width / 2, y), sub_width, depth - 1)
    yield from _sierpinski((x + width / 4, y + SQRT3 * width / 4), sub_width, depth - 1)
