import logging

from .canvas import Canvas
from .fractal import MAX_DEPTH, koch_snowflake_segments, sierpinski_triangles
from .geometry import Edge, Point
from .rasterizer import Rasterizer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'Canvas',
    'Edge',
    'MAX_DEPTH',
    'Point',
    'Rasterizer',
    'koch_snowflake_segments',
    'sierpinski_triangles',
]
