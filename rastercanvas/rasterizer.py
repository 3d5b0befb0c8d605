import logging

from .fractal import koch_snowflake_segments, sierpinski_triangles
from .geometry import as_point, interpolate_x, polygon_edges

logger = logging.getLogger(__name__)


class Rasterizer:
    """
    Draws vector primitives into a Canvas. Every pixel goes through
    canvas.set_pixel or canvas.fill_span, so anything that falls outside the
    canvas is clipped the same way for every shape. Points can be Point
    instances or plain (x, y) pairs; COLOR is copied as-is into the canvas.
    """

    def __init__(self, canvas):
        self.canvas = canvas

    def draw_line(self, p1, p2, color):
        x0, y0 = as_point(p1)
        x1, y1 = as_point(p2)
        dx = abs(x1 - x0)
        dy = abs(y1 - y0)
        sx = 1 if x0 < x1 else -1
        sy = 1 if y0 < y1 else -1
        err = dx - dy
        while True:
            self.canvas.set_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 > -dy:
                err -= dy
                x0 += sx
            if e2 < dx:
                err += dx
                y0 += sy

    def draw_rectangle(self, p, width, height, color):
        if width < 1 or height < 1:
            logger.debug('ignoring rectangle with size %sx%s', width, height)
            return
        x, y = as_point(p)
        corners = [(x, y), (x + width - 1, y),
                   (x + width - 1, y + height - 1), (x, y + height - 1)]
        for i in range(4):
            self.draw_line(corners[i], corners[(i + 1) % 4], color)

    def draw_filled_rectangle(self, p, width, height, color):
        if width < 1 or height < 1:
            logger.debug('ignoring rectangle with size %sx%s', width, height)
            return
        x, y = as_point(p)
        for y_idx in range(y, y + height):
            self.canvas.fill_span(y_idx, x, x + width - 1, color)

    def draw_circle(self, center, radius, color):
        """
        Midpoint circle. Each step plots the 8 reflections of (x, y), so the
        outline is symmetric across both axes and both diagonals.
        """
        if radius < 0:
            logger.debug('ignoring circle with radius %s', radius)
            return
        cx, cy = as_point(center)
        for x, y in self._circle_octant(radius):
            for dx, dy in ((x, y), (y, x), (-y, x), (-x, y),
                           (-x, -y), (-y, -x), (y, -x), (x, -y)):
                self.canvas.set_pixel(cx + dx, cy + dy, color)

    def draw_filled_circle(self, center, radius, color):
        """
        Filled midpoint circle. The spans run between the same reflected
        points the outline plots, so both variants agree on the boundary.
        """
        if radius < 0:
            logger.debug('ignoring circle with radius %s', radius)
            return
        cx, cy = as_point(center)
        for x, y in self._circle_octant(radius):
            self.canvas.fill_span(cy + y, cx - x, cx + x, color)
            self.canvas.fill_span(cy - y, cx - x, cx + x, color)
            self.canvas.fill_span(cy + x, cx - y, cx + y, color)
            self.canvas.fill_span(cy - x, cx - y, cx + y, color)

    @staticmethod
    def _circle_octant(radius):
        x = radius
        y = 0
        d = 1 - radius
        while x >= y:
            yield x, y
            y += 1
            if d <= 0:
                d += 2 * y + 1
            else:
                x -= 1
                d += 2 * (y - x) + 1

    def draw_triangle(self, p1, p2, p3, color):
        self.draw_polygon([p1, p2, p3], color)

    def draw_filled_triangle(self, p1, p2, p3, color):
        """
        Scanline fill. With the vertices sorted top to bottom, the long edge
        runs top->bottom and the short edge top->middle, then middle->bottom.
        """
        top, mid, bottom = sorted((as_point(p1), as_point(p2), as_point(p3)),
                                  key=lambda p: p.y)
        if top.y == bottom.y:
            xs = (top.x, mid.x, bottom.x)
            self.canvas.fill_span(top.y, min(xs), max(xs), color)
            return
        y_start = max(top.y, 0)
        y_end = min(bottom.y, self.canvas.height - 1)
        for y in range(y_start, y_end + 1):
            x_long = interpolate_x(y, top.x, top.y, bottom.x, bottom.y)
            if y < mid.y:
                x_short = interpolate_x(y, top.x, top.y, mid.x, mid.y)
            else:
                x_short = interpolate_x(y, mid.x, mid.y, bottom.x, bottom.y)
            self.canvas.fill_span(y, x_long, x_short, color)

    def draw_polygon(self, points, color):
        points = [as_point(p) for p in points]
        if len(points) < 3:
            logger.debug('ignoring polygon with %d vertices', len(points))
            return
        for edge in polygon_edges(points):
            self.draw_line((edge.x1, edge.y1), (edge.x2, edge.y2), color)

    def draw_filled_polygon(self, points, color):
        """
        Even-odd scanline fill. An edge contributes to row y iff
        y1 <= y < y2 (or the reverse), which counts a vertex shared by two
        edges once; horizontal edges never contribute. Intersections are
        paired left to right and an unpaired last one is dropped.
        """
        points = [as_point(p) for p in points]
        if len(points) < 3:
            logger.debug('ignoring polygon with %d vertices', len(points))
            return
        edges = [edge for edge in polygon_edges(points) if edge.y1 != edge.y2]
        y_start = max(min(p.y for p in points), 0)
        y_end = min(max(p.y for p in points), self.canvas.height - 1)
        for y in range(y_start, y_end + 1):
            xs = sorted(interpolate_x(y, edge.x1, edge.y1, edge.x2, edge.y2)
                        for edge in edges
                        if edge.y1 <= y < edge.y2 or edge.y2 <= y < edge.y1)
            for i in range(0, len(xs) - 1, 2):
                self.canvas.fill_span(y, xs[i], xs[i + 1], color)

    def draw_koch_snowflake(self, center, radius, depth, color):
        for p1, p2 in koch_snowflake_segments(center, radius, depth):
            self.draw_line(p1, p2, color)

    def draw_sierpinski_triangle(self, start, width, depth, color):
        for p1, p2, p3 in sierpinski_triangles(start, width, depth):
            self.draw_filled_triangle(p1, p2, p3, color)
