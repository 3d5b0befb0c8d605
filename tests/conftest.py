"""
Pytest configuration and fixtures for rastercanvas tests
"""
import numpy as np
import pytest

from rastercanvas import Canvas, Rasterizer

RED = (255, 0, 0)


class RecordingCanvas(Canvas):
    """Canvas that remembers every in-bounds set_pixel call, in order."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.writes = []

    def set_pixel(self, x, y, value):
        if self.in_bounds(x, y):
            self.writes.append((x, y))
        super().set_pixel(x, y, value)


def lit_pixels(canvas):
    """Set of (x, y) coordinates holding a non-zero value."""
    mask = canvas.buffer.any(axis=2) if canvas.mode == 'rgb' else canvas.buffer != 0
    ys, xs = np.nonzero(mask)
    return {(int(x), int(y)) for x, y in zip(xs, ys)}


@pytest.fixture
def canvas():
    return Canvas(10, 10)


@pytest.fixture
def big_canvas():
    return Canvas(64, 64)


@pytest.fixture
def rasterizer(canvas):
    return Rasterizer(canvas)


@pytest.fixture
def big_rasterizer(big_canvas):
    return Rasterizer(big_canvas)


@pytest.fixture
def recording_canvas():
    return RecordingCanvas(64, 64)
