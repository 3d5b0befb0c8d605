import logging

import numpy as np

logger = logging.getLogger(__name__)


class Canvas:
    """
    In-memory pixel grid backed by a numpy array. Row 0 is the top of the
    image and pixels are addressed as (x, y).

    MODE selects the pixel value type:
        - 'rgb':  (height, width, 3) uint8 buffer, pixels are (r, g, b) tuples
        - 'gray': (height, width) uint8 buffer, pixels are ints
        - 'bit':  (height, width) bool buffer, pixels are bools
    Every read and write outside the canvas is silently clipped.
    """
    MODES = ('rgb', 'gray', 'bit')
    DEFAULT_MAX_VALUE = 255

    def __init__(self, width, height, mode='rgb', max_value=DEFAULT_MAX_VALUE):
        if mode not in self.MODES:
            raise ValueError(f'unknown pixel mode {mode!r}, expected one of {self.MODES}')
        if width < 1 or height < 1:
            raise ValueError(f'canvas dimensions must be positive, got {width}x{height}')
        self._check_max_value(max_value)
        self.width = width
        self.height = height
        self.mode = mode
        self.max_value = max_value
        self.buffer = np.zeros(self._buffer_shape(width, height), dtype=self._dtype())

    @classmethod
    def from_array(cls, data, mode=None, max_value=DEFAULT_MAX_VALUE):
        """
        Build a canvas from raw pixel DATA, e.g. rows handed over by a codec.
        DATA is anything numpy can turn into a (height, width) or
        (height, width, 3) array. When MODE is None it is inferred: 3-D data
        is 'rgb', boolean data is 'bit' and anything else is 'gray'.
        """
        array = np.asarray(data)
        if mode is None:
            if array.ndim == 3:
                mode = 'rgb'
            elif array.dtype == np.bool_:
                mode = 'bit'
            else:
                mode = 'gray'
        if array.ndim < 2 or array.shape[0] < 1 or array.shape[1] < 1:
            raise ValueError(f'cannot build a canvas from data of shape {array.shape}')
        height, width = array.shape[:2]
        canvas = cls(width, height, mode, max_value)
        if array.shape != canvas.buffer.shape:
            raise ValueError(f'data of shape {array.shape} does not match '
                             f'{mode!r} canvas shape {canvas.buffer.shape}')
        if mode != 'bit' and array.size and (array.min() < 0 or array.max() > max_value):
            raise ValueError(f'pixel values must lie in [0, {max_value}]')
        canvas.buffer[...] = array.astype(canvas.buffer.dtype)
        return canvas

    def _buffer_shape(self, width, height):
        if self.mode == 'rgb':
            return (height, width, 3)
        return (height, width)

    def _dtype(self):
        return np.bool_ if self.mode == 'bit' else np.uint8

    @staticmethod
    def _check_max_value(max_value):
        if not 1 <= max_value <= 255:
            raise ValueError(f'max value must be in [1, 255], got {max_value}')

    @property
    def zero_value(self):
        if self.mode == 'rgb':
            return (0, 0, 0)
        if self.mode == 'bit':
            return False
        return 0

    def size(self):
        return self.width, self.height

    def in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def get_pixel(self, x, y):
        if not self.in_bounds(x, y):
            return self.zero_value
        value = self.buffer[y, x]
        if self.mode == 'rgb':
            return tuple(int(channel) for channel in value)
        if self.mode == 'bit':
            return bool(value)
        return int(value)

    def set_pixel(self, x, y, value):
        if self.in_bounds(x, y):
            self.buffer[y, x] = value

    def fill_span(self, y, x0, x1, value):
        """Set the inclusive run of pixels between X0 and X1 on row Y."""
        if not 0 <= y < self.height:
            return
        lo = max(min(x0, x1), 0)
        hi = min(max(x0, x1), self.width - 1)
        if lo > hi:
            return
        self.buffer[y, lo:hi + 1] = value

    def clear(self, value=None):
        if value is None:
            value = self.zero_value
        self.buffer[...] = value

    def copy(self):
        canvas = Canvas(self.width, self.height, self.mode, self.max_value)
        canvas.buffer[...] = self.buffer
        return canvas

    def invert(self):
        if self.mode == 'bit':
            np.logical_not(self.buffer, out=self.buffer)
        else:
            self.buffer[...] = self.max_value - np.minimum(self.buffer, self.max_value)

    def flip(self):
        """Mirror the image left to right."""
        self.buffer = np.ascontiguousarray(self.buffer[:, ::-1])

    def flop(self):
        """Mirror the image top to bottom."""
        self.buffer = np.ascontiguousarray(self.buffer[::-1])

    def rotate_90cw(self):
        self.buffer = np.ascontiguousarray(np.rot90(self.buffer, k=-1))
        self.width, self.height = self.height, self.width

    def set_max_value(self, max_value):
        """
        Change the value domain to [0, MAX_VALUE], rescaling every stored
        pixel proportionally (fractions are truncated).
        """
        if self.mode == 'bit':
            raise ValueError('bit canvases have no max value')
        self._check_max_value(max_value)
        old_max = self.max_value
        scaled = self.buffer.astype(np.float64) * max_value / old_max
        self.buffer[...] = np.clip(scaled, 0, max_value).astype(np.uint8)
        self.max_value = max_value
        logger.debug('rescaled canvas from max value %d to %d', old_max, max_value)

    def to_gray(self):
        """Return a new 'gray' canvas holding the integer mean of the channels."""
        if self.mode != 'rgb':
            raise ValueError(f'cannot convert a {self.mode!r} canvas to gray')
        gray = Canvas(self.width, self.height, 'gray', self.max_value)
        gray.buffer[...] = self.buffer.astype(np.uint16).sum(axis=2) // 3
        return gray

    def to_bitmap(self):
        """Return a new 'bit' canvas where a pixel is set iff it is non-zero."""
        bitmap = Canvas(self.width, self.height, 'bit')
        if self.mode == 'rgb':
            bitmap.buffer[...] = self.buffer.any(axis=2)
        else:
            bitmap.buffer[...] = self.buffer != 0
        return bitmap

    def __repr__(self):
        return f'Canvas(width={self.width}, height={self.height}, mode={self.mode!r})'
