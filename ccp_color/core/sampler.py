"""Read the colour of a single pixel from decoded RGBA image data.

The buffer is row-major, 4 bytes per pixel (R, G, B, A). Coordinates are
truncated to whole pixels. The returned colour keeps the raw 0-255 byte
values, alpha included, unlike from_hex() and from_components() which
treat alpha as 0.0-1.0.

Example:
    buf, w, h = pixel_buffer(Image.open('shot.png'))
    color_at(buf, w, h, (10, 20))  # ColorValue(255.0, 0.0, 0.0, 255.0)
"""

import math
from collections.abc import Sequence

from PIL import Image

from ccp_color.core.errors import EmptyImageData, PointOutOfBounds
from ccp_color.core.native import load_image, pixel_buffer
from ccp_color.core.parser import from_components
from ccp_color.core.types import ColorValue

BYTES_PER_PIXEL = 4


def _contains(width: float, height: float, x: float, y: float) -> bool:
    return 0 <= x < width and 0 <= y < height


def color_at(
    buffer: bytes | bytearray | memoryview | Sequence[int] | None,
    width: float,
    height: float,
    point: tuple[float, float],
) -> ColorValue:
    """Return the raw colour at point=(x, y).

    Raises PointOutOfBounds if the point is not inside [0, width) x [0, height),
    EmptyImageData if there is no buffer to read, and InvalidValueCount if
    the buffer ends before the pixel's 4 bytes.
    """
    x, y = point
    if not _contains(width, height, x, y):
        raise PointOutOfBounds(point)
    if buffer is None or len(buffer) == 0:
        raise EmptyImageData(buffer)

    offset = math.floor(width) * math.floor(y) * BYTES_PER_PIXEL + math.floor(x) * BYTES_PER_PIXEL
    values = [float(v) for v in buffer[offset : offset + BYTES_PER_PIXEL]]
    return from_components(values, keep_raw=True)


def color_in_image(image: Image.Image | None, point: tuple[float, float]) -> ColorValue:
    """Decode image to RGBA and return the raw colour at point."""
    buffer, width, height = pixel_buffer(image)
    return color_at(buffer, width, height, point)


def color_in_file(path: str, point: tuple[float, float]) -> ColorValue:
    """Open an image file and return the raw colour at point.

    A file that cannot be decoded raises EmptyImageData, the same as a missing image.
    """
    return color_in_image(load_image(path), point)
