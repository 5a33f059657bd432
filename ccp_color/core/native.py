"""Conversions between ColorValue and Pillow's native colour handles.

A native handle is an (r, g, b, a) tuple of 0-255 ints, which is what
Image.new(), ImageDraw and Image.getpixel() use for RGBA images.
"""

import numpy as np
from PIL import Image

from ccp_color.core.errors import EmptyImageData, InvalidValueCount
from ccp_color.core.parser import from_hex
from ccp_color.core.types import ColorValue

NativeColor = tuple[int, int, int, int]


def _to_byte(channel: float) -> int:
    return int(round(min(max(float(channel), 0.0), 1.0) * 255))


def _clamp_byte(value: float) -> int:
    return min(max(int(round(value)), 0), 255)


def to_native(color: ColorValue | tuple) -> NativeColor:
    """ColorValue -> (r, g, b, a) ints.

    Tuples are taken as native already: clamped to 0-255 and padded with alpha 255 if needed.
    """
    if isinstance(color, ColorValue):
        return (_to_byte(color.red), _to_byte(color.green), _to_byte(color.blue), _to_byte(color.alpha))
    if len(color) == 3:
        return (_clamp_byte(color[0]), _clamp_byte(color[1]), _clamp_byte(color[2]), 255)
    if len(color) == 4:
        return (_clamp_byte(color[0]), _clamp_byte(color[1]), _clamp_byte(color[2]), _clamp_byte(color[3]))
    raise InvalidValueCount(list(color))


def from_native(handle: tuple | str) -> ColorValue:
    """(r, g, b[, a]) 0-255 tuple or hex string -> ColorValue with every channel in 0.0-1.0."""
    if isinstance(handle, str):
        return from_hex(handle)
    r, g, b, a = to_native(handle)
    return ColorValue(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def native_hex(handle: tuple) -> str:
    """Format a native handle as '#rrggbb'; alpha is dropped."""
    r, g, b, _a = to_native(handle)
    return f'#{r:02x}{g:02x}{b:02x}'


def to_hex(color: ColorValue) -> str:
    """Format as '#rrggbb'. Channels are clamped to 0.0-1.0; alpha is dropped."""
    return native_hex(to_native(color))


def swatch(color: ColorValue, size: tuple[int, int]) -> Image.Image:
    """Return a solid RGBA image of the given (width, height) filled with color."""
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f'Swatch size must be positive, got {width}x{height}')
    return Image.new('RGBA', (int(width), int(height)), to_native(color))


def load_image(path: str) -> Image.Image:
    """Open and decode an image file. Files Pillow cannot decode raise EmptyImageData."""
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except OSError as e:
        raise EmptyImageData(path) from e


def pixel_buffer(image: Image.Image | None) -> tuple[bytes, int, int]:
    """Decode an image to row-major RGBA bytes. Returns (buffer, width, height)."""
    if image is None or image.width == 0 or image.height == 0:
        raise EmptyImageData(image)
    arr = np.asarray(image.convert('RGBA'), dtype=np.uint8)
    height, width = arr.shape[:2]
    return arr.tobytes(), width, height
