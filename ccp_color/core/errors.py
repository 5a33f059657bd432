"""Error taxonomy for ccp-color.

Every error is an input-validation failure the caller can recover from.
All of them derive from ColorError so callers (and or_default) can catch
the whole family at once.
"""

from typing import Any


class ColorError(Exception):
    """Base class. `value` is the offending input."""

    reason = 'invalid colour input'

    def __init__(self, value: Any = None):
        self.value = value
        super().__init__(f'[ccp-color] {self.reason}: {value!r}')


class InvalidValueCount(ColorError):
    reason = 'colour component sequence must have exactly 4 values'


class InvalidHexFormat(ColorError):
    reason = 'hex colour must be 3 or 6 hex digits, optionally prefixed by #'


class PointOutOfBounds(ColorError):
    reason = 'point lies outside the image'


class EmptyImageData(ColorError):
    """No decoded image, data provider or byte buffer was available."""

    reason = 'image has no readable pixel data'


class NonFiniteComponent(ColorError):
    reason = 'colour components must be finite numbers'
