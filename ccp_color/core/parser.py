"""Colour construction from component sequences and hex strings.

from_components() and from_hex() raise a ColorError subclass on bad input.
or_default() is the opt-in wrapper for callers that prefer a fallback colour
(white, unless told otherwise) to an exception.
"""

import math
import string
from collections.abc import Callable, Sequence
from typing import Any

from ccp_color.core.errors import ColorError, InvalidHexFormat, InvalidValueCount, NonFiniteComponent
from ccp_color.core.types import ColorValue

_HEX_DIGITS = frozenset(string.hexdigits)


def from_rgba(r: float = 0, g: float = 0, b: float = 0, a: float = 0, keep_raw: bool = False) -> ColorValue:
    """Build a colour from scalar channels. r/g/b are divided by 255 unless keep_raw.

    NaN or infinite channels raise NonFiniteComponent.
    """
    if not all(math.isfinite(c) for c in (r, g, b, a)):
        raise NonFiniteComponent([r, g, b, a])
    if keep_raw:
        return ColorValue(float(r), float(g), float(b), float(a))
    return ColorValue(r / 255.0, g / 255.0, b / 255.0, float(a))


def from_components(values: Sequence[float], keep_raw: bool = False) -> ColorValue:
    """Build a colour from exactly four values (r, g, b, a).

    Alpha is never divided by 255; it is taken as already normalized.
    """
    if len(values) != 4:
        raise InvalidValueCount(list(values))
    r, g, b, a = values
    return from_rgba(r, g, b, a, keep_raw=keep_raw)


def from_hex(hex_str: str) -> ColorValue:
    """Parse '#rrggbb', 'rrggbb', '#rgb' or 'rgb'. Alpha is always 1.0."""
    digits = hex_str[1:] if hex_str.startswith('#') else hex_str
    if len(digits) not in (3, 6):
        raise InvalidHexFormat(hex_str)
    # int(x, 16) also accepts signs, underscores, whitespace and 0x prefixes
    if not _HEX_DIGITS.issuperset(digits):
        raise InvalidHexFormat(hex_str)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    value = int(digits, 16)
    return from_rgba((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 1.0)


def or_default(
    fn: Callable[..., ColorValue],
    *args: Any,
    default: ColorValue | None = None,
    **kwargs: Any,
) -> ColorValue:
    """Call fn(*args, **kwargs); on ColorError return `default` (white if not given).

    Any other exception propagates.
    """
    try:
        return fn(*args, **kwargs)
    except ColorError:
        return default if default is not None else ColorValue.white()
