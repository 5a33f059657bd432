"""ccp-color: hex/RGBA colour construction, pixel sampling and gradient descriptors."""

from ccp_color.core.errors import (
    ColorError,
    EmptyImageData,
    InvalidHexFormat,
    InvalidValueCount,
    NonFiniteComponent,
    PointOutOfBounds,
)
from ccp_color.core.gradient import GradientBuilder, build
from ccp_color.core.native import from_native, load_image, native_hex, swatch, to_hex, to_native
from ccp_color.core.parser import from_components, from_hex, from_rgba, or_default
from ccp_color.core.sampler import color_at, color_in_file, color_in_image
from ccp_color.core.types import ColorValue, GradientDescriptor

__all__ = [
    'ColorError',
    'ColorValue',
    'EmptyImageData',
    'GradientBuilder',
    'GradientDescriptor',
    'InvalidHexFormat',
    'InvalidValueCount',
    'NonFiniteComponent',
    'PointOutOfBounds',
    'build',
    'color_at',
    'color_in_file',
    'color_in_image',
    'from_components',
    'from_hex',
    'from_native',
    'from_rgba',
    'load_image',
    'native_hex',
    'or_default',
    'swatch',
    'to_hex',
    'to_native',
]
