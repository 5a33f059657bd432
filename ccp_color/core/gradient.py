"""Assemble ordered colours into a GradientDescriptor for an external renderer.

Two ways in:

    build([red, green, blue], configure=lambda d: d.configured(start_point=(0, 0.5)))

    GradientBuilder([red, green, blue]).start(0, 0.5).end(1, 0.5).build()

Colour order is the stop order and is kept exactly. Empty and single-colour
lists are accepted; what a degenerate gradient looks like is up to the renderer.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ccp_color.core.native import to_native
from ccp_color.core.types import GRADIENT_KINDS, ColorValue, GradientDescriptor

Configure = Callable[[GradientDescriptor], GradientDescriptor | None]


def build(colors: Iterable[ColorValue | tuple], configure: Configure | None = None) -> GradientDescriptor:
    """Map colours to native handles in order, then let `configure` return an adjusted descriptor.

    A configure callback that returns None leaves the descriptor as assembled.
    """
    descriptor = GradientDescriptor(colors=tuple(to_native(c) for c in colors))
    if configure is None:
        return descriptor
    configured = configure(descriptor)
    return descriptor if configured is None else configured


class GradientBuilder:
    """Fluent builder. Every setter returns the builder; build() produces the descriptor."""

    def __init__(self, colors: Iterable[ColorValue | tuple] = ()):
        self._colors = tuple(colors)
        self._changes: dict = {}

    def start(self, x: float, y: float) -> GradientBuilder:
        self._changes['start_point'] = (float(x), float(y))
        return self

    def end(self, x: float, y: float) -> GradientBuilder:
        self._changes['end_point'] = (float(x), float(y))
        return self

    def locations(self, *stops: float) -> GradientBuilder:
        self._changes['locations'] = tuple(float(s) for s in stops)
        return self

    def kind(self, name: str) -> GradientBuilder:
        if name not in GRADIENT_KINDS:
            raise ValueError(f'Unknown gradient kind: {name}. Available: {", ".join(GRADIENT_KINDS)}')
        self._changes['kind'] = name
        return self

    def build(self) -> GradientDescriptor:
        return build(self._colors, lambda d: d.configured(**self._changes))
