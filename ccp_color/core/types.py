"""Shared types for ccp-color: ColorValue, GradientDescriptor, Command, Report."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

GRADIENT_KINDS = ('axial', 'radial', 'conic')


@dataclass(frozen=True)
class ColorValue:
    """A 4-channel colour. Channels are normalized to 0.0-1.0 unless built with keep_raw."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 0.0

    @classmethod
    def white(cls) -> ColorValue:
        return cls(1.0, 1.0, 1.0, 1.0)

    @classmethod
    def clear(cls) -> ColorValue:
        return cls(0.0, 0.0, 0.0, 0.0)

    @property
    def components(self) -> tuple[float, float, float, float]:
        return (self.red, self.green, self.blue, self.alpha)

    def with_alpha(self, alpha: float) -> ColorValue:
        """Return a copy of this colour with a different alpha."""
        return dataclasses.replace(self, alpha=float(alpha))


@dataclass(frozen=True)
class GradientDescriptor:
    """Everything an external renderer needs to draw a gradient layer.

    `colors` holds native handles (RGBA int tuples) in stop order.
    Points are in unit space: (0, 0) is the top-left corner, (1, 1) the bottom-right.
    """

    colors: tuple[tuple[int, int, int, int], ...] = ()
    start_point: tuple[float, float] = (0.5, 0.0)
    end_point: tuple[float, float] = (0.5, 1.0)
    locations: tuple[float, ...] | None = None  # one stop position per colour
    kind: str = 'axial'

    def configured(self, **changes: Any) -> GradientDescriptor:
        """Return a copy with the given fields replaced."""
        if 'kind' in changes and changes['kind'] not in GRADIENT_KINDS:
            raise ValueError(f'Unknown gradient kind: {changes["kind"]}. Available: {", ".join(GRADIENT_KINDS)}')
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            'kind': self.kind,
            'colors': [list(c) for c in self.colors],
            'start_point': list(self.start_point),
            'end_point': list(self.end_point),
            'locations': list(self.locations) if self.locations is not None else None,
        }


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='hex', help='Parse hex colour strings')

        @command.arguments
        def arguments(parser):
            parser.add_argument('values', nargs='+')

        @command.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function that adds this command's arguments."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(report, args)


@dataclass
class Report:
    """Accumulates command results for text/JSON output."""

    command: str = ''
    colors: list[dict[str, Any]] = field(default_factory=list)
    gradient: GradientDescriptor | None = None
    files: list[str] = field(default_factory=list)
    fallback_count: int = 0

    def add_color(self, label: str, color: ColorValue, native: tuple[int, ...] | None = None) -> None:
        """Add a colour result under a label (usually the user's input)."""
        self.colors.append({'label': label, 'color': color, 'native': native})

    def set_gradient(self, descriptor: GradientDescriptor) -> None:
        self.gradient = descriptor

    def add_file(self, path: str) -> None:
        self.files.append(path)

    def record_fallback(self, label: str) -> None:
        self.fallback_count += 1
