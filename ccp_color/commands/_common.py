"""Helpers shared by command modules: colour-argument parsing with the --default fallback."""

from collections.abc import Callable
from typing import Any

from ccp_color.core.parser import from_hex, or_default
from ccp_color.core.types import ColorValue, Report


def resolve(report: Report, label: str, fn: Callable[..., ColorValue], *fn_args: Any, args: Any) -> ColorValue:
    """Run a colour constructor. With --default set, failures become the default colour.

    Without --default the ColorError propagates to main(), which reports it and exits 1.
    """
    if args.default is None:
        return fn(*fn_args)
    fallback = from_hex(args.default)
    color = or_default(fn, *fn_args, default=fallback)
    if color is fallback:
        report.record_fallback(label)
    return color
