"""Parse hex colour strings (#rgb, #rrggbb, with or without #).

Prints each colour normalized to 0.0-1.0 along with its Pillow RGBA tuple.
3-digit shorthand expands by doubling each digit: abc == aabbcc.
Alpha is always 1.0.

Example:
    ccp-color hex '#2563eb' fff 0a0
    ccp-color hex zzz --default '#000000'
"""

from ccp_color.commands._common import resolve
from ccp_color.core.native import to_native
from ccp_color.core.parser import from_hex
from ccp_color.core.types import Command, Report

command = Command(
    name='hex',
    help='Parse hex colour strings into normalized RGBA.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('values', nargs='+', help='Hex colours, e.g. #2563eb or fff')


@command.run
def run(report: Report, args) -> None:
    for value in args.values:
        color = resolve(report, value, from_hex, value, args=args)
        report.add_color(value, color, to_native(color))
