"""Write a solid-colour PNG swatch.

Example:
    ccp-color swatch '#2563eb' 64 64 blue.png
"""

import os

from ccp_color.commands._common import resolve
from ccp_color.core.native import swatch, to_native
from ccp_color.core.parser import from_hex
from ccp_color.core.types import Command, Report

command = Command(
    name='swatch',
    help='Render a hex colour into a solid PNG of the given size.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('color', help='Hex colour')
    parser.add_argument('width', type=int)
    parser.add_argument('height', type=int)
    parser.add_argument('output', help='Output PNG path')


@command.run
def run(report: Report, args) -> None:
    color = resolve(report, args.color, from_hex, args.color, args=args)
    parent = os.path.dirname(args.output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    swatch(color, (args.width, args.height)).save(args.output)
    report.add_color(args.color, color, to_native(color))
    report.add_file(args.output)
