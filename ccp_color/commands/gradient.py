"""Build a gradient descriptor from an ordered list of hex colours.

Prints the descriptor an external renderer would consume: native RGBA
stops in the order given, start/end points in unit space, optional stop
locations and the gradient kind (axial, radial, conic). Nothing is drawn.

Example:
    ccp-color gradient '#ff0000' '#00ff00' '#0000ff' --start 0 0.5 --end 1 0.5
    ccp-color gradient fff 000 --locations 0 0.8 --kind radial --json
"""

from ccp_color.commands._common import resolve
from ccp_color.core.gradient import GradientBuilder
from ccp_color.core.parser import from_hex
from ccp_color.core.types import GRADIENT_KINDS, Command, Report

command = Command(
    name='gradient',
    help='Assemble hex colours into a gradient descriptor (JSON with --json).',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('colors', nargs='*', help='Hex colours in stop order')
    parser.add_argument('--start', nargs=2, type=float, metavar=('X', 'Y'), help='Start point (default 0.5 0)')
    parser.add_argument('--end', nargs=2, type=float, metavar=('X', 'Y'), help='End point (default 0.5 1)')
    parser.add_argument('--locations', nargs='+', type=float, metavar='L', help='Stop locations, 0.0-1.0')
    parser.add_argument('--kind', choices=GRADIENT_KINDS, default=None, help='Gradient kind (default axial)')


@command.run
def run(report: Report, args) -> None:
    colors = [resolve(report, value, from_hex, value, args=args) for value in args.colors]
    builder = GradientBuilder(colors)
    if args.start:
        builder.start(*args.start)
    if args.end:
        builder.end(*args.end)
    if args.locations:
        builder.locations(*args.locations)
    if args.kind:
        builder.kind(args.kind)
    report.set_gradient(builder.build())
