"""Build a colour from four components: r g b a.

r, g and b are 0-255 and divided by 255 unless --keep is given.
Alpha is taken as already normalized (0.0-1.0) and stored as is.

Example:
    ccp-color rgba 255 0 0 1
    ccp-color rgba 1 0.5 0 1 --keep
"""

from ccp_color.commands._common import resolve
from ccp_color.core.native import to_native
from ccp_color.core.parser import from_components
from ccp_color.core.types import Command, Report

command = Command(
    name='rgba',
    help='Build a colour from r g b a components.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('components', nargs='+', type=float, metavar='N', help='r g b a (exactly four)')
    parser.add_argument('--keep', action='store_true', help='Store r/g/b as given instead of dividing by 255')


@command.run
def run(report: Report, args) -> None:
    label = ' '.join(f'{c:g}' for c in args.components)
    color = resolve(report, label, from_components, args.components, args.keep, args=args)
    report.add_color(label, color, to_native(color))
