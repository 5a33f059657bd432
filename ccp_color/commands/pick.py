"""Read the colour of one pixel from an image file.

The image is decoded to RGBA with Pillow; a file Pillow cannot decode is
reported as empty image data. Coordinates are truncated to
whole pixels and must lie inside the image. The result keeps raw 0-255
channel values, alpha included.

Example:
    ccp-color pick screenshot.png 10 20
    ccp-color pick screenshot.png 10 20 --json
"""

from ccp_color.commands._common import resolve
from ccp_color.core.native import to_native
from ccp_color.core.sampler import color_in_file
from ccp_color.core.types import Command, Report

command = Command(
    name='pick',
    help='Sample the raw RGBA value of one pixel in an image.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('image', help='Path to PNG/JPG image')
    parser.add_argument('x', type=float, help='Pixel column')
    parser.add_argument('y', type=float, help='Pixel row')


@command.run
def run(report: Report, args) -> None:
    label = f'{args.x:g},{args.y:g}'
    color = resolve(report, label, color_in_file, args.image, (args.x, args.y), args=args)
    # sampled channels are already bytes; only a --default stand-in needs scaling
    native = to_native(color) if report.fallback_count else tuple(int(c) for c in color.components)
    report.add_color(label, color, native)
