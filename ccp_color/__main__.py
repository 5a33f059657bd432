"""ccp-color — Colour conversion, pixel sampling and gradient descriptors.

Usage: ccp-color <command> [arguments] [options]

Commands are auto-discovered from ccp_color/commands/.
Each command module's docstring is its documentation.
Run `ccp-color help <command>` for full module docs.

Invalid input (bad hex, wrong component count, point outside the image,
unreadable image) is reported on stderr with exit status 1. Pass
--default HEX to substitute that colour instead of failing.
"""

import argparse
import importlib
import os
import sys

from ccp_color import registry
from ccp_color.core.errors import ColorError
from ccp_color.core.parser import from_hex
from ccp_color.core.report import format_json, format_text
from ccp_color.core.types import Report


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'ccp_color.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  ccp-color hex '#2563eb' fff\n"
        '  ccp-color rgba 255 0 0 1\n'
        '  ccp-color pick screenshot.png 10 20 --json\n'
        "  ccp-color gradient '#ff0000' '#0000ff' --start 0 0.5 --end 1 0.5\n"
        "  ccp-color swatch '#2563eb' 64 64 blue.png\n"
        '  ccp-color hex nothex --default ffffff\n'
        '  ccp-color help pick\n'
    )
    parser = argparse.ArgumentParser(
        prog='ccp-color',
        description='Colour conversion, pixel sampling and gradient descriptors.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    # Auto-register each command as a subcommand using module docstring
    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.add_arguments(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument(
            '-D',
            '--default',
            metavar='HEX',
            default=None,
            help='Use this colour instead of failing on invalid input',
        )

    # `help` subcommand prints the full module docstring for a command
    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: ccp-color help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    image = getattr(args, 'image', None)
    if image is not None and not os.path.isfile(image):
        print(f'ccp-color: image not found: {image}', file=sys.stderr)
        sys.exit(1)

    # A bad --default is a usage error, not something to fall back from
    if args.default is not None:
        try:
            from_hex(args.default)
        except ColorError as e:
            print(f'ccp-color: --default: {e}', file=sys.stderr)
            sys.exit(2)

    report = Report(command=args.command)
    try:
        registry.get(args.command).execute(report, args)
    except (ColorError, ValueError) as e:
        print(f'ccp-color: {e}', file=sys.stderr)
        sys.exit(1)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
