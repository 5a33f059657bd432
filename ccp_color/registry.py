"""Finds the ccp-color subcommands.

Every non-private module in ccp_color.commands that defines a `command`
of type Command is imported once and cached by name.
"""

import importlib
import pkgutil

import ccp_color.commands
from ccp_color.core.types import Command

_registry: dict[str, Command] = {}


def discover() -> dict[str, Command]:
    """Import the command modules on first use and return {name: Command}."""
    if not _registry:
        for info in pkgutil.iter_modules(ccp_color.commands.__path__):
            if info.name.startswith('_'):
                continue
            module = importlib.import_module(f'{ccp_color.commands.__name__}.{info.name}')
            cmd = getattr(module, 'command', None)
            if isinstance(cmd, Command):
                _registry[cmd.name] = cmd
    return _registry


def get(name: str) -> Command:
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_commands() -> dict[str, Command]:
    return discover()
