"""CLI commands, one module each.

A module becomes a ccp-color subcommand by defining a module-level
`command = Command(...)`; ccp_color.registry.discover() finds it.
The module docstring doubles as the command's `help` text.
"""
