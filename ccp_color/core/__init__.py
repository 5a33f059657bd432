"""ccp_color.core — Foundation layer.

Contains the colour value types, error taxonomy, parser, pixel sampler,
gradient builder, native (Pillow) boundary and report formatting.
This module has NO dependencies on ccp_color.commands or ccp_color.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
