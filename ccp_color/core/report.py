"""Report builder — text and JSON output for ccp-color commands."""

import json
from typing import Any

from ccp_color.core.native import native_hex, to_hex
from ccp_color.core.types import ColorValue, Report


def _components_text(color: ColorValue) -> str:
    return ', '.join(f'{c:.4g}' for c in color.components)


def _hex(entry: dict[str, Any]) -> str:
    # raw samples hold 0-255 channels; the native handle is the reliable source when present
    if entry['native'] is not None:
        return native_hex(entry['native'])
    return to_hex(entry['color'])


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = [f'ccp-color: {report.command}', '']

    for entry in report.colors:
        color = entry['color']
        line = f'  {entry["label"]:<12} {_hex(entry)}  rgba({_components_text(color)})'
        if entry['native'] is not None:
            line += f'  native={tuple(entry["native"])}'
        lines.append(line)

    if report.gradient is not None:
        g = report.gradient
        lines.append(f'  gradient: {g.kind} {len(g.colors)} stop(s)')
        lines.append(f'    start {g.start_point}  end {g.end_point}')
        if g.locations is not None:
            lines.append(f'    locations {list(g.locations)}')
        for native in g.colors:
            lines.append(f'    {native}')

    for path in report.files:
        lines.append(f'  wrote {path}')

    if report.fallback_count:
        lines.append('')
        lines.append(f'{report.fallback_count} input(s) replaced by the default colour')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'command': report.command}

    obj['colors'] = []
    for entry in report.colors:
        color = entry['color']
        color_obj = {
            'label': entry['label'],
            'hex': _hex(entry),
            'rgba': list(color.components),
        }
        if entry['native'] is not None:
            color_obj['native'] = list(entry['native'])
        obj['colors'].append(color_obj)

    if report.gradient is not None:
        obj['gradient'] = report.gradient.to_dict()
    if report.files:
        obj['files'] = list(report.files)
    obj['fallbacks'] = report.fallback_count
    return json.dumps(obj, indent=2)
