"""Serialize a tree of calendar objects to RFC 5545 content lines.

The tree mirrors the shape of a vCalendar file::

    CalendarObject(type='VCALENDAR',
                   properties={'VERSION': [{'value': '2.0'}]},
                   objects=[CalendarObject(type='VEVENT', ...)])

Each property maps to a list of values so a name can repeat; every value is a
dict with a ``value`` string and an optional ``params`` dict.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from icalendar.parser import Contentline

CRLF = '\r\n'

_LINE_BREAK = re.compile(r'\r\n|\r|\n')
_FOLD = re.compile(r'\r\n[ \t]')


@dataclass
class CalendarObject:
    type: str
    properties: dict[str, list[dict]] = field(default_factory=dict)
    objects: list[CalendarObject] = field(default_factory=list)


def content_line(name, value, params=None):
    """Build one unfolded ``NAME;PARAM=v:value`` line."""
    head = name
    for param, param_value in (params or {}).items():
        head += f';{param}={param_value}'
    # A raw line break would end the content line early.
    escaped = _LINE_BREAK.sub(r'\\n', value)
    return f'{head}:{escaped}'


def generate_lines(objects):
    """Return the folded physical lines for ``objects``, depth first."""
    lines = []
    for obj in objects:
        lines.append(f'BEGIN:{obj.type}')
        for name, values in obj.properties.items():
            for entry in values:
                line = content_line(name, entry['value'], entry.get('params'))
                # folds at 75 octets with CRLF + space
                lines.append(Contentline(line).to_ical().decode('utf-8'))
        lines.extend(generate_lines(obj.objects))
        lines.append(f'END:{obj.type}')
    return lines


def to_text(objects):
    return CRLF.join(generate_lines(objects)) + CRLF


def unfold(text):
    """Join continuation lines back onto the line they were folded from."""
    return _FOLD.sub('', text)
