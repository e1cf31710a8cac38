"""Render calendar properties and event records into an iCalendar document."""

import hashlib
import logging
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal

import icalendar

from icalplugin.ical.exceptions import InvalidFieldValue
from .properties import merge_properties, wire_name
from .vfile import CalendarObject, to_text

logger = logging.getLogger(__name__)

# RFC 5545 iana-token / x-name
_PROPERTY_NAME = re.compile(r'[A-Za-z0-9-]+')

EVENT_DEFAULTS = {
    'SEQUENCE': '0',
    'TRANSP': 'OPAQUE',
}


def property_name(key):
    """Return the wire name for ``key``, rejecting names that would break the line."""
    if not isinstance(key, str):
        raise InvalidFieldValue(key, key, reason='is not a string property name')
    name = wire_name(key)
    if not _PROPERTY_NAME.fullmatch(name):
        raise InvalidFieldValue(key, key, reason='is not a valid property name')
    return name


def utc_stamp(now=None):
    """Return ``now`` (default: the current time) as ``YYYYMMDDTHHMMSSZ``."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime('%Y%m%dT%H%M%SZ')


def field_text(name, value):
    """Coerce a single field value to the text written after the colon."""
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'TRUE' if value else 'FALSE'
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return utc_stamp(value)
        # floating time
        return icalendar.vDatetime(value).to_ical().decode()
    if isinstance(value, date):
        return icalendar.vDate(value).to_ical().decode()
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    raise InvalidFieldValue(name, value)


def event_uid(fields, hostname):
    """Return ``<md5>@<hostname>`` for an event's normalized fields.

    DTSTAMP is left out so an event keeps its UID across renders. MD5 is used
    as a checksum here, not for security.
    """
    payload = ':'.join(f'{k}={fields[k]}' for k in sorted(fields) if k != 'DTSTAMP')
    digest = hashlib.md5(payload.encode('utf-8'), usedforsecurity=False).hexdigest()
    return f'{digest}@{hostname}'


def event_properties(event, hostname, now):
    """Normalize one event record and fill DTSTAMP, SEQUENCE, TRANSP and UID."""
    if not isinstance(event, Mapping):
        raise InvalidFieldValue('event', event)

    fields = {}
    for key, value in event.items():
        name = property_name(key)
        fields[name] = field_text(name, value)

    props = dict(fields)
    if not props.get('DTSTAMP'):
        props['DTSTAMP'] = now
    for name, default in EVENT_DEFAULTS.items():
        if not props.get(name):
            props[name] = default
    if not props.get('UID'):
        props['UID'] = event_uid(fields, hostname)
    return props


def _wrap(props):
    return {name: [{'value': value}] for name, value in props.items()}


def build_document(base, overrides=None, events=None, now=None):
    """Assemble the VCALENDAR tree for one render call.

    Parameters
    ----------
    base : BaseProperties
        Configuration computed when the app became ready.
    overrides : dict, optional
        Per-request calendar properties; non-empty values win over ``base``.
    events : iterable of dict, optional
        Event records, kept in the given order.
    now : datetime, optional
        Used for every defaulted DTSTAMP. Defaults to the current UTC time.

    Raises
    ------
    InvalidFieldValue
        If any value is not a scalar or any key is not a valid property name.
    """
    stamp = utc_stamp(now)
    calendar_props = {}
    for key, value in merge_properties(base, overrides).items():
        name = property_name(key)
        calendar_props[name] = field_text(name, value)

    vevents = [
        CalendarObject(type='VEVENT', properties=_wrap(event_properties(event, base.hostname, stamp)))
        for event in events or []
    ]
    return CalendarObject(type='VCALENDAR', properties=_wrap(calendar_props), objects=vevents)


def render(base, overrides=None, events=None, now=None):
    """Render a complete iCalendar document as text with CRLF line endings."""
    document = build_document(base, overrides, events, now=now)
    logger.debug('Rendering calendar with %d events', len(document.objects))
    return to_text([document])
