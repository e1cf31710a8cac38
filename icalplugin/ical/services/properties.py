"""Calendar-level properties: key normalization, defaults and merging."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Calendar properties filled in at configure time when the host leaves them out.
CALENDAR_DEFAULTS = ('calscale', 'method', 'prodid', 'version',
                     'x_wr_caldesc', 'x_wr_calname', 'x_wr_timezone')


def wire_name(key: str) -> str:
    """Return the RFC 5545 spelling of a property name.

    ``x_wr_calname`` becomes ``X-WR-CALNAME``. Keys that do not start with a
    lowercase letter are taken to be in wire form already and are returned
    unchanged, so the function is idempotent.
    """
    if key and 'a' <= key[0] <= 'z':
        return key.upper().replace('_', '-')
    return key


@dataclass(frozen=True)
class BaseProperties:
    """Defaulted calendar properties computed once when the app is ready.

    ``properties`` is a read-only mapping so a single instance can be shared
    by every request.
    """
    properties: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    hostname: str = 'localhost'

    def __post_init__(self):
        if not isinstance(self.properties, MappingProxyType):
            object.__setattr__(self, 'properties', MappingProxyType(dict(self.properties)))


def configure(default_properties, app_name, hostname, tz_abbrev) -> BaseProperties:
    """Fill every calendar default the host did not provide.

    Parameters
    ----------
    default_properties : dict or None
        Host overrides, keyed by lowercase property name. Not mutated.
    app_name : str
        Identifier of the host application, used for PRODID and X-WR-CALNAME.
    hostname : str
        Local host name, used for PRODID and generated event UIDs.
    tz_abbrev : str
        Local timezone abbreviation, used for X-WR-TIMEZONE.
    """
    props = dict(default_properties or {})
    fallbacks = {
        'calscale': 'GREGORIAN',
        'method': 'PUBLISH',
        'prodid': f'-//{hostname}//NONSGML {app_name}//EN',
        'version': '2.0',
        'x_wr_caldesc': '',
        'x_wr_calname': app_name,
        'x_wr_timezone': tz_abbrev,
    }
    for name in CALENDAR_DEFAULTS:
        if not props.get(name):
            props[name] = fallbacks[name]
    return BaseProperties(properties=props, hostname=hostname)


def merge_properties(base: BaseProperties, overrides=None) -> dict:
    """Merge per-request overrides over the configured properties.

    A non-empty override wins for any name the base set holds. Names only
    present in ``overrides`` are passed through as given.
    """
    overrides = overrides or {}
    merged = {}
    for name, value in base.properties.items():
        merged[name] = overrides.get(name) or value
    for name, value in overrides.items():
        if name not in merged:
            merged[name] = value
    return merged
