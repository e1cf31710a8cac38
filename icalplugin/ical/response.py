"""The ``reply_ical`` helper: render calendar data straight into a response."""

from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse

from icalplugin.ical.services.renderer import render

CONTENT_TYPE = 'text/calendar; charset=utf-8'


def reply_ical(data=None, base=None):
    """Return an ``HttpResponse`` holding the rendered .ics document.

    ``data`` may hold ``properties`` (per-request calendar overrides) and
    ``events`` (a list of event dicts). ``base`` defaults to the properties
    configured when the ical app became ready.

    Raises ``ImproperlyConfigured`` when no base properties are available, and
    ``InvalidFieldValue`` before any response is built if a value cannot be
    written.
    """
    data = data or {}
    if base is None:
        base = apps.get_app_config('ical').base_properties
    if base is None:
        raise ImproperlyConfigured('The ical app has no base properties; was it made ready?')
    body = render(base, data.get('properties'), data.get('events'))
    return HttpResponse(body, content_type=CONTENT_TYPE)
