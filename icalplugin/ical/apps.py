import logging
import socket
import time

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)


class IcalConfig(AppConfig):
    name = 'icalplugin.ical'
    label = 'ical'
    verbose_name = 'iCalendar'

    base_properties = None

    def ready(self):
        from icalplugin.ical.services.properties import configure

        conf = getattr(settings, 'ICAL', {}) or {}
        app_name = conf.get('APP_NAME') or settings.ROOT_URLCONF.split('.')[0]

        self.base_properties = configure(
            conf.get('PROPERTIES'),
            app_name,
            conf.get('HOSTNAME') or socket.gethostname(),
            conf.get('TIMEZONE') or time.strftime('%Z', time.localtime()),
        )
        logger.debug('iCalendar PRODID: %s', self.base_properties.properties['prodid'])
