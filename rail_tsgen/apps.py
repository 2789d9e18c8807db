"""
Django app configuration for rail-tsgen.
"""

import logging
from collections.abc import Mapping

from django.apps import AppConfig as BaseAppConfig
from django.conf import settings

from .defaults import DJANGO_SETTINGS_KEY

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for rail-tsgen."""

    name = "rail_tsgen"
    verbose_name = "Rail TypeScript Generator"
    label = "rail_tsgen"

    def ready(self):
        """Validate configuration once Django has loaded."""
        self._validate_configuration()

    def _validate_configuration(self):
        """Warn about settings that the generator will ignore."""
        from .conf import unknown_setting_keys

        configured = getattr(settings, DJANGO_SETTINGS_KEY, None)
        if configured is None:
            return
        if not isinstance(configured, Mapping):
            logger.warning(
                f"{DJANGO_SETTINGS_KEY} must be a dict, got {type(configured).__name__}; ignoring it"
            )
            return
        for key in unknown_setting_keys(configured):
            logger.warning(f"Ignoring unknown {DJANGO_SETTINGS_KEY} setting '{key}'")
        logger.debug("Configuration validation completed")
