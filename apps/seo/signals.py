from __future__ import annotations

import logging

from django.core.signals import setting_changed
from django.dispatch import receiver

from apps.seo.conf import reset_config
from apps.seo.services.factory import reset_factories

logger = logging.getLogger(__name__)


@receiver(setting_changed)
def reset_seo_settings(sender, setting, **kwargs):
    """
    Drop process-local SEO config when SEO or cache settings change
    (override_settings in tests, runtime reconfiguration).
    """
    if setting in ("SEO", "CACHES"):
        reset_config()
        reset_factories()
        logger.debug("SEO config reset after %s change", setting)
