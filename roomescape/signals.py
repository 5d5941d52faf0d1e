"""Django signals for cache invalidation."""

import logging

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from roomescape.cache_keys import THEMES_CACHE_KEY, TIMES_CACHE_KEY
from roomescape.models import ReservationTime, Theme

logger = logging.getLogger(__name__)


@receiver([post_save, post_delete], sender=Theme)
def invalidate_theme_cache(sender, instance, **kwargs):
    """Invalidate the theme catalog when a theme is saved or deleted."""
    cache.delete(THEMES_CACHE_KEY)
    logger.debug("Invalidated %s after change to theme %s", THEMES_CACHE_KEY, instance.pk)


@receiver([post_save, post_delete], sender=ReservationTime)
def invalidate_time_cache(sender, instance, **kwargs):
    """Invalidate the time catalog when a reservation time is saved or deleted."""
    cache.delete(TIMES_CACHE_KEY)
    logger.debug("Invalidated %s after change to time %s", TIMES_CACHE_KEY, instance.pk)
