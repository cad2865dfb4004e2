"""
Menu defaults read from the ``NAVMENU`` dict in Django settings.

Every key is optional; missing keys fall back to the built-in values below::

    NAVMENU = {
        "ACTIVE_CLASS": "is-current",
        "PARENT_TAG": None,
        "MENU_BUILDER": "core.navigation.build_site_menu",
    }
"""

import logging

from django.conf import settings as django_settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Built-in fallbacks (used when settings are missing or incomplete)
# ---------------------------------------------------------------------------
_FALLBACK_SETTINGS = {
    "ACTIVE_CLASS": "active",
    "EXACT_ACTIVE_CLASS": "exact-active",
    "WRAPPER_TAG": "ul",
    "PARENT_TAG": "li",
    "ACTIVE_CLASS_ON_PARENT": True,
    "ACTIVE_CLASS_ON_LINK": False,
    "ROOT": "/",
    "MENU_BUILDER": None,
}


def _configured_settings() -> dict:
    try:
        return getattr(django_settings, "NAVMENU", None) or {}
    except ImproperlyConfigured:
        return {}


def get_menu_settings() -> dict:
    """Return the ``NAVMENU`` settings merged over the built-in fallbacks.

    Works outside a configured Django project too (plain scripts, library
    use), in which case the fallbacks are returned unchanged.  Unknown keys
    are ignored here; ``warn_unknown_settings()`` reports them at startup.
    """
    configured = _configured_settings()
    return {
        key: configured.get(key, default)
        for key, default in _FALLBACK_SETTINGS.items()
    }


def warn_unknown_settings() -> list:
    """Log (once, from ``NavmenuConfig.ready``) any unrecognised ``NAVMENU`` keys."""
    unknown = sorted(set(_configured_settings()) - set(_FALLBACK_SETTINGS))
    if unknown:
        logger.warning("Ignoring unknown NAVMENU settings: %s", ", ".join(unknown))
    return unknown
