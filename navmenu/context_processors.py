"""
Context processors for navmenu.

Exposes the project's navigation menu, already activated for the current
request, to templates so it can be rendered from a single source of truth.
"""

import logging

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from navmenu.conf import get_menu_settings
from navmenu.menu import Menu

logger = logging.getLogger(__name__)


def current_path(request):
    """
    Return the path of the page the visitor is looking at.

    HTMX requests usually hit a partial endpoint, so the page URL is taken
    from the ``HX-Current-URL`` header (via ``django_htmx``) when it is
    same-origin.
    """
    htmx = getattr(request, "htmx", None)
    if htmx and htmx.current_url_abs_path:
        return htmx.current_url_abs_path
    return request.path


def load_menu_builder(dotted_path):
    try:
        return import_string(dotted_path)
    except ImportError as exc:
        raise ImproperlyConfigured(
            f"NAVMENU['MENU_BUILDER'] refers to {dotted_path!r}, which cannot be imported."
        ) from exc


def navigation(request):
    """
    Add the navigation menu to the template context.

    Returns a dictionary with a ``navigation`` key holding the ``Menu`` built
    by ``NAVMENU['MENU_BUILDER']``, activated for the current path.  Nothing
    is added when no builder is configured.
    """
    menu_settings = get_menu_settings()
    if not menu_settings["MENU_BUILDER"]:
        return {}

    menu = load_menu_builder(menu_settings["MENU_BUILDER"])()
    if not isinstance(menu, Menu):
        raise ImproperlyConfigured(
            f"NAVMENU['MENU_BUILDER'] must return a Menu, got {type(menu).__name__}."
        )

    path = current_path(request)
    logger.debug("Activating navigation for %s", path)
    menu.set_active(path, menu_settings["ROOT"])

    return {
        "navigation": menu,
    }
