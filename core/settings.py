"""
Django settings for the navmenu project.

Reads configuration from environment variables (with sensible defaults for
local development).  In production, set these in a `.env` file or in the
process environment.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables from .env file in project root
from dotenv import load_dotenv

load_dotenv(BASE_DIR / ".env")


# ==============================================================================
# ENVIRONMENT HELPERS
# ==============================================================================


def _env(key, default=""):
    """Return an environment variable or *default*."""
    return os.environ.get(key, default)


def _env_bool(key, default=False):
    """Return an environment variable as a boolean."""
    return _env(key, str(default)).lower() in ("true", "1", "yes")


def _env_list(key, default="", sep=","):
    """Return an environment variable as a list of strings."""
    raw = _env(key, default)
    return [item.strip() for item in raw.split(sep) if item.strip()]


def _env_optional(key, default=""):
    """Return an environment variable, mapping an empty value to ``None``."""
    return _env(key, default) or None


# ==============================================================================
# SECURITY
# ==============================================================================

DEBUG = _env_bool("DEBUG", False)

SECRET_KEY = _env("SECRET_KEY")
if not SECRET_KEY and DEBUG:
    SECRET_KEY = "insecure-secret-key-do-NOT-use-in-prod"

ALLOWED_HOSTS = _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1" if DEBUG else "")


# ==============================================================================
# APPLICATIONS
# ==============================================================================

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
    "navmenu",
    "django_htmx",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_htmx.middleware.HtmxMiddleware",
]

ROOT_URLCONF = "core.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "navmenu.context_processors.navigation",
            ],
        },
    },
]


# ==============================================================================
# DATABASE
# ==============================================================================

# Menus are built in memory; the database only exists for Django's own apps.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}


# ==============================================================================
# INTERNATIONALIZATION
# ==============================================================================

LANGUAGE_CODE = _env("LANGUAGE_CODE", "en-us")
TIME_ZONE = _env("TIME_ZONE", "UTC")
USE_I18N = True
USE_TZ = True


# ==============================================================================
# STATIC FILES
# ==============================================================================

STATIC_URL = _env("STATIC_URL", "/static/")

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# ==============================================================================
# NAVIGATION MENUS
# ==============================================================================

NAVMENU = {
    "ACTIVE_CLASS": _env("NAVMENU_ACTIVE_CLASS", "active"),
    "EXACT_ACTIVE_CLASS": _env("NAVMENU_EXACT_ACTIVE_CLASS", "exact-active"),
    "WRAPPER_TAG": _env_optional("NAVMENU_WRAPPER_TAG", "ul"),
    "PARENT_TAG": _env_optional("NAVMENU_PARENT_TAG", "li"),
    "ACTIVE_CLASS_ON_PARENT": _env_bool("NAVMENU_ACTIVE_CLASS_ON_PARENT", True),
    "ACTIVE_CLASS_ON_LINK": _env_bool("NAVMENU_ACTIVE_CLASS_ON_LINK", False),
    "ROOT": _env("NAVMENU_ROOT", "/"),
    "MENU_BUILDER": _env("NAVMENU_MENU_BUILDER", "core.navigation.build_site_menu"),
}


# ==============================================================================
# LOGGING
# ==============================================================================

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": _env("DJANGO_LOG_LEVEL", "INFO"),
        },
        "navmenu": {
            "handlers": ["console"],
            "level": _env("APP_LOG_LEVEL", "INFO"),
        },
    },
}
