# seosite/settings.py
"""
Django Settings
Django 5.2+ • Python 3.12+
Env-driven • Hardened imports • SEO presentation defaults
"""

from __future__ import annotations

import os
import logging
from pathlib import Path
from typing import Any
from django.core.exceptions import ImproperlyConfigured

# Optional .env loader (non-fatal)
try:
    from dotenv import load_dotenv  # type: ignore
    load_dotenv()
except ImportError:
    pass

logger = logging.getLogger("seosite")


# ---------------------------
# Helper utilities
# ---------------------------
def env_str(value: Any, default: str = "") -> str:
    return str(value) if value is not None else default


def env_bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def env_list(value: Any, default: list | None = None) -> list:
    if value is None:
        return default or []
    return [v.strip() for v in str(value).split(",") if v.strip()]


def env_int(value: Any, default: int | None = None) -> int | None:
    if value is None or str(value).strip() == "":
        return default
    try:
        return int(str(value).strip())
    except ValueError:
        raise ImproperlyConfigured(f"Expected an integer, got {value!r}.")


# ---------------------------
# Paths & core
# ---------------------------
BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = env_str(
    os.getenv("DJANGO_SECRET_KEY"),
    "django-insecure-development-secret",
)

DEBUG = env_bool(os.getenv("DJANGO_DEBUG", None), False)
ENV = "development" if DEBUG else "production"


# ---------------------------
# Allowed hosts
# ---------------------------
ALLOWED_HOSTS = env_list(os.getenv("DJANGO_ALLOWED_HOSTS"), ["127.0.0.1", "localhost", "testserver"])
ALLOWED_HOSTS = [h for h in ALLOWED_HOSTS if h and h.strip()]

if not DEBUG and not ALLOWED_HOSTS:
    raise ImproperlyConfigured("ALLOWED_HOSTS cannot be empty when DEBUG=False.")


# ---------------------------
# Installed apps
# ---------------------------
DJANGO_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.staticfiles",
]

LOCAL_APPS = [
    "apps.core",
    "apps.seo",
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS


# ---------------------------
# Middleware
# ---------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.locale.LocaleMiddleware",
    "django.middleware.common.CommonMiddleware",
    "apps.seo.middleware.SeoPageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]


# ---------------------------
# Routing / ASGI / WSGI
# ---------------------------
ROOT_URLCONF = "seosite.urls"
WSGI_APPLICATION = "seosite.wsgi.application"
ASGI_APPLICATION = "seosite.asgi.application"


# ---------------------------
# Database
# ---------------------------
_db_name = env_str(os.getenv("DB_NAME"))
if not _db_name:
    _db_name = str(BASE_DIR / "db.sqlite3")

DATABASES = {
    "default": {
        "ENGINE": env_str(os.getenv("DB_ENGINE"), "django.db.backends.sqlite3"),
        "NAME": _db_name,
        "USER": env_str(os.getenv("DB_USER")),
        "PASSWORD": env_str(os.getenv("DB_PASSWORD")),
        "HOST": env_str(os.getenv("DB_HOST")),
        "PORT": env_str(os.getenv("DB_PORT")),
    }
}


# ---------------------------
# i18n / timezone
# ---------------------------
LANGUAGE_CODE = env_str(os.getenv("DJANGO_LANGUAGE"), "en-us")
TIME_ZONE = env_str(os.getenv("DJANGO_TIME_ZONE"), "UTC")

USE_I18N = True
USE_TZ = True

LOCALE_PATHS = [BASE_DIR / "locale"]


# ---------------------------
# Static
# ---------------------------
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# ---------------------------
# Templates
# ---------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "debug": DEBUG,
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "apps.seo.context_processors.seo_page",
            ],
        },
    },
]


# ---------------------------
# Caching
# ---------------------------
USE_REDIS = env_bool(os.getenv("USE_REDIS_CACHE"), False)

if USE_REDIS:
    REDIS_URL = env_str(os.getenv("REDIS_URL"), "redis://127.0.0.1:6379/1")
    CACHES = {
        "default": {
            "BACKEND": "django_redis.cache.RedisCache",
            "LOCATION": REDIS_URL,
            "OPTIONS": {
                "CLIENT_CLASS": "django_redis.client.DefaultClient",
                "IGNORE_EXCEPTIONS": not DEBUG,
            },
        }
    }
else:
    CACHES = {
        "default": {
            "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
            "TIMEOUT": 300,
        }
    }


# ---------------------------
# SEO presentation
# ---------------------------
SEO = {
    "TITLE": os.getenv("SEO_TITLE") or None,
    "DESCRIPTION": os.getenv("SEO_DESCRIPTION") or None,
    "ORIGINAL_URL_BEHAVIOUR": env_str(os.getenv("SEO_ORIGINAL_URL_BEHAVIOUR"), "canonical"),
    "CACHE_ENABLED": env_bool(os.getenv("SEO_CACHE_ENABLED"), True),
    "CACHE_ALIAS": env_str(os.getenv("SEO_CACHE_ALIAS"), "default"),
    "CACHE_TIMEOUT": env_int(os.getenv("SEO_CACHE_TIMEOUT"), None),
}


# ---------------------------
# Logging
# ---------------------------
LOG_LEVEL = env_str(os.getenv("LOG_LEVEL"), "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "{levelname} {asctime} {module} {message}", "style": "{"},
        "simple": {"format": "{levelname} {message}", "style": "{"},
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "simple"}},
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "django": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "apps": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}


# ---------------------------
# Security
# ---------------------------
SECURE_SSL_REDIRECT = env_bool(os.getenv("SECURE_SSL_REDIRECT"), False)
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = env_str(os.getenv("X_FRAME_OPTIONS"), "DENY")
SECURE_REFERRER_POLICY = env_str(os.getenv("SECURE_REFERRER_POLICY"), "strict-origin-when-cross-origin")


# ---------------------------
# Startup banner
# ---------------------------
logger.info("Settings Loaded (DEBUG=%s)", DEBUG)
