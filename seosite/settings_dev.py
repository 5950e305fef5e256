"""
Development Settings
====================
Overrides production `settings.py` for safe local development.

- DEBUG mode enabled
- HTTPS redirection disabled
- Local-only allowed hosts
- Verbose SEO logging
"""

from __future__ import annotations

from .settings import *  # import production defaults

# ============================================================
# Environment / Debug
# ============================================================
DEBUG = True
ENV = "development"

ALLOWED_HOSTS = ["127.0.0.1", "localhost", "0.0.0.0", "testserver"]


# ============================================================
# Security Overrides (force HTTP)
# ============================================================
SECURE_SSL_REDIRECT = False


# ============================================================
# Logging Configuration
# ============================================================
LOGGING["root"]["level"] = "DEBUG"
LOGGING["loggers"]["django"]["level"] = "DEBUG"

for logger_name in ("apps.core", "apps.seo"):
    LOGGING["loggers"].setdefault(
        logger_name,
        {
            "handlers": ["console"],
            "level": "DEBUG",
            "propagate": False,
        },
    )


# ============================================================
# Caching (local memory)
# ============================================================
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "TIMEOUT": 300,
    }
}
