"""
apps.core.cache
===============

Centralized cache key utilities and backend lookup.

✔ Django 5.2+ / Python 3.12+
✔ Redis / LocMem / cluster cache compatible
✔ Stable digested keys with namespace isolation
✔ Strict key normalization to prevent collisions
"""

from __future__ import annotations

import hashlib
import logging
from typing import Optional

from django.core.cache import BaseCache, caches

logger = logging.getLogger(__name__)

DEFAULT_CACHE_ALIAS = "default"

# =====================================================================
# KEY UTILITIES
# =====================================================================


def namespaced_key(
    key: str,
    *,
    version: Optional[int] = None,
    namespace: Optional[str] = None,
) -> str:
    """
    Portable canonical key format.

    Example:
        namespaced_key("app.models.Page", version=3, namespace="seo.extractors")
        → "seo.extractors::app.models.Page::v3"
    """
    key = (key or "").strip()
    ns = (namespace or "").strip()

    parts: list[str] = []
    if ns:
        parts.append(ns)
    parts.append(key)
    if version is not None:
        parts.append(f"v{int(version)}")
    return "::".join(parts)


def digest_key(base: str) -> str:
    """
    Safe digest for long/unsafe keys (Redis + memcached-safe).
    The readable prefix is kept for debugging; the digest keeps keys unique.
    """
    base = base.replace(" ", "").strip()
    digest = hashlib.sha256(base.encode("utf-8")).hexdigest()[:16]
    return f"{base[:32]}::{digest}"


def cache_key(
    key: str,
    *,
    version: Optional[int] = None,
    namespace: Optional[str] = None,
) -> str:
    """Namespaced + digested key, the form every cache write should use."""
    return digest_key(namespaced_key(key, version=version, namespace=namespace))


# =====================================================================
# BACKEND LOOKUP
# =====================================================================


def get_cache(alias: Optional[str] = None) -> BaseCache:
    """
    Resolve a configured cache backend by alias.

    Unknown aliases raise ``InvalidCacheBackendError`` from Django; that is a
    configuration error and is not hidden here.
    """
    alias = (alias or DEFAULT_CACHE_ALIAS).strip() or DEFAULT_CACHE_ALIAS
    backend = caches[alias]
    logger.debug("Cache backend resolved (alias=%s, backend=%s)", alias, backend.__class__.__name__)
    return backend
