"""
apps.seo.conf
=============

Process-wide SEO defaults read from ``settings.SEO``.

Example::

    SEO = {
        "TITLE": "%(content_title)s | Example",
        "DESCRIPTION": "Example. %(content_description)s",
        "ORIGINAL_URL_BEHAVIOUR": "redirect",
        "EXTRACTORS": ["apps.seo.extractors.TitleExtractor"],
        "CACHE_ENABLED": True,
        "CACHE_ALIAS": "default",
        "CACHE_TIMEOUT": None,
    }

Templates use ``%``-interpolation, so a literal percent sign is written
``%%`` (``"100%% off | %(content_title)s"``).
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Any, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import models

logger = logging.getLogger(__name__)


class OriginalUrlBehaviour(models.TextChoices):
    NONE = "none", "None"
    CANONICAL = "canonical", "Canonical link"
    REDIRECT = "redirect", "Redirect"


DEFAULT_EXTRACTORS: tuple[str, ...] = (
    "apps.seo.extractors.TitleExtractor",
    "apps.seo.extractors.DescriptionExtractor",
    "apps.seo.extractors.KeywordsExtractor",
    "apps.seo.extractors.OriginalUrlExtractor",
    "apps.seo.extractors.OriginalRouteExtractor",
    "apps.seo.extractors.ExtrasExtractor",
)


@dataclass
class SeoConfigValues:
    """
    Default values applied on every presentation pass.

    ``title`` and ``description`` are translatable templates receiving the
    ``content_title`` / ``content_description`` parameters.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    original_url_behaviour: str = OriginalUrlBehaviour.CANONICAL
    extractors: tuple[str, ...] = DEFAULT_EXTRACTORS
    cache_enabled: bool = True
    cache_alias: str = "default"
    cache_timeout: Optional[int] = None

    def set_title(self, title: Optional[str]) -> None:
        self.title = _parse_template(title, "content_title", "TITLE")

    def set_description(self, description: Optional[str]) -> None:
        self.description = _parse_template(description, "content_description", "DESCRIPTION")

    def set_original_url_behaviour(self, behaviour: str) -> None:
        self.original_url_behaviour = _parse_behaviour(behaviour)


def _parse_behaviour(value: Any) -> str:
    raw = str(value or OriginalUrlBehaviour.NONE).strip().lower()
    if raw not in OriginalUrlBehaviour.values:
        raise ImproperlyConfigured(
            f"SEO ORIGINAL_URL_BEHAVIOUR must be one of {OriginalUrlBehaviour.values}, got {value!r}."
        )
    return OriginalUrlBehaviour(raw)


def _parse_template(value: Any, param: str, setting: str) -> Optional[str]:
    if not value:
        return None
    template = str(value)
    try:
        template % {param: ""}
    except (KeyError, TypeError, ValueError) as exc:
        raise ImproperlyConfigured(
            f"SEO {setting} is not a valid template ({exc}). Only %({param})s is "
            f"available and a literal % must be written as %%, got {template!r}."
        )
    return template


def _parse_timeout(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        timeout = int(value)
    except (TypeError, ValueError):
        raise ImproperlyConfigured(f"SEO CACHE_TIMEOUT must be an integer or None, got {value!r}.")
    if timeout < 0:
        raise ImproperlyConfigured("SEO CACHE_TIMEOUT cannot be negative.")
    return timeout


def _parse_extractors(value: Any) -> tuple[str, ...]:
    if value is None:
        return DEFAULT_EXTRACTORS
    if isinstance(value, str) or not all(isinstance(v, str) for v in value):
        raise ImproperlyConfigured("SEO EXTRACTORS must be a list of dotted paths.")
    return tuple(v.strip() for v in value if v.strip())


def load_config(raw: Optional[dict[str, Any]] = None) -> SeoConfigValues:
    """
    Build ``SeoConfigValues`` from a settings dict (``settings.SEO`` by default).
    """
    if raw is None:
        raw = getattr(settings, "SEO", None) or {}
    if not isinstance(raw, dict):
        raise ImproperlyConfigured("settings.SEO must be a dict.")

    known = {
        "TITLE",
        "DESCRIPTION",
        "ORIGINAL_URL_BEHAVIOUR",
        "EXTRACTORS",
        "CACHE_ENABLED",
        "CACHE_ALIAS",
        "CACHE_TIMEOUT",
    }
    unknown = {k: v for k, v in raw.items() if k not in known}
    if unknown:
        logger.warning("Ignoring unknown SEO settings: %s", ", ".join(sorted(unknown)))

    return SeoConfigValues(
        title=_parse_template(raw.get("TITLE"), "content_title", "TITLE"),
        description=_parse_template(raw.get("DESCRIPTION"), "content_description", "DESCRIPTION"),
        original_url_behaviour=_parse_behaviour(
            raw.get("ORIGINAL_URL_BEHAVIOUR", OriginalUrlBehaviour.CANONICAL)
        ),
        extractors=_parse_extractors(raw.get("EXTRACTORS")),
        cache_enabled=bool(raw.get("CACHE_ENABLED", True)),
        cache_alias=str(raw.get("CACHE_ALIAS") or "default"),
        cache_timeout=_parse_timeout(raw.get("CACHE_TIMEOUT")),
    )


@functools.lru_cache(maxsize=1)
def get_config() -> SeoConfigValues:
    """
    Process-local cached config. Cleared on ``setting_changed`` (see signals).
    """
    return load_config()


def reset_config() -> None:
    get_config.cache_clear()
