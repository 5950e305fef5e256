"""
Wiring of ``SeoPresentation`` from ``settings.SEO``.
"""

from __future__ import annotations

import functools
import logging
from typing import List, Optional

from django.utils.module_loading import import_string

from apps.seo.cache import DjangoExtractorCache
from apps.seo.conf import SeoConfigValues, get_config
from apps.seo.extractors import SeoExtractor
from apps.seo.page import PageSink
from apps.seo.presentation import SeoPresentation
from apps.seo.translation import GettextTranslator

logger = logging.getLogger(__name__)


def load_extractors(paths) -> List[SeoExtractor]:
    """Instantiate extractor classes from dotted paths. Bad paths raise ImportError."""
    extractors: List[SeoExtractor] = []
    for path in paths:
        extractor_cls = import_string(path)
        extractors.append(extractor_cls())
    return extractors


@functools.lru_cache(maxsize=None)
def get_extractor_cache(alias: str = "default", timeout: Optional[int] = None) -> DjangoExtractorCache:
    """One shared cache object per (alias, timeout)."""
    return DjangoExtractorCache(alias=alias, timeout=timeout)


def build_presentation(
    page: PageSink,
    config: Optional[SeoConfigValues] = None,
) -> SeoPresentation:
    """
    Build a request-scoped coordinator around ``page``.
    """
    config = config or get_config()
    cache = None
    if config.cache_enabled:
        cache = get_extractor_cache(config.cache_alias, config.cache_timeout)
    presentation = SeoPresentation(
        page,
        GettextTranslator(),
        config,
        cache=cache,
        extractors=load_extractors(config.extractors),
    )
    logger.debug(
        "SeoPresentation built (extractors=%d, cache=%s)",
        len(presentation.extractors),
        config.cache_alias if cache else None,
    )
    return presentation


def reset_factories() -> None:
    get_extractor_cache.cache_clear()
