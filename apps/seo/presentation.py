"""
apps.seo.presentation
=====================

Pushes the SEO metadata of one content object into the page sink.

One ``update_seo_page(content)`` call:
  1. copies the content's ``SeoMetadata`` (or starts from an empty one)
  2. runs ad-hoc extractors, then the cached set of supporting extractors
  3. applies the configured title / description templates
  4. writes title, description, extra properties and keywords to the sink
  5. prepares a redirect when the original URL behaviour asks for one

Missing values are skipped. Extractor errors are not caught.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, List, Optional

from django.core.exceptions import DisallowedRedirect
from django.http import HttpResponseRedirect

from apps.core.utils.logging import log_event

from .cache import ExtractorCache, ExtractorCollection, content_type_key, registry_fingerprint
from .conf import OriginalUrlBehaviour, SeoConfigValues
from .extractors import SeoExtractor
from .metadata import EXTRA_TYPE_NAME, SeoMetadata
from .page import PageSink
from .translation import Translator

logger = logging.getLogger(__name__)


def merge_keywords(existing: Optional[str], new: Optional[str]) -> str:
    """
    Comma separated union of two keyword strings: existing keywords first,
    order preserved, duplicates and blanks dropped.
    """
    merged: List[str] = []
    for chunk in (existing or "", new or ""):
        for keyword in chunk.split(","):
            keyword = keyword.strip()
            if keyword and keyword not in merged:
                merged.append(keyword)
    return ", ".join(merged)


class SeoPresentation:
    def __init__(
        self,
        page: PageSink,
        translator: Translator,
        config: SeoConfigValues,
        cache: Optional[ExtractorCache] = None,
        extractors: Iterable[SeoExtractor] = (),
    ):
        self.page = page
        self.translator = translator
        self.config = config
        self.cache = cache
        self.extractors: List[SeoExtractor] = list(extractors)
        self._adhoc_extractors: List[SeoExtractor] = []
        self._redirect_response: Optional[HttpResponseRedirect] = None

    def add_extractor(self, extractor: SeoExtractor) -> None:
        """
        Register an extractor that is consulted on every call, before the
        cached ones, without going through the cache.
        """
        self._adhoc_extractors.append(extractor)

    def get_redirect_response(self) -> Optional[HttpResponseRedirect]:
        return self._redirect_response

    # ------------------------------------------------------------------
    # Main entry point
    # ------------------------------------------------------------------
    def update_seo_page(self, content: Any) -> None:
        self._redirect_response = None
        metadata = self.get_seo_metadata(content)

        for extractor in self._adhoc_extractors:
            if extractor.supports(content):
                extractor.update_metadata(content, metadata)
        for extractor in self.get_extractors_for_content(content):
            extractor.update_metadata(content, metadata)

        self._apply_title(metadata)
        self._apply_description(metadata)
        for prop in metadata.extra_properties:
            self.page.add_meta(prop.type, prop.key, prop.value)
        self._apply_keywords(metadata)
        self._apply_original_url(metadata)

    def get_seo_metadata(self, content: Any) -> SeoMetadata:
        """
        Work on a copy so extractors never change the content's own record.
        """
        getter = getattr(content, "get_seo_metadata", None)
        metadata = getter() if callable(getter) else None
        if metadata is None:
            return SeoMetadata()
        return copy.deepcopy(metadata)

    def get_extractors_for_content(self, content: Any) -> Iterable[SeoExtractor]:
        """
        Registry extractors that support ``content``.

        Without a cache every predicate runs on every call. With one, a fresh
        cached collection built from this registry is reused as is; a missing
        or stale one is rebuilt and stored.
        """
        if self.cache is None:
            return [e for e in self.extractors if e.supports(content)]

        key = content_type_key(content)
        collection = self.cache.load_extractors_from_cache(key)
        if collection is not None and collection.is_fresh(registry=registry_fingerprint(self.extractors)):
            log_event(logger, "debug", "seo.extractors.cache_hit", content_type=key)
            return collection

        log_event(
            logger,
            "debug",
            "seo.extractors.cache_rebuild" if collection is not None else "seo.extractors.cache_miss",
            content_type=key,
        )
        collection = ExtractorCollection.build(content, self.extractors)
        self.cache.put_extractors_in_cache(key, collection)
        return collection

    # ------------------------------------------------------------------
    # Field resolution
    # ------------------------------------------------------------------
    def _apply_title(self, metadata: SeoMetadata) -> None:
        if not metadata.title:
            return
        if self.config.title:
            title = self.translator.translate(self.config.title, {"content_title": metadata.title})
        else:
            title = metadata.title
        self.page.set_title(title)

    def _apply_description(self, metadata: SeoMetadata) -> None:
        if not metadata.meta_description:
            return
        if self.config.description:
            description = self.translator.translate(
                self.config.description,
                {"content_description": metadata.meta_description},
            )
        else:
            description = metadata.meta_description
        self.page.add_meta(EXTRA_TYPE_NAME, "description", description)

    def _apply_keywords(self, metadata: SeoMetadata) -> None:
        if not metadata.meta_keywords:
            return
        existing = self.page.get_metas().get(EXTRA_TYPE_NAME, {}).get("keywords")
        existing_keywords = existing[0] if existing else ""
        self.page.add_meta(
            EXTRA_TYPE_NAME,
            "keywords",
            merge_keywords(existing_keywords, metadata.meta_keywords),
        )

    def _apply_original_url(self, metadata: SeoMetadata) -> None:
        # CANONICAL is left to extractors; NONE ignores the URL.
        if self.config.original_url_behaviour != OriginalUrlBehaviour.REDIRECT:
            return
        if not metadata.original_url:
            return
        try:
            self._redirect_response = HttpResponseRedirect(metadata.original_url)
        except DisallowedRedirect:
            # e.g. javascript: or data: URLs; the page renders without redirecting
            log_event(logger, "warning", "seo.redirect.disallowed", target=metadata.original_url)
            return
        log_event(logger, "info", "seo.redirect.prepared", target=metadata.original_url)
