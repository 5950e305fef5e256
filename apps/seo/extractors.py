"""
apps.seo.extractors
===================

Extractors derive SEO metadata from arbitrary content objects.

An extractor answers two questions:
  - ``supports(content)``: does this content expose what I read? (pure)
  - ``update_metadata(content, metadata)``: copy it onto the record.

The built-ins are capability based: each one looks for a single
``extract_seo_*`` method on the content and only touches one field.
Several extractors may write the same field; the last one to run wins.
"""

from __future__ import annotations

import abc
import logging
from typing import Any, Iterable, Mapping, Union

from django.urls import reverse

from .metadata import ALLOWED_EXTRA_TYPES, SeoMetadata

logger = logging.getLogger(__name__)


class SeoExtractor(abc.ABC):
    @abc.abstractmethod
    def supports(self, content: Any) -> bool:
        raise NotImplementedError

    @abc.abstractmethod
    def update_metadata(self, content: Any, metadata: SeoMetadata) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class CapabilityExtractor(SeoExtractor):
    """
    Base for extractors that read one ``extract_seo_*`` method off the content.
    """

    method_name: str = ""

    def supports(self, content: Any) -> bool:
        return callable(getattr(content, self.method_name, None))

    def extract(self, content: Any) -> Any:
        return getattr(content, self.method_name)()


class TitleExtractor(CapabilityExtractor):
    method_name = "extract_seo_title"

    def update_metadata(self, content: Any, metadata: SeoMetadata) -> None:
        title = self.extract(content)
        if title:
            metadata.title = str(title)


class DescriptionExtractor(CapabilityExtractor):
    method_name = "extract_seo_description"

    def update_metadata(self, content: Any, metadata: SeoMetadata) -> None:
        description = self.extract(content)
        if description:
            metadata.meta_description = str(description)


class KeywordsExtractor(CapabilityExtractor):
    """
    Accepts a comma separated string or an iterable of keywords and appends
    them to whatever keywords the record already carries.
    """

    method_name = "extract_seo_keywords"

    def update_metadata(self, content: Any, metadata: SeoMetadata) -> None:
        keywords = self.extract(content)
        if not keywords:
            return
        if not isinstance(keywords, str):
            keywords = ", ".join(str(k).strip() for k in keywords if str(k).strip())
        if not keywords:
            return
        if metadata.meta_keywords:
            metadata.meta_keywords = f"{metadata.meta_keywords}, {keywords}"
        else:
            metadata.meta_keywords = keywords


class OriginalUrlExtractor(CapabilityExtractor):
    method_name = "extract_seo_original_url"

    def update_metadata(self, content: Any, metadata: SeoMetadata) -> None:
        url = self.extract(content)
        if url:
            metadata.original_url = str(url)


RouteSpec = Union[str, tuple]


class OriginalRouteExtractor(CapabilityExtractor):
    """
    Content returns a URL name, or ``(name, kwargs)``; the reversed path
    becomes the original URL. ``NoReverseMatch`` is a content defect and
    propagates.
    """

    method_name = "extract_seo_original_route"

    def update_metadata(self, content: Any, metadata: SeoMetadata) -> None:
        route: RouteSpec = self.extract(content)
        if not route:
            return
        if isinstance(route, str):
            metadata.original_url = reverse(route)
            return
        name, kwargs = route
        metadata.original_url = reverse(name, kwargs=dict(kwargs or {}))


class ExtrasExtractor(CapabilityExtractor):
    """
    Content returns ``{"property": {"og:title": "..."}, "name": {...}}``.
    """

    method_name = "extract_seo_extras"

    def update_metadata(self, content: Any, metadata: SeoMetadata) -> None:
        extras: Mapping[str, Mapping[str, Any]] = self.extract(content) or {}
        for type_, entries in extras.items():
            if type_ not in ALLOWED_EXTRA_TYPES:
                logger.warning(
                    "Skipping extra SEO properties of unknown type %r from %s",
                    type_,
                    content.__class__.__name__,
                )
                continue
            for key, value in _items(entries):
                metadata.add_extra_property(type_, str(key), str(value))


def _items(entries: Union[Mapping[str, Any], Iterable[tuple]]) -> Iterable[tuple]:
    if isinstance(entries, Mapping):
        return entries.items()
    return entries
