"""
Per-request SEO metadata record.

``SeoMetadata`` is a plain, mutable bag of values collected from a content
object and its extractors before being pushed into the page sink.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

EXTRA_TYPE_NAME = "name"
EXTRA_TYPE_PROPERTY = "property"
EXTRA_TYPE_HTTP_EQUIV = "http-equiv"

ALLOWED_EXTRA_TYPES = (EXTRA_TYPE_NAME, EXTRA_TYPE_PROPERTY, EXTRA_TYPE_HTTP_EQUIV)


@dataclass(frozen=True)
class ExtraProperty:
    """A single ``<meta {type}="{key}" content="{value}">`` entry."""

    type: str
    key: str
    value: str

    def __post_init__(self):
        if self.type not in ALLOWED_EXTRA_TYPES:
            raise ValueError(
                f"Extra property type must be one of {ALLOWED_EXTRA_TYPES}, got {self.type!r}."
            )


@dataclass
class SeoMetadata:
    title: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    original_url: Optional[str] = None
    extra_properties: List[ExtraProperty] = field(default_factory=list)

    def add_extra_property(self, type: str, key: str, value: str) -> ExtraProperty:
        prop = ExtraProperty(type=type, key=key, value=value)
        self.extra_properties.append(prop)
        return prop

    def add_extra_name(self, key: str, value: str) -> ExtraProperty:
        return self.add_extra_property(EXTRA_TYPE_NAME, key, value)

    def add_extra_property_tag(self, key: str, value: str) -> ExtraProperty:
        return self.add_extra_property(EXTRA_TYPE_PROPERTY, key, value)

    def add_extra_http_equiv(self, key: str, value: str) -> ExtraProperty:
        return self.add_extra_property(EXTRA_TYPE_HTTP_EQUIV, key, value)

    def remove_extra_property(self, type: str, key: str) -> int:
        """Drop every extra property matching ``(type, key)``; returns how many were removed."""
        before = len(self.extra_properties)
        self.extra_properties = [
            p for p in self.extra_properties if not (p.type == type and p.key == key)
        ]
        return before - len(self.extra_properties)
