"""
In-process page metadata sink.

``SeoPage`` holds the title and meta entries decided for one response.
It does not render markup; templates read ``get_title()`` / ``get_metas()``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Tuple

MetaEntry = Tuple[str, Dict[str, Any]]
MetaMap = Dict[str, Dict[str, MetaEntry]]


class PageSink(Protocol):
    """Anything the presentation layer can push title/meta values into."""

    def set_title(self, title: str) -> Any: ...

    def add_meta(self, type: str, name: str, content: str, extras: Optional[dict] = None) -> Any: ...

    def get_metas(self) -> MetaMap: ...


class SeoPage:
    def __init__(self, title: str = "", metas: Optional[MetaMap] = None):
        self.title = title
        self.metas: MetaMap = {"http-equiv": {}, "name": {}, "property": {}}
        for type_, entries in (metas or {}).items():
            for name, (content, extras) in entries.items():
                self.add_meta(type_, name, content, extras)

    def set_title(self, title: str) -> "SeoPage":
        self.title = title
        return self

    def get_title(self) -> str:
        return self.title

    def add_meta(
        self,
        type: str,
        name: str,
        content: str,
        extras: Optional[dict] = None,
    ) -> "SeoPage":
        self.metas.setdefault(type, {})[name] = (content, dict(extras or {}))
        return self

    def get_metas(self) -> MetaMap:
        return self.metas

    def has_meta(self, type: str, name: str) -> bool:
        return name in self.metas.get(type, {})

    def remove_meta(self, type: str, name: str) -> "SeoPage":
        self.metas.get(type, {}).pop(name, None)
        return self

    def __repr__(self) -> str:
        count = sum(len(v) for v in self.metas.values())
        return f"<SeoPage title={self.title!r} metas={count}>"
