"""
apps.seo.cache
==============

Caching of the extractors that apply to a content type.

Resolving which extractors support a content object means calling every
registered ``supports()`` predicate. The result only depends on the content
class and the extractor classes, so it is cached per content type as an
``ExtractorCollection``.

A collection records the registry it was built from and the source files it
was derived from. It stays fresh while the registry is unchanged and none of
those files changes on disk. Caches never judge freshness; they only store and
return whole collections.
"""

from __future__ import annotations

import inspect
import logging
import os
import threading
import time
from typing import Any, Dict, Iterable, Iterator, List, Optional, Protocol, Tuple

from apps.core.cache import cache_key, get_cache
from apps.core.utils.logging import log_event

from .extractors import SeoExtractor

logger = logging.getLogger(__name__)

CACHE_NAMESPACE = "seo.extractors"
# Bump when the pickled layout of ExtractorCollection changes.
CACHE_VERSION = 2


def content_type_key(content: Any) -> str:
    cls = content if inspect.isclass(content) else content.__class__
    return f"{cls.__module__}.{cls.__qualname__}"


def registry_fingerprint(extractors: Iterable[SeoExtractor]) -> Tuple[str, ...]:
    """Dotted class paths of a registry, in registration order."""
    return tuple(content_type_key(e) for e in extractors)


def _source_file(cls: type) -> Optional[str]:
    try:
        path = inspect.getsourcefile(cls)
    except TypeError:
        # builtins and C extensions
        return None
    return os.path.abspath(path) if path else None


class ExtractorCollection:
    def __init__(
        self,
        extractors: Iterable[SeoExtractor],
        content_type: str = "",
        resources: Iterable[str] = (),
        created_at: Optional[float] = None,
        registry: Optional[Iterable[str]] = None,
    ):
        self.extractors: List[SeoExtractor] = list(extractors)
        self.content_type = content_type
        self.resources = tuple(dict.fromkeys(r for r in resources if r))
        self.created_at = time.time() if created_at is None else created_at
        self.registry = tuple(registry) if registry is not None else None

    @classmethod
    def build(cls, content: Any, extractors: Iterable[SeoExtractor]) -> "ExtractorCollection":
        """
        Test every extractor against ``content`` and keep the supporting ones.
        Predicate errors propagate.
        """
        extractors = list(extractors)
        supported = [e for e in extractors if e.supports(content)]
        resources = [_source_file(content.__class__)]
        resources.extend(_source_file(e.__class__) for e in supported)
        return cls(
            supported,
            content_type=content_type_key(content),
            resources=resources,
            registry=registry_fingerprint(extractors),
        )

    def is_fresh(self, registry: Optional[Iterable[str]] = None) -> bool:
        """
        ``registry`` is the fingerprint of the registry about to use the
        collection. A collection built from another registry is stale.
        """
        if registry is not None and self.registry is not None and tuple(registry) != self.registry:
            return False
        for path in self.resources:
            try:
                if os.path.getmtime(path) > self.created_at:
                    return False
            except OSError:
                return False
        return True

    def __iter__(self) -> Iterator[SeoExtractor]:
        return iter(self.extractors)

    def __len__(self) -> int:
        return len(self.extractors)

    def __repr__(self) -> str:
        return f"<ExtractorCollection {self.content_type!r} extractors={len(self.extractors)}>"


class ExtractorCache(Protocol):
    def load_extractors_from_cache(self, content_type: str) -> Optional[ExtractorCollection]: ...

    def put_extractors_in_cache(self, content_type: str, extractors: ExtractorCollection) -> None: ...


class InMemoryExtractorCache:
    """Process-local cache; a lock guards every read and write."""

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: Dict[str, ExtractorCollection] = {}

    def load_extractors_from_cache(self, content_type: str) -> Optional[ExtractorCollection]:
        with self._lock:
            return self._entries.get(content_type)

    def put_extractors_in_cache(self, content_type: str, extractors: ExtractorCollection) -> None:
        with self._lock:
            self._entries[content_type] = extractors

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class DjangoExtractorCache:
    """
    Stores collections in a Django cache backend (LocMem, Redis, ...).

    Collections are pickled by the backend, so registered extractors must be
    picklable. Backend failures are logged and behave like a miss.

    Keys carry a generation number kept under its own key in the alias.
    ``clear()`` bumps the generation, so older entries stop being read and
    expire on their own while the rest of the alias is left untouched.
    """

    def __init__(self, alias: Optional[str] = None, timeout: Optional[int] = None):
        self.alias = alias
        self.timeout = timeout

    @property
    def backend(self):
        return get_cache(self.alias)

    @property
    def generation_key(self) -> str:
        return cache_key("generation", version=CACHE_VERSION, namespace=CACHE_NAMESPACE)

    def _generation(self, backend) -> int:
        return int(backend.get(self.generation_key) or 0)

    def _key(self, content_type: str, generation: int = 0) -> str:
        return cache_key(f"{content_type}#g{generation}", version=CACHE_VERSION, namespace=CACHE_NAMESPACE)

    def load_extractors_from_cache(self, content_type: str) -> Optional[ExtractorCollection]:
        backend = self.backend
        key = content_type
        try:
            key = self._key(content_type, self._generation(backend))
            value = backend.get(key)
        except Exception as exc:
            log_event(logger, "warning", "seo.cache.get_failed", key=key, error=str(exc))
            return None
        if value is not None and not isinstance(value, ExtractorCollection):
            log_event(logger, "warning", "seo.cache.unexpected_value", key=key, type=type(value).__name__)
            return None
        return value

    def put_extractors_in_cache(self, content_type: str, extractors: ExtractorCollection) -> None:
        backend = self.backend
        key = content_type
        try:
            key = self._key(content_type, self._generation(backend))
            backend.set(key, extractors, timeout=self.timeout)
        except Exception as exc:
            log_event(logger, "warning", "seo.cache.set_failed", key=key, error=str(exc))

    def delete(self, content_type: str) -> None:
        backend = self.backend
        backend.delete(self._key(content_type, self._generation(backend)))

    def clear(self) -> int:
        """
        Invalidate every cached collection of this alias and return the new
        generation. Other keys in the alias are not touched.
        """
        backend = self.backend
        backend.add(self.generation_key, 0, timeout=None)
        generation = backend.incr(self.generation_key)
        logger.info("SEO extractor cache cleared (alias=%s, generation=%s)", self.alias, generation)
        return generation
