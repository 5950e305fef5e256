"""
apps.seo.middleware
-------------------
Attaches a fresh ``SeoPage`` to every request.

- Sync middleware, safe under WSGI and ASGI
- Views fill ``request.seo_page`` (see ``apps.seo.mixins``)
- Templates read it through the ``seo_page`` context processor
"""

from __future__ import annotations

import logging
from typing import Callable

from django.http import HttpRequest, HttpResponse

from apps.seo.page import SeoPage

logger = logging.getLogger(__name__)


class SeoPageMiddleware:
    """Give every request its own, empty page metadata sink."""

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.seo_page = SeoPage()
        return self.get_response(request)
