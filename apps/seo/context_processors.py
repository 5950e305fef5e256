from __future__ import annotations

from typing import Any, Dict

from django.http import HttpRequest


def seo_page(request: HttpRequest) -> Dict[str, Any]:
    """
    Expose the request's SeoPage to templates. ``None`` when the
    middleware is not installed.
    """
    return {"seo_page": getattr(request, "seo_page", None)}
