from __future__ import annotations

from django.http import HttpRequest, JsonResponse
from django.views.decorators.http import require_GET

from seosite import __version__


@require_GET
def health_check(request: HttpRequest) -> JsonResponse:
    """Liveness check; never touches the database."""
    return JsonResponse({"ok": True, "version": __version__})
