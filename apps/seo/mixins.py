from __future__ import annotations

from typing import Any, Optional

from django.http import HttpRequest, HttpResponse

from apps.seo.metadata import SeoMetadata
from apps.seo.page import SeoPage
from apps.seo.presentation import SeoPresentation
from apps.seo.services.factory import build_presentation


class SeoAwareMixin:
    """
    Content mixin carrying an optional ``SeoMetadata`` record.
    """

    seo_metadata: Optional[SeoMetadata] = None

    def get_seo_metadata(self) -> Optional[SeoMetadata]:
        return self.seo_metadata

    def set_seo_metadata(self, metadata: Optional[SeoMetadata]) -> None:
        self.seo_metadata = metadata


class SeoContentMixin:
    """
    Detail-view mixin: pushes the object's SEO metadata into
    ``request.seo_page`` and honours redirects prepared by the presentation.

    Use with ``SingleObjectMixin`` based views (``DetailView``).
    """

    def get_seo_page(self) -> SeoPage:
        page = getattr(self.request, "seo_page", None)
        if page is None:
            page = SeoPage()
            self.request.seo_page = page
        return page

    def get_seo_presentation(self) -> SeoPresentation:
        return build_presentation(self.get_seo_page())

    def get(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponse:
        self.object = self.get_object()
        presentation = self.get_seo_presentation()
        presentation.update_seo_page(self.object)
        redirect = presentation.get_redirect_response()
        if redirect is not None:
            return redirect
        context = self.get_context_data(object=self.object)
        return self.render_to_response(context)

    def get_context_data(self, **kwargs: Any) -> dict:
        context = super().get_context_data(**kwargs)
        context.setdefault("seo_page", self.get_seo_page())
        return context
