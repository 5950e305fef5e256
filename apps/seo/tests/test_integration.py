"""
Django wiring: middleware, context processor, detail-view mixin,
factory and management command.
"""

from __future__ import annotations

import os
from io import StringIO

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "seosite.settings")
os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
django.setup()

from django.core.cache import caches
from django.core.management import call_command
from django.http import HttpResponse, HttpResponseRedirect
from django.test import Client, RequestFactory, SimpleTestCase, override_settings
from django.views.generic import DetailView

from apps.seo.cache import DjangoExtractorCache, ExtractorCollection, content_type_key
from apps.seo.context_processors import seo_page
from apps.seo.extractors import TitleExtractor
from apps.seo.metadata import SeoMetadata
from apps.seo.middleware import SeoPageMiddleware
from apps.seo.mixins import SeoAwareMixin, SeoContentMixin
from apps.seo.page import SeoPage
from apps.seo.services.factory import build_presentation, get_extractor_cache

from .fakes import Article

TEST_CACHES = {
    "default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache", "LOCATION": "seo-integration"},
}

ARTICLES = {
    "hello": Article(title="Hello", summary="A greeting.", keywords="greeting, hello"),
    "moved": Article(title="Moved", original_url="/new-home/"),
}


class ArticleDetailView(SeoContentMixin, DetailView):
    template_name = "articles/detail.html"

    def get_object(self, queryset=None):
        return ARTICLES[self.kwargs["slug"]]


class Page(SeoAwareMixin):
    pass


class MiddlewareTests(SimpleTestCase):
    def test_attaches_fresh_page(self):
        seen = []

        def get_response(request):
            seen.append(request.seo_page)
            return HttpResponse("ok")

        middleware = SeoPageMiddleware(get_response)
        factory = RequestFactory()
        middleware(factory.get("/"))
        middleware(factory.get("/"))

        self.assertIsInstance(seen[0], SeoPage)
        self.assertIsNot(seen[0], seen[1])

    def test_context_processor(self):
        request = RequestFactory().get("/")
        self.assertEqual(seo_page(request), {"seo_page": None})
        request.seo_page = SeoPage()
        self.assertIs(seo_page(request)["seo_page"], request.seo_page)


@override_settings(
    CACHES=TEST_CACHES,
    SEO={
        "TITLE": "%(content_title)s | Site",
        "DESCRIPTION": "Site. %(content_description)s",
        "ORIGINAL_URL_BEHAVIOUR": "redirect",
    },
)
class SeoContentMixinTests(SimpleTestCase):
    def setUp(self) -> None:
        caches["default"].clear()
        self.factory = RequestFactory()

    def test_fills_request_page(self):
        request = self.factory.get("/articles/hello/")
        request.seo_page = SeoPage()

        response = ArticleDetailView.as_view()(request, slug="hello")

        self.assertEqual(response.status_code, 200)
        page = response.context_data["seo_page"]
        self.assertIs(page, request.seo_page)
        self.assertEqual(page.get_title(), "Hello | Site")
        self.assertEqual(page.get_metas()["name"]["description"][0], "Site. A greeting.")
        self.assertEqual(page.get_metas()["name"]["keywords"][0], "greeting, hello")

    def test_creates_page_without_middleware(self):
        request = self.factory.get("/articles/hello/")

        response = ArticleDetailView.as_view()(request, slug="hello")

        self.assertIsInstance(request.seo_page, SeoPage)
        self.assertIs(response.context_data["seo_page"], request.seo_page)

    def test_returns_prepared_redirect(self):
        request = self.factory.get("/articles/moved/")

        response = ArticleDetailView.as_view()(request, slug="moved")

        self.assertIsInstance(response, HttpResponseRedirect)
        self.assertEqual(response.url, "/new-home/")

    def test_seo_aware_content(self):
        page = Page()
        self.assertIsNone(page.get_seo_metadata())
        page.set_seo_metadata(SeoMetadata(title="Stored"))
        sink = SeoPage()

        build_presentation(sink).update_seo_page(page)

        self.assertEqual(sink.get_title(), "Stored | Site")


@override_settings(CACHES=TEST_CACHES)
class FactoryTests(SimpleTestCase):
    def test_builds_from_settings(self):
        with override_settings(SEO={"CACHE_TIMEOUT": 30}):
            presentation = build_presentation(SeoPage())
            self.assertIsInstance(presentation.cache, DjangoExtractorCache)
            self.assertEqual(presentation.cache.timeout, 30)
            self.assertIs(presentation.cache, get_extractor_cache("default", 30))
            self.assertEqual(len(presentation.extractors), 6)

    def test_cache_can_be_disabled(self):
        with override_settings(SEO={"CACHE_ENABLED": False, "EXTRACTORS": ["apps.seo.extractors.TitleExtractor"]}):
            presentation = build_presentation(SeoPage())
            self.assertIsNone(presentation.cache)
            self.assertEqual([type(e) for e in presentation.extractors], [TitleExtractor])

    def test_bad_extractor_path_raises(self):
        with override_settings(SEO={"EXTRACTORS": ["apps.seo.extractors.Missing"]}):
            with self.assertRaises(ImportError):
                build_presentation(SeoPage())


@override_settings(CACHES=TEST_CACHES, SEO={})
class ClearCacheCommandTests(SimpleTestCase):
    def test_clears_cached_collections(self):
        cache = get_extractor_cache("default", None)
        key = content_type_key(Article)
        cache.put_extractors_in_cache(key, ExtractorCollection([TitleExtractor()]))
        caches["default"].set("unrelated", "kept")
        out = StringIO()

        call_command("clear_seo_extractor_cache", stdout=out)

        self.assertIn("SEO extractor cache cleared", out.getvalue())
        self.assertIsNone(cache.load_extractors_from_cache(key))
        self.assertEqual(caches["default"].get("unrelated"), "kept")


class HealthCheckTests(SimpleTestCase):
    def test_health(self):
        res = Client().get("/.well-known/health")
        self.assertEqual(res.status_code, 200)
        self.assertTrue(res.json()["ok"])
