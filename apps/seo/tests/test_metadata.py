from __future__ import annotations

import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "seosite.settings")
os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
django.setup()

from dataclasses import FrozenInstanceError

from django.test import SimpleTestCase

from apps.seo.metadata import ExtraProperty, SeoMetadata
from apps.seo.page import SeoPage


class SeoMetadataTests(SimpleTestCase):
    def test_defaults_are_empty(self):
        metadata = SeoMetadata()
        self.assertIsNone(metadata.title)
        self.assertEqual(metadata.extra_properties, [])
        self.assertIsNot(metadata.extra_properties, SeoMetadata().extra_properties)

    def test_extra_property_helpers(self):
        metadata = SeoMetadata()
        metadata.add_extra_name("robots", "noindex")
        metadata.add_extra_property_tag("og:title", "T")
        metadata.add_extra_http_equiv("refresh", "30")
        metadata.add_extra_name("robots", "nofollow")

        self.assertEqual(metadata.remove_extra_property("name", "robots"), 2)
        self.assertEqual(
            metadata.extra_properties,
            [ExtraProperty("property", "og:title", "T"), ExtraProperty("http-equiv", "refresh", "30")],
        )

    def test_extra_property_is_immutable_and_validated(self):
        prop = ExtraProperty("name", "robots", "noindex")
        with self.assertRaises(FrozenInstanceError):
            prop.value = "index"
        with self.assertRaises(ValueError):
            ExtraProperty("itemprop", "name", "x")


class SeoPageTests(SimpleTestCase):
    def test_title_and_metas(self):
        page = SeoPage()
        page.set_title("Hello").add_meta("name", "keywords", "a, b")

        self.assertEqual(page.get_title(), "Hello")
        self.assertEqual(page.get_metas()["name"]["keywords"], ("a, b", {}))
        self.assertTrue(page.has_meta("name", "keywords"))

        page.add_meta("name", "keywords", "c")
        self.assertEqual(page.get_metas()["name"]["keywords"][0], "c")

        page.remove_meta("name", "keywords")
        self.assertFalse(page.has_meta("name", "keywords"))

    def test_initial_metas(self):
        page = SeoPage(metas={"property": {"og:type": ("website", {"lang": "en"})}})
        self.assertEqual(page.get_metas()["property"]["og:type"], ("website", {"lang": "en"}))
        self.assertEqual(page.get_metas()["name"], {})
