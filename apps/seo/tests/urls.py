from __future__ import annotations

from django.http import HttpResponse
from django.urls import path


def _ok(request, **kwargs):
    return HttpResponse("ok")


urlpatterns = [
    path("legacy/", _ok, name="legacy_home"),
    path("articles/<slug:slug>/", _ok, name="article_detail"),
]
