"""
URL configuration for the project.

Content apps include their own routes; the SEO app has no public views.
"""

from __future__ import annotations

from django.urls import path

from apps.core.views import health_check

urlpatterns = [
    path(".well-known/health", health_check, name="health_check"),
]
