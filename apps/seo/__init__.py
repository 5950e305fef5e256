"""
SEO presentation app.

Collects title, description, keywords, extra meta tags and the original URL
of a content object and pushes them into the request's ``SeoPage``.

Keep this file free of side effects.
"""

__all__: list[str] = []
