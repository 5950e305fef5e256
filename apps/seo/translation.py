from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from django.utils.translation import gettext


class Translator(Protocol):
    def translate(self, message: str, params: Optional[Mapping[str, Any]] = None) -> str: ...


class GettextTranslator:
    """
    Translate through Django's active catalog, then interpolate
    ``%(name)s`` placeholders with ``params``.
    """

    def translate(self, message: str, params: Optional[Mapping[str, Any]] = None) -> str:
        text = gettext(message)
        if params:
            return text % dict(params)
        return text
