"""Language tags, locale resolution and text normalization."""

from voxphone.languages.base import LanguageSpec
from voxphone.languages.normalize import normalize_text
from voxphone.languages.registry import (
    is_logographic,
    resolve_language,
    resolve_locale,
    supported_languages,
)

__all__ = [
    "LanguageSpec",
    "is_logographic",
    "normalize_text",
    "resolve_language",
    "resolve_locale",
    "supported_languages",
]
