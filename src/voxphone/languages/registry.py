"""Language tag registry and resolution."""

from __future__ import annotations

from types import MappingProxyType

from voxphone.errors import UnsupportedLanguage
from voxphone.languages.base import LanguageSpec

_LANGUAGES = MappingProxyType(
    {
        "a": LanguageSpec(code="a", locale="en-us", name="American English"),
        "b": LanguageSpec(code="b", locale="en-gb", name="British English"),
        "e": LanguageSpec(code="e", locale="es", name="Spanish"),
        "f": LanguageSpec(code="f", locale="fr-fr", name="French"),
        "h": LanguageSpec(code="h", locale="hi", name="Hindi"),
        "i": LanguageSpec(code="i", locale="it", name="Italian"),
        "p": LanguageSpec(code="p", locale="pt-br", name="Brazilian Portuguese"),
    }
)

# Logographic scripts are phonemized outside the backend path.
_LOGOGRAPHIC = MappingProxyType(
    {
        "j": LanguageSpec(code="j", locale="ja", name="Japanese"),
        "z": LanguageSpec(code="z", locale="cmn", name="Mandarin Chinese"),
    }
)


def resolve_language(language_code: str) -> LanguageSpec:
    """Resolve a short language tag to its language spec."""
    spec = _LANGUAGES.get(language_code)
    if spec is None:
        raise UnsupportedLanguage(language_code)
    return spec


def resolve_locale(language_code: str) -> str:
    """Resolve a short language tag to the canonical backend locale id."""
    return resolve_language(language_code).locale


def supported_languages() -> list[LanguageSpec]:
    return list(_LANGUAGES.values())


def is_logographic(language_code: str) -> bool:
    return language_code in _LOGOGRAPHIC
