"""Domain errors raised while building a phonemizer."""

from __future__ import annotations


class PhonemizerError(Exception):
    """Base class for phonemizer construction failures."""


class UnsupportedLanguage(PhonemizerError):
    """Language tag is not one of the known codes."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"Unsupported language: {language}")


class NoBackendForLanguage(PhonemizerError):
    """Language must be phonemized outside the backend path (logographic scripts)."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(
            f"Phonemization backend not used for language: {language} (Chinese/Japanese)"
        )


class BackendInitFailed(PhonemizerError):
    """Phonemization backend could not be started."""

    def __init__(self, locale: str, reason: str | None = None) -> None:
        self.locale = locale
        self.reason = reason
        message = f"Failed to initialize phonemization backend for {locale}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
