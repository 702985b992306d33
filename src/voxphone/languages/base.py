"""Language base types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageSpec:
    """Short language tag resolved to the backend locale identifier."""

    code: str
    locale: str
    name: str
