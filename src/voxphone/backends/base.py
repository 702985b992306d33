"""Phonemization backend interfaces."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal, Protocol

BackendName = Literal["espeak", "passthrough"]


class PhonemeBackend(Protocol):
    """Protocol implemented by concrete grapheme-to-phoneme backends."""

    name: BackendName
    locale: str

    def phonemize(self, batch: Sequence[str]) -> list[str] | None:
        """Return one raw phoneme string per input, or None if the batch failed."""
