"""espeak-ng backend via the ``phonemizer`` package."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from voxphone.backends.base import BackendName
from voxphone.errors import BackendInitFailed

logger = logging.getLogger(__name__)


class EspeakBackend:
    """Wraps ``phonemizer.backend.EspeakBackend`` for a single locale."""

    name: BackendName = "espeak"

    def __init__(
        self,
        locale: str,
        *,
        preserve_punctuation: bool = True,
        with_stress: bool = True,
    ) -> None:
        self.locale = locale
        self.preserve_punctuation = preserve_punctuation
        self.with_stress = with_stress
        self._engine = _load_engine(
            locale,
            preserve_punctuation=preserve_punctuation,
            with_stress=with_stress,
        )

    def phonemize(self, batch: Sequence[str]) -> list[str] | None:
        if not batch:
            return []
        try:
            result = self._engine.phonemize(list(batch))
        except Exception as exc:
            logger.warning("espeak failed to phonemize batch for %s: %s", self.locale, exc)
            return None
        if result is None or len(result) != len(batch):
            logger.warning("espeak returned an unexpected result for %s", self.locale)
            return None
        return [str(item) for item in result]


def _load_engine(locale: str, *, preserve_punctuation: bool, with_stress: bool) -> Any:
    try:
        from phonemizer.backend import EspeakBackend as _PhonemizerEspeak
    except ModuleNotFoundError as exc:
        raise BackendInitFailed(locale, "the phonemizer package is not installed") from exc

    logger.debug("Initializing espeak backend for %s", locale)
    try:
        return _PhonemizerEspeak(
            language=locale,
            preserve_punctuation=preserve_punctuation,
            with_stress=with_stress,
        )
    except RuntimeError as exc:
        raise BackendInitFailed(locale, str(exc)) from exc
