"""Text to phoneme orchestration."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Sequence

from voxphone.backends import BackendName, PhonemeBackend, build_backend
from voxphone.core.corrections import CorrectionPipeline
from voxphone.errors import NoBackendForLanguage
from voxphone.languages import is_logographic, normalize_text, resolve_language
from voxphone.vocab import Vocabulary, get_vocabulary

logger = logging.getLogger(__name__)

Normalizer = Callable[[str], str]


class Phonemizer:
    """Phonemizer bound to one language and one backend for its lifetime.

    Construction fails with ``UnsupportedLanguage`` for unknown tags,
    ``NoBackendForLanguage`` for logographic tags and ``BackendInitFailed``
    when the backend cannot start. ``phonemize`` itself never raises on a
    backend that produced nothing; it returns an empty string instead.

    Backend calls are serialized per instance, so one instance may be shared
    across threads; use one instance per thread for parallel throughput.
    """

    def __init__(
        self,
        language: str,
        *,
        backend: BackendName = "espeak",
        normalizer: Normalizer = normalize_text,
        vocabulary: Vocabulary | None = None,
    ) -> None:
        if is_logographic(language):
            raise NoBackendForLanguage(language)
        spec = resolve_language(language)
        self._language = spec.code
        self._locale = spec.locale
        self._backend = build_backend(backend, spec.locale)
        self._normalizer = normalizer
        self._vocabulary = vocabulary if vocabulary is not None else get_vocabulary()
        self._pipeline = CorrectionPipeline(spec.code, vocabulary=self._vocabulary)
        self._backend_lock = threading.Lock()
        logger.debug(
            "Phonemizer ready: language=%s locale=%s backend=%s",
            spec.code,
            spec.locale,
            self._backend.name,
        )

    @property
    def language(self) -> str:
        return self._language

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def backend(self) -> PhonemeBackend:
        return self._backend

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def phonemize(self, text: str, normalize: bool = True) -> str:
        """Convert one text into a cleaned, vocabulary-constrained phoneme string."""
        return self.phonemize_batch([text], normalize=normalize)[0]

    def phonemize_batch(self, texts: Sequence[str], normalize: bool = True) -> list[str]:
        """Phonemize several texts with a single backend call."""
        if not texts:
            return []
        prepared = [self._normalizer(text) if normalize else text for text in texts]
        with self._backend_lock:
            raw = self._backend.phonemize(prepared)
        if raw is None:
            logger.debug("Backend %s returned no result; using empty phonemes", self._backend.name)
            raw = [""] * len(prepared)
        return [self._pipeline.apply(phonemes) for phonemes in raw]

    def encode(self, text: str, normalize: bool = True) -> list[int]:
        """Phonemize and map the result to vocabulary ids."""
        return self._vocabulary.encode(self.phonemize(text, normalize=normalize))
