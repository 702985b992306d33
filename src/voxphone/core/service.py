"""Request-level phonemization shared by the CLI and the HTTP API."""

from __future__ import annotations

from functools import lru_cache

from voxphone.backends import BackendName
from voxphone.core.phonemizer import Phonemizer
from voxphone.models import PhonemizeRequest, PhonemizeResponse


@lru_cache(maxsize=32)
def get_phonemizer(language: str, backend: BackendName) -> Phonemizer:
    """Return a cached phonemizer for a language/backend pair."""
    return Phonemizer(language, backend=backend)


def run_phonemize(request: PhonemizeRequest) -> PhonemizeResponse:
    """Phonemize a request; construction errors propagate to the caller."""
    phonemizer = get_phonemizer(request.language, request.backend)
    phonemes = phonemizer.phonemize(request.text, normalize=request.normalize)
    token_ids = phonemizer.vocabulary.encode(phonemes) if request.include_ids else None
    return PhonemizeResponse(
        phonemes=phonemes,
        language=phonemizer.language,
        locale=phonemizer.locale,
        backend=request.backend,
        normalized=request.normalize,
        token_ids=token_ids,
    )
