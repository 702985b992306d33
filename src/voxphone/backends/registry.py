"""Backend registry."""

from __future__ import annotations

from collections.abc import Callable

from voxphone.backends.base import BackendName, PhonemeBackend
from voxphone.backends.espeak import EspeakBackend
from voxphone.backends.passthrough import PassthroughBackend

_BACKENDS: dict[BackendName, Callable[[str], PhonemeBackend]] = {
    "espeak": EspeakBackend,
    "passthrough": PassthroughBackend,
}


def available_backends() -> list[BackendName]:
    return list(_BACKENDS)


def build_backend(name: BackendName, locale: str) -> PhonemeBackend:
    """Construct the named backend for a locale."""
    try:
        factory = _BACKENDS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown phonemization backend: {name!r}") from exc
    return factory(locale)
