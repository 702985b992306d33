"""Backend that hands its input back unchanged.

Useful for text that is already phonemized, and for running the correction
pipeline without an espeak installation.
"""

from __future__ import annotations

from collections.abc import Sequence

from voxphone.backends.base import BackendName


class PassthroughBackend:
    """Identity backend."""

    name: BackendName = "passthrough"

    def __init__(self, locale: str) -> None:
        self.locale = locale

    def phonemize(self, batch: Sequence[str]) -> list[str] | None:
        return list(batch)
