"""Phonemization backend implementations."""

from voxphone.backends.base import BackendName, PhonemeBackend
from voxphone.backends.registry import available_backends, build_backend

__all__ = ["BackendName", "PhonemeBackend", "available_backends", "build_backend"]
