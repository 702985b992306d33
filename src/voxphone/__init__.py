"""voxphone package."""

__version__ = "0.1.0"

from voxphone.core import Phonemizer  # noqa: E402
from voxphone.errors import (  # noqa: E402
    BackendInitFailed,
    NoBackendForLanguage,
    PhonemizerError,
    UnsupportedLanguage,
)

__all__ = [
    "BackendInitFailed",
    "NoBackendForLanguage",
    "Phonemizer",
    "PhonemizerError",
    "UnsupportedLanguage",
    "__version__",
]
