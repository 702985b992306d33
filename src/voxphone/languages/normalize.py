"""Default text normalizer applied before phonemization."""

from __future__ import annotations

import re

_SPACES_RE = re.compile(r"[^\S\n]+")
_BLANK_LINES_RE = re.compile(r"\s*\n\s*")
_DOCTOR_RE = re.compile(r"\bD[Rr]\.(?= [A-Z])")
_MISTER_RE = re.compile(r"\b(?:Mr\.|MR\.(?= [A-Z]))")
_MISS_RE = re.compile(r"\b(?:Ms\.|MS\.(?= [A-Z]))")
_MRS_RE = re.compile(r"\b(?:Mrs\.|MRS\.(?= [A-Z]))")
_ETC_RE = re.compile(r"\betc\.(?! [A-Z])")
_THOUSANDS_RE = re.compile(r"(?<=\d),(?=\d{3})")
_DECIMAL_RE = re.compile(r"(?<=\d)\.(?=\d)")
_CHARMAP = str.maketrans(
    {
        "’": "'",
        "‘": "'",
        "“": '"',
        "”": '"',
        "«": '"',
        "»": '"',
        "、": ", ",
        "。": ". ",
        "！": "! ",
        "，": ", ",
        "：": ": ",
        "；": "; ",
        "？": "? ",
    }
)


def normalize_text(text: str) -> str:
    """Clean up written text so the backend sees plain, speakable input."""
    normalized = text.translate(_CHARMAP)
    normalized = _DOCTOR_RE.sub("Doctor", normalized)
    normalized = _MISTER_RE.sub("Mister", normalized)
    normalized = _MISS_RE.sub("Miss", normalized)
    normalized = _MRS_RE.sub("Mrs", normalized)
    normalized = _ETC_RE.sub("etc", normalized)
    normalized = _THOUSANDS_RE.sub("", normalized)
    normalized = _DECIMAL_RE.sub(" point ", normalized)
    normalized = _SPACES_RE.sub(" ", normalized)
    normalized = _BLANK_LINES_RE.sub("\n", normalized)
    return normalized.strip()
