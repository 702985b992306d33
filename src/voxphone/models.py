"""Shared data models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response payload for the API health endpoint."""

    status: Literal["ok"]
    version: str
    env: str


class PhonemizeRequest(BaseModel):
    """Phonemization request payload used by both CLI and API."""

    text: str
    language: str = Field(default="a", min_length=1)
    backend: Literal["espeak", "passthrough"] = "espeak"
    normalize: bool = True
    include_ids: bool = False


class PhonemizeResponse(BaseModel):
    """Phonemization output."""

    phonemes: str
    language: str
    locale: str
    backend: Literal["espeak", "passthrough"]
    normalized: bool
    token_ids: list[int] | None = None


class LanguageInfo(BaseModel):
    """A supported language tag and its backend locale."""

    code: str
    locale: str
    name: str


class VocabularyResponse(BaseModel):
    """Symbol vocabulary summary."""

    size: int = Field(ge=0)
    symbols: dict[str, int]
