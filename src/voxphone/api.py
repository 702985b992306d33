"""HTTP API for voxphone."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from voxphone import __version__
from voxphone.config import configure_logging, load_config
from voxphone.core import run_phonemize
from voxphone.errors import PhonemizerError
from voxphone.languages import supported_languages
from voxphone.models import (
    HealthResponse,
    LanguageInfo,
    PhonemizeRequest,
    PhonemizeResponse,
    VocabularyResponse,
)
from voxphone.vocab import get_vocabulary


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(
        title="voxphone",
        version=__version__,
        description="Text to phoneme conversion service API.",
    )
    config = load_config()
    configure_logging(config.log_level)

    @app.get("/health", response_model=HealthResponse, tags=["system"])
    def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__, env=config.env)

    @app.get("/v1/languages", response_model=list[LanguageInfo], tags=["phonemes"])
    def languages() -> list[LanguageInfo]:
        return [
            LanguageInfo(code=spec.code, locale=spec.locale, name=spec.name)
            for spec in supported_languages()
        ]

    @app.get("/v1/vocab", response_model=VocabularyResponse, tags=["phonemes"])
    def vocab() -> VocabularyResponse:
        vocabulary = get_vocabulary()
        return VocabularyResponse(size=len(vocabulary), symbols=dict(vocabulary.symbols))

    @app.post("/v1/phonemize", response_model=PhonemizeResponse, tags=["phonemes"])
    def phonemize(request: PhonemizeRequest) -> PhonemizeResponse:
        try:
            return run_phonemize(request)
        except PhonemizerError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc

    return app


app = create_app()
