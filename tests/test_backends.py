import sys
import types

import pytest

from voxphone.backends import available_backends, build_backend
from voxphone.backends.espeak import EspeakBackend
from voxphone.errors import BackendInitFailed


class _FakeEngine:
    def __init__(self, language: str, preserve_punctuation: bool, with_stress: bool) -> None:
        self.language = language
        self.preserve_punctuation = preserve_punctuation
        self.with_stress = with_stress

    def phonemize(self, batch: list[str]) -> list[str]:
        return [f"<{text}>" for text in batch]


def _install_fake_phonemizer(monkeypatch, engine_cls) -> None:
    package = types.ModuleType("phonemizer")
    backend_module = types.ModuleType("phonemizer.backend")
    backend_module.EspeakBackend = engine_cls
    package.backend = backend_module
    monkeypatch.setitem(sys.modules, "phonemizer", package)
    monkeypatch.setitem(sys.modules, "phonemizer.backend", backend_module)


def test_available_backends() -> None:
    assert available_backends() == ["espeak", "passthrough"]


def test_passthrough_backend_returns_input() -> None:
    backend = build_backend("passthrough", "en-us")

    assert backend.name == "passthrough"
    assert backend.locale == "en-us"
    assert backend.phonemize(["hɛloʊ", "wˈɜːld"]) == ["hɛloʊ", "wˈɜːld"]


def test_unknown_backend_name() -> None:
    with pytest.raises(ValueError, match="Unknown phonemization backend"):
        build_backend("festival", "en-us")  # type: ignore[arg-type]


@pytest.fixture
def created_engines() -> list[_FakeEngine]:
    return []


def test_espeak_backend_wraps_phonemizer(monkeypatch, created_engines) -> None:
    class _RecordingEngine(_FakeEngine):
        def __init__(self, **kwargs) -> None:
            super().__init__(**kwargs)
            created_engines.append(self)

    _install_fake_phonemizer(monkeypatch, _RecordingEngine)

    backend = build_backend("espeak", "en-gb")

    assert isinstance(backend, EspeakBackend)
    assert backend.phonemize(["a", "b"]) == ["<a>", "<b>"]
    assert backend.phonemize([]) == []
    assert len(created_engines) == 1
    engine = created_engines[0]
    assert engine.language == "en-gb"
    assert engine.preserve_punctuation is True
    assert engine.with_stress is True


def test_espeak_backend_batch_failure_returns_none(monkeypatch) -> None:
    class _BrokenEngine(_FakeEngine):
        def phonemize(self, batch: list[str]) -> list[str]:
            raise RuntimeError("espeak crashed")

    _install_fake_phonemizer(monkeypatch, _BrokenEngine)

    backend = EspeakBackend("fr-fr")

    assert backend.phonemize(["bonjour"]) is None


def test_espeak_backend_short_result_returns_none(monkeypatch) -> None:
    class _ShortEngine(_FakeEngine):
        def phonemize(self, batch: list[str]) -> list[str]:
            return []

    _install_fake_phonemizer(monkeypatch, _ShortEngine)

    assert EspeakBackend("es").phonemize(["hola"]) is None


def test_espeak_backend_init_failure(monkeypatch) -> None:
    class _MissingLibrary:
        def __init__(self, **_: object) -> None:
            raise RuntimeError("espeak not installed on your system")

    _install_fake_phonemizer(monkeypatch, _MissingLibrary)

    with pytest.raises(BackendInitFailed) as excinfo:
        EspeakBackend("it")

    assert excinfo.value.locale == "it"
    assert "espeak not installed" in str(excinfo.value)


def test_espeak_backend_without_phonemizer_package(monkeypatch) -> None:
    monkeypatch.setitem(sys.modules, "phonemizer", None)
    monkeypatch.setitem(sys.modules, "phonemizer.backend", None)

    with pytest.raises(BackendInitFailed, match="not installed"):
        EspeakBackend("hi")
