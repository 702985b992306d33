import pytest

from voxphone.core.corrections import (
    HUNDRED_SPLIT,
    NINETY_FLAP,
    PLURAL_Z,
    CorrectionPipeline,
    LiteralRule,
)
from voxphone.vocab import Vocabulary


def test_empty_input_yields_empty_output() -> None:
    assert CorrectionPipeline("a").apply("") == ""


def test_out_of_vocabulary_input_yields_empty_output() -> None:
    assert CorrectionPipeline("a").apply("123 #@ 456") == ""


def test_lexical_fixups_replace_every_occurrence() -> None:
    pipeline = CorrectionPipeline("a")

    assert pipeline.apply("kəkˈoːɹoʊ") == "kˈoʊkəɹoʊ"
    assert pipeline.apply("kəkˈoːɹoʊ ænd kəkˈoːɹoʊ") == "kˈoʊkəɹoʊ ænd kˈoʊkəɹoʊ"
    assert CorrectionPipeline("b").apply("kəkˈɔːɹəʊ") == "kˈəʊkəɹəʊ"


def test_lexical_fixups_leave_partial_matches_alone() -> None:
    assert CorrectionPipeline("a").apply("kəkˈoːɹ") == "kəkˈoːɹ"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("mʲa", "mja"),
        ("rˈoʊz", "ɹˈoʊz"),
        ("bˈɑx", "bˈɑk"),
        ("ɬˈan", "lˈan"),
    ],
)
def test_symbol_normalization(raw: str, expected: str) -> None:
    assert CorrectionPipeline("e").apply(raw) == expected


def test_hundred_split_inserts_space() -> None:
    assert HUNDRED_SPLIT.apply("tuːhˈʌndɹɪd") == "tuː hˈʌndɹɪd"
    assert HUNDRED_SPLIT.apply("wʌnhˈʌndɹɪd") == "wʌn hˈʌndɹɪd"
    assert HUNDRED_SPLIT.apply("hˈʌndɹɪd") == "hˈʌndɹɪd"
    assert HUNDRED_SPLIT.apply("ə hˈʌndɹɪd") == "ə hˈʌndɹɪd"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("dˈɑːɡ z", "dˈɑːɡz"),
        ("dˈɑːɡ z.", "dˈɑːɡz."),
        ("dˈɑːɡ z, ænd", "dˈɑːɡz, ænd"),
        ("dˈɑːɡ z ænd", "dˈɑːɡz ænd"),
        ("ðə zˈuː", "ðə zˈuː"),
    ],
)
def test_plural_z(raw: str, expected: str) -> None:
    assert PLURAL_Z.apply(raw) == expected


def test_ninety_flap_only_for_american_english() -> None:
    assert NINETY_FLAP.apply("nˈaɪnti", "a") == "nˈaɪndi"
    assert NINETY_FLAP.apply("nˈaɪnti", "b") == "nˈaɪnti"
    assert NINETY_FLAP.apply("nˈaɪntiːn", "a") == "nˈaɪntiːn"


def test_ninety_flap_through_pipeline() -> None:
    raw = "nˈaɪnti nˈaɪn"

    assert CorrectionPipeline("a").apply(raw) == "nˈaɪndi nˈaɪn"
    assert CorrectionPipeline("b").apply(raw) == raw


def test_output_is_trimmed() -> None:
    assert CorrectionPipeline("a").apply("  hɛloʊ \n") == "hɛloʊ"


def test_rule_order_lets_fixups_run_before_normalization() -> None:
    rules = (LiteralRule("ab", "r"), LiteralRule("r", "ɹ"))
    pipeline = CorrectionPipeline("a", rules=rules)

    assert pipeline.apply("ab") == "ɹ"


def test_filtering_uses_the_given_vocabulary() -> None:
    pipeline = CorrectionPipeline("a", vocabulary=Vocabulary(["a", "b"]), rules=())

    assert pipeline.apply("abc") == "ab"
    assert pipeline.rewrite("abc") == "abc"


def test_plural_z_ignores_trailing_newline() -> None:
    assert PLURAL_Z.apply("dˈɑːɡ z\n") == "dˈɑːɡ z\n"
