"""Post-processing of raw backend phonemes.

The backend output is corrected in a fixed order:

1. lexical fix-ups for words the backend is known to mis-render,
2. one-to-one symbol normalization into the target symbol set,
3. context-sensitive pattern rules (lookaround constrained),
4. vocabulary filtering,
5. whitespace trim.

Later stages rely on the rewrites of earlier ones, so the order is fixed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from voxphone.vocab import Vocabulary, get_vocabulary


@dataclass(frozen=True)
class LiteralRule:
    """Replace every occurrence of one fixed substring with another."""

    find: str
    replace: str

    def apply(self, text: str, language: str | None = None) -> str:
        return text.replace(self.find, self.replace)


@dataclass(frozen=True)
class PatternRule:
    """Regex rewrite whose context is expressed as zero-width lookarounds.

    When ``language`` is set the rule only fires for that language tag.
    """

    name: str
    pattern: re.Pattern[str]
    replacement: str
    language: str | None = None

    def applies_to(self, language: str | None) -> bool:
        return self.language is None or self.language == language

    def apply(self, text: str, language: str | None = None) -> str:
        if not self.applies_to(language):
            return text
        return self.pattern.sub(self.replacement, text)


CorrectionRule = LiteralRule | PatternRule

LEXICAL_FIXUPS: tuple[LiteralRule, ...] = (
    LiteralRule("kəkˈoːɹoʊ", "kˈoʊkəɹoʊ"),
    LiteralRule("kəkˈɔːɹəʊ", "kˈəʊkəɹəʊ"),
)

SYMBOL_NORMALIZATION: tuple[LiteralRule, ...] = (
    LiteralRule("ʲ", "j"),
    LiteralRule("r", "ɹ"),
    LiteralRule("x", "k"),
    LiteralRule("ɬ", "l"),
)

HUNDRED_SPLIT = PatternRule(
    name="hundred_split",
    pattern=re.compile(r"(?<=[a-zɹː])(?=hˈʌndɹɪd)"),
    replacement=" ",
)
PLURAL_Z = PatternRule(
    name="plural_z",
    pattern=re.compile(r' z(?=[;:,.!?¡¿—…"«»“” ]|\Z)'),
    replacement="z",
)
NINETY_FLAP = PatternRule(
    name="ninety_flap",
    pattern=re.compile(r"(?<=nˈaɪn)ti(?!ː)"),
    replacement="di",
    language="a",
)

PATTERN_RULES: tuple[PatternRule, ...] = (HUNDRED_SPLIT, PLURAL_Z, NINETY_FLAP)

DEFAULT_RULES: tuple[CorrectionRule, ...] = (
    *LEXICAL_FIXUPS,
    *SYMBOL_NORMALIZATION,
    *PATTERN_RULES,
)


class CorrectionPipeline:
    """Turns one raw backend phoneme string into the final symbol string."""

    def __init__(
        self,
        language: str,
        *,
        vocabulary: Vocabulary | None = None,
        rules: tuple[CorrectionRule, ...] = DEFAULT_RULES,
    ) -> None:
        self.language = language
        self.vocabulary = vocabulary if vocabulary is not None else get_vocabulary()
        self.rules = rules

    def rewrite(self, raw: str) -> str:
        """Apply the ordered rewrite rules without filtering."""
        text = raw
        for rule in self.rules:
            text = rule.apply(text, self.language)
        return text

    def apply(self, raw: str) -> str:
        text = self.rewrite(raw)
        text = self.vocabulary.filter(text)
        return text.strip()
