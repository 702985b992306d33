"""Symbol vocabulary accepted by the downstream synthesis model."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from functools import lru_cache
from types import MappingProxyType

PAD = "$"
_PUNCTUATION = ';:,.!?¡¿—…"«»“” '
_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
_LETTERS_IPA = (
    "ɑɐɒæɓʙβɔɕçɗɖðʤəɘɚɛɜɝɞɟʄɡɠɢʛɦɧħɥʜɨɪʝɭɬɫɮʟɱɯɰŋɳɲɴøɵɸθœɶʘɹɺɾɻʀʁɽʂʃʈʧʉʊʋⱱʌɣɤʍχʎʏʑʐʒʔʡʕʢ"
    "ǀǁǂǃˈˌːˑʼʴʰʱʲʷˠˤ˞↓↑→↗↘'̩'ᵻ"
)


def default_symbols() -> list[str]:
    """Return the ordered symbol list; a repeated symbol takes its last position as id."""
    return [PAD, *_PUNCTUATION, *_LETTERS, *_LETTERS_IPA]


class Vocabulary:
    """Read-only mapping from single-character symbol to integer id."""

    def __init__(self, symbols: list[str]) -> None:
        table: dict[str, int] = {}
        for index, symbol in enumerate(symbols):
            if len(symbol) != 1:
                raise ValueError(f"vocabulary symbols must be single characters, got {symbol!r}")
            table[symbol] = index
        self._table: Mapping[str, int] = MappingProxyType(table)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    @property
    def symbols(self) -> Mapping[str, int]:
        return self._table

    def contains(self, symbol: str) -> bool:
        return symbol in self._table

    def id_of(self, symbol: str) -> int:
        return self._table[symbol]

    def filter(self, text: str) -> str:
        """Drop every character not present in the vocabulary."""
        return "".join(char for char in text if char in self._table)

    def encode(self, text: str) -> list[int]:
        """Map in-vocabulary characters to ids, skipping the rest."""
        return [self._table[char] for char in text if char in self._table]


@lru_cache(maxsize=1)
def get_vocabulary() -> Vocabulary:
    """Build the process-wide vocabulary on first use."""
    return Vocabulary(default_symbols())
