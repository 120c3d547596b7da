"""
Einfache Textmetriken für Tooltip-Texte.

Analog zum Readability-Extractor: naiver Wort- und Satzsplit, keine
NLP-Abhängigkeiten, deterministisch. Der Extractor liefert nur Rohwerte;
Bewertungen (plain language, Vorschläge) passieren im Review.

Readability-Score (eine Formel für alle Aufrufer):

    score = 100 - 0.5 * avg_words_per_sentence - 0.5 * complex_word_pct

auf [0, 100] geclamped, höher = besser lesbar. Leerer Text -> 0.0.

"Complex word" ist eine Heuristik: ein Wort gilt als komplex, wenn seine
Buchstaben mindestens drei Vokal-Cluster ([aeiouy]+) enthalten. Das ist
kein Silbenzähler (stummes "e", Diphthonge, "-ed"-Endungen werden falsch
gezählt) und bewusst so belassen.
"""

from dataclasses import dataclass
import re
from typing import Optional, Sequence

WORST_READABILITY = 0.0
BEST_READABILITY = 100.0

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NON_LETTER_RE = re.compile(r"[^a-z]")
_VOWEL_CLUSTER_RE = re.compile(r"[aeiouy]+")
COMPLEX_WORD_MIN_CLUSTERS = 3


@dataclass(frozen=True)
class TextMetrics:
    word_count: int
    sentence_count: int
    avg_words_per_sentence: float
    avg_word_length: float
    complex_word_ratio: float
    readability_score: float


def split_words(text: Optional[str]) -> list[str]:
    if not text:
        return []
    return text.split()


def count_words(text: Optional[str]) -> int:
    return len(split_words(text))


def split_sentences(text: Optional[str]) -> list[str]:
    if not text:
        return []
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def is_complex_word(word: str) -> bool:
    letters = _NON_LETTER_RE.sub("", word.lower())
    return len(_VOWEL_CLUSTER_RE.findall(letters)) >= COMPLEX_WORD_MIN_CLUSTERS


def complex_word_ratio(words: Sequence[str]) -> float:
    if not words:
        return 0.0
    return sum(1 for w in words if is_complex_word(w)) / len(words)


def _score(avg_words_per_sentence: float, complex_ratio: float) -> float:
    score = 100.0 - 0.5 * avg_words_per_sentence - 0.5 * (complex_ratio * 100.0)
    return max(WORST_READABILITY, min(BEST_READABILITY, score))


def extract_metrics(text: Optional[str]) -> TextMetrics:
    words = split_words(text)
    sentences = split_sentences(text)

    if not words:
        return TextMetrics(
            word_count=0,
            sentence_count=len(sentences),
            avg_words_per_sentence=0.0,
            avg_word_length=0.0,
            complex_word_ratio=0.0,
            readability_score=WORST_READABILITY,
        )

    # keine Satzfragmente (z.B. nur "...") -> 0 statt Division durch 0
    avg_wps = len(words) / len(sentences) if sentences else 0.0
    avg_len = sum(len(w) for w in words) / len(words)
    ratio = complex_word_ratio(words)

    return TextMetrics(
        word_count=len(words),
        sentence_count=len(sentences),
        avg_words_per_sentence=avg_wps,
        avg_word_length=avg_len,
        complex_word_ratio=ratio,
        readability_score=_score(avg_wps, ratio),
    )


def readability_score(text: Optional[str]) -> float:
    return extract_metrics(text).readability_score
