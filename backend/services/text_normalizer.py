"""Text normalization and tokenization shared by the keyword engine.

Tokens are lowercase words with stop-words removed, leading non-alphanumeric
characters stripped and trailing punctuation stripped. ``+`` and ``#`` survive
at the end of a word so "C++" and "C#" stay intact.
"""

import re
from collections import Counter
from collections.abc import Iterable, Iterator

# ---------------------------------------------------------------------------
# Stop-words: articles, auxiliaries, pronouns, common prepositions/conjunctions
# ---------------------------------------------------------------------------
STOP_WORDS: frozenset[str] = frozenset({
    # Articles / determiners
    "a", "an", "the", "this", "that", "these", "those", "each", "every",
    "any", "some", "all", "such",
    # Auxiliary and modal verbs
    "is", "are", "was", "were", "be", "been", "being", "am",
    "have", "has", "had", "having", "do", "does", "did",
    "will", "would", "shall", "should", "can", "could", "may", "might", "must",
    # Pronouns
    "i", "me", "my", "we", "us", "our", "ours", "you", "your", "yours",
    "he", "him", "his", "she", "her", "hers", "it", "its",
    "they", "them", "their", "theirs", "who", "whom", "which", "what",
    # Prepositions
    "to", "of", "for", "with", "in", "on", "at", "by", "from", "as",
    "into", "onto", "about", "over", "under", "within", "without",
    "across", "through", "between", "per", "via", "up", "out",
    # Conjunctions and fillers
    "and", "or", "but", "nor", "so", "if", "than", "then", "also",
    "not", "no", "etc", "including", "well", "more", "most", "other",
})

_LEADING_JUNK_RE = re.compile(r"^[^a-z0-9]+")
_TRAILING_PUNCT_RE = re.compile(r"[^a-z0-9+#]+$")


def normalize_token(word: str) -> str:
    """Lowercase a raw word and strip its leading/trailing punctuation."""
    word = _LEADING_JUNK_RE.sub("", word.lower())
    return _TRAILING_PUNCT_RE.sub("", word)


def iter_tokens(text: str | None) -> Iterator[str]:
    """Lazily yield normalized tokens. Call again to restart."""
    for raw in (text or "").split():
        token = normalize_token(raw)
        if len(token) <= 1 or token in STOP_WORDS:
            continue
        yield token


def tokenize(text: str | None) -> list[str]:
    return list(iter_tokens(text))


def token_set(text: str | None) -> set[str]:
    """Pre-tokenized resume set for O(1) single-word lookups."""
    return set(iter_tokens(text))


def ngrams(tokens: Iterable[str], max_n: int = 3) -> Iterator[str]:
    """Yield all 1..max_n word n-grams in sequence order."""
    seq = list(tokens)
    for i in range(len(seq)):
        for n in range(1, max_n + 1):
            if i + n > len(seq):
                break
            yield " ".join(seq[i:i + n])


def count_terms(terms: Iterable[str]) -> Counter:
    return Counter(terms)
