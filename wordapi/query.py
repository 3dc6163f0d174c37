from __future__ import annotations
import random
import re
from typing import Iterable, List, Optional, Sequence

from .config import DEFAULT_LIMIT
from .dictionary import SUPPORTED_LANGUAGES, DictionaryStore
from .errors import (
    DictionaryUnavailable,
    InvalidCharsParam,
    InvalidLengthParam,
    InvalidLimitParam,
    MissingCharsParam,
    UnsupportedLanguage,
)

_INT_RE = re.compile(r'^[+-]?[0-9]+$')


def parse_chars(raw: str) -> List[str]:
    """Split a comma-separated chars param into lowercased, non-empty tokens."""
    return [t for t in (c.strip().lower() for c in raw.split(',')) if t]


def parse_positive_int(raw: str) -> Optional[int]:
    # Base-10 only; returns None for anything that is not a positive integer
    value = raw.strip()
    if not _INT_RE.match(value):
        return None
    n = int(value, 10)
    return n if n > 0 else None


def filter_words(words: Iterable[str], tokens: Sequence[str], length: Optional[int] = None) -> List[str]:
    result = []
    for word in words:
        if length is not None and len(word) != length:
            continue
        lower = word.lower()
        if any(t in lower for t in tokens):
            result.append(word)
    return result


def sample_words(words: List[str], limit: int, rng: random.Random) -> List[str]:
    if len(words) <= limit:
        return words
    return rng.sample(words, limit)


class QueryEngine:
    def __init__(
        self,
        store: DictionaryStore,
        rng: Optional[random.Random] = None,
        default_limit: int = DEFAULT_LIMIT,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.default_limit = default_limit

    def query(
        self,
        language: str,
        chars_raw: Optional[str],
        length_raw: Optional[str] = None,
        limit_raw: Optional[str] = None,
    ) -> List[str]:
        """Filter one language's words by chars and length, then sample down to limit.

        Validation runs in a fixed order and the first failure is raised, so a
        request that is wrong in several ways always gets the same error.
        """
        if language not in SUPPORTED_LANGUAGES:
            raise UnsupportedLanguage(language, SUPPORTED_LANGUAGES)

        words = self.store.lookup(language)
        if words is None:
            raise DictionaryUnavailable(language)

        if not chars_raw:
            raise MissingCharsParam()
        tokens = parse_chars(chars_raw)
        if not tokens:
            raise InvalidCharsParam()

        length = None
        if length_raw:
            length = parse_positive_int(length_raw)
            if length is None:
                raise InvalidLengthParam()

        limit = self.default_limit
        if limit_raw:
            limit = parse_positive_int(limit_raw)
            if limit is None:
                raise InvalidLimitParam()

        candidates = filter_words(words, tokens, length)
        return sample_words(candidates, limit, self.rng)
