from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .logging_config import get_logger

logger = get_logger(__name__)

# Closed set; order is the one reported back in error messages.
SUPPORTED_LANGUAGES: Tuple[str, ...] = (
    'korean',
    'english',
    'italian',
    'french',
    'german',
    'spanish',
)


def _trim(word: str) -> str:
    # str.strip() keeps U+FEFF, which editors leave at the start of files
    return word.strip().strip('\ufeff').strip()


def parse_words(text: str) -> List[str]:
    """One word per line; lines are trimmed and blank lines dropped."""
    return [w for w in (_trim(line) for line in text.splitlines()) if w]


class DictionaryStore:
    """Read-only mapping of language identifier to its word list.

    Built once before the service takes traffic. A supported language whose
    source file is missing is simply absent from the store.
    """

    def __init__(self, dictionaries: Optional[Mapping[str, Sequence[str]]] = None):
        self._words: Dict[str, Tuple[str, ...]] = {}
        for language, words in (dictionaries or {}).items():
            self._words[language] = tuple(w for w in (_trim(w) for w in words) if w)

    @classmethod
    def from_directory(
        cls,
        directory: Union[str, Path],
        languages: Iterable[str] = SUPPORTED_LANGUAGES,
    ) -> 'DictionaryStore':
        directory = Path(directory)
        loaded: Dict[str, List[str]] = {}
        for language in languages:
            path = directory / f'{language}.txt'
            if not path.is_file():
                logger.warning('Dictionary file for %s not found: %s', language, path)
                continue
            # Undecodable bytes become U+FFFD rather than failing the whole startup
            text = path.read_text(encoding='utf-8-sig', errors='replace')
            if '\ufffd' in text:
                logger.warning('Dictionary file for %s has invalid UTF-8: %s', language, path)
            words = parse_words(text)
            loaded[language] = words
            logger.info('Loaded %d words for %s', len(words), language)
        return cls(loaded)

    def lookup(self, language: str) -> Optional[Tuple[str, ...]]:
        return self._words.get(language)

    @property
    def languages(self) -> List[str]:
        return list(self._words)

    def counts(self) -> Dict[str, int]:
        return {language: len(words) for language, words in self._words.items()}

    def __contains__(self, language: object) -> bool:
        return language in self._words

    def __len__(self) -> int:
        return len(self._words)
