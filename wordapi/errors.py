from __future__ import annotations
from typing import Iterable


class QueryError(Exception):
    """Base for word query validation failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnsupportedLanguage(QueryError):
    def __init__(self, language: str, supported: Iterable[str]):
        super().__init__(f"Unsupported language: {language}. Supported: {', '.join(supported)}")
        self.language = language


class DictionaryUnavailable(QueryError):
    # Valid language, but its word list never loaded: a server-side problem.
    status_code = 500

    def __init__(self, language: str):
        super().__init__(f"Dictionary for {language} not loaded")
        self.language = language


class MissingCharsParam(QueryError):
    def __init__(self):
        super().__init__('Query param "chars" is required (comma-separated characters)')


class InvalidCharsParam(QueryError):
    def __init__(self):
        super().__init__('Invalid "chars" param')


class InvalidLengthParam(QueryError):
    def __init__(self):
        super().__init__('Invalid "length" param (must be a positive integer)')


class InvalidLimitParam(QueryError):
    def __init__(self):
        super().__init__('Invalid "limit" param (must be a positive integer)')


class ServiceUnavailable(QueryError):
    # Raised when a request arrives before the word lists finished loading
    status_code = 503

    def __init__(self):
        super().__init__("Word lists are not loaded yet")
