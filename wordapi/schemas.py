from __future__ import annotations
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional


class WordsResponse(BaseModel):
    words: List[str] = []


class ErrorResponse(BaseModel):
    error: str


class WordQuery(BaseModel):
    # Raw strings on purpose: the query engine owns validation of every field
    language: str
    chars: Optional[str] = None
    length: Optional[str] = None
    limit: Optional[str] = None

    @field_validator('length', 'limit', mode='before')
    @classmethod
    def _numbers_as_text(cls, v):
        # socket clients tend to send numbers rather than query-string text
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class LanguagesResponse(BaseModel):
    supported: List[str]
    loaded: Dict[str, int] = Field(default_factory=dict)
