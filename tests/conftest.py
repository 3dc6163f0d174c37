import random

import pytest
from fastapi.testclient import TestClient

from wordapi.config import Settings
from wordapi.dictionary import DictionaryStore
from wordapi.main import create_app
from wordapi.query import QueryEngine

ENGLISH = ['apple', 'grape', 'plum', 'ape', 'Apricot', 'banana', 'cherry', 'paper', 'happy', 'zebra']


@pytest.fixture
def store():
    return DictionaryStore({
        'english': ENGLISH,
        'korean': ['사과', '포도', '바나나'],
    })


@pytest.fixture
def engine(store):
    return QueryEngine(store, rng=random.Random(42))


@pytest.fixture
def settings(tmp_path):
    return Settings(dictionaries_dir=tmp_path)


@pytest.fixture
def client(settings, store):
    app = create_app(settings=settings, store=store, rng=random.Random(42))
    return TestClient(app)
