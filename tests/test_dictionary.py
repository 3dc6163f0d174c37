import logging

from wordapi.dictionary import SUPPORTED_LANGUAGES, DictionaryStore, parse_words


def test_parse_words_trims_and_drops_blank_lines():
    text = "  apple \n\nbanana\r\n   \n\tcherry\napple\n"
    assert parse_words(text) == ['apple', 'banana', 'cherry', 'apple']


def test_supported_languages_are_fixed():
    assert SUPPORTED_LANGUAGES == ('korean', 'english', 'italian', 'french', 'german', 'spanish')


def test_from_directory_loads_present_files(tmp_path):
    (tmp_path / 'english.txt').write_text("apple\n grape \n\nplum\n", encoding='utf-8')
    (tmp_path / 'korean.txt').write_text("사과\n포도\n", encoding='utf-8')

    store = DictionaryStore.from_directory(tmp_path)

    assert store.lookup('english') == ('apple', 'grape', 'plum')
    assert store.lookup('korean') == ('사과', '포도')
    assert store.counts() == {'korean': 2, 'english': 3}


def test_missing_file_is_absent_and_logged(tmp_path, caplog):
    (tmp_path / 'english.txt').write_text("apple\n", encoding='utf-8')

    with caplog.at_level(logging.WARNING, logger='wordapi'):
        store = DictionaryStore.from_directory(tmp_path)

    assert 'german' not in store
    assert store.lookup('german') is None
    assert store.languages == ['english']
    assert any('german' in r.getMessage() for r in caplog.records if r.levelno == logging.WARNING)


def test_empty_file_loads_as_empty_dictionary(tmp_path):
    (tmp_path / 'french.txt').write_text("\n\n", encoding='utf-8')
    store = DictionaryStore.from_directory(tmp_path)
    assert store.lookup('french') == ()


def test_unsupported_files_are_ignored(tmp_path):
    (tmp_path / 'klingon.txt').write_text("qapla\n", encoding='utf-8')
    store = DictionaryStore.from_directory(tmp_path)
    assert len(store) == 0


def test_entries_never_empty_or_padded():
    store = DictionaryStore({'english': [' apple', 'pear ', '', '   ', 'fig']})
    words = store.lookup('english')
    assert words == ('apple', 'pear', 'fig')
    assert all(w and w == w.strip() for w in words)


def test_shipped_word_lists_are_clean():
    from wordapi.config import DEFAULT_DICTIONARIES_DIR

    store = DictionaryStore.from_directory(DEFAULT_DICTIONARIES_DIR)
    for language in store.languages:
        assert all(w and w == w.strip() for w in store.lookup(language))


def test_invalid_utf8_does_not_block_other_languages(tmp_path, caplog):
    (tmp_path / 'english.txt').write_text("apple\n", encoding='utf-8')
    (tmp_path / 'french.txt').write_bytes(b"pomme\ncaf\xe9\n")

    with caplog.at_level(logging.WARNING, logger='wordapi'):
        store = DictionaryStore.from_directory(tmp_path)

    assert store.lookup('english') == ('apple',)
    assert store.lookup('french') == ('pomme', 'caf\ufffd')
    assert any('french' in r.getMessage() for r in caplog.records if r.levelno == logging.WARNING)


def test_byte_order_mark_is_not_part_of_first_word(tmp_path):
    (tmp_path / 'english.txt').write_bytes('\ufeffapple\ngrape\n'.encode('utf-8'))
    store = DictionaryStore.from_directory(tmp_path)
    assert store.lookup('english') == ('apple', 'grape')


def test_parse_words_drops_byte_order_marks():
    assert parse_words('\ufeffapple\n \ufeff\nplum') == ['apple', 'plum']
