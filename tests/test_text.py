import pytest

from tagcloud.text import (
    DEFAULT_STOP_WORDS,
    WordPreprocessor,
    count_frequencies,
    load_stop_words,
    read_lines,
)


def test_preprocessor_filters_stop_words_case_insensitive():
    preprocessor = WordPreprocessor(["the", "AND", "Is"], to_lower=True)
    words = ["THE", "Cat", "and", "the", "DOG", "IS", "running"]
    assert list(preprocessor.process(words)) == ["cat", "dog", "running"]


def test_preprocessor_keeps_case_when_asked():
    preprocessor = WordPreprocessor(["the"], to_lower=False)
    assert list(preprocessor.process(["The", "Cat", "cat"])) == ["Cat", "cat"]


def test_empty_stop_word_list_uses_defaults():
    preprocessor = WordPreprocessor([], to_lower=True)
    words = ["the", "quick", "brown", "fox", "and", "the", "lazy", "dog"]
    result = list(preprocessor.process(words))
    assert "the" not in result
    assert "and" not in result
    assert result == ["quick", "brown", "fox", "lazy", "dog"]
    assert set(DEFAULT_STOP_WORDS) == preprocessor.stop_words


def test_preprocessor_drops_blank_lines():
    preprocessor = WordPreprocessor(["x"])
    assert list(preprocessor.process(["", "   ", " word "])) == ["word"]


def test_count_frequencies_is_case_insensitive():
    words = ["кот", "собака", "Кот", "СОБАКА", "кот", "Собака"]
    assert count_frequencies(words) == {"кот": 3, "собака": 3}


def test_count_frequencies_keeps_first_spelling():
    assert count_frequencies(["Python", "python", "PYTHON"]) == {"Python": 3}


def test_count_frequencies_empty():
    assert count_frequencies([]) == {}


def test_read_lines(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\nbanana\r\ncherry", encoding="utf-8")
    assert list(read_lines(str(path))) == ["apple", "banana", "cherry"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_lines(str(tmp_path / "missing.txt")))


def test_load_stop_words(tmp_path):
    path = tmp_path / "stop.txt"
    path.write_text(" и \n\nв\nна\n", encoding="utf-8")
    assert load_stop_words(str(path)) == ["и", "в", "на"]
    assert load_stop_words(None) == []
    assert load_stop_words("") == []


def test_load_stop_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_stop_words(str(tmp_path / "nope.txt"))
