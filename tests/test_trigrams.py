import pytest
from spa_knowledge.services.trigrams import cosine, normalize, similarity, trigrams, vectorize

def test_normalize_collapses_whitespace():
    assert normalize("  Botox\t\n  FOREHEAD   lines ") == "botox forehead lines"

def test_trigrams_are_padded():
    assert trigrams("ab") == ["  a", " ab", "ab ", "b  "]
    assert trigrams("Hi") == trigrams("  hi ")

def test_empty_text_has_no_trigrams():
    assert trigrams("") == []
    assert trigrams("   ") == []
    assert not vectorize("")

def test_counts_repeats():
    v = vectorize("aaaa")
    assert v["aaa"] == 2

def test_empty_vector_similarity_is_zero():
    assert similarity("", "botox") == 0.0
    assert similarity("botox", "") == 0.0
    assert cosine(vectorize(""), vectorize("")) == 0.0

def test_identical_text_is_one():
    assert similarity("When do results kick in?", "when do RESULTS kick in?") == pytest.approx(1.0)

def test_tolerates_typos_and_word_order():
    assert similarity("botox forehead", "forehead botox") > 0.7
    assert similarity("botox", "botoxx") > similarity("botox", "filler")

def test_unrelated_text_is_zero():
    assert similarity("abc", "xyz") == 0.0

def test_symmetric_and_bounded():
    a, b = "swelling after filler", "filler swelling and bruising"
    assert similarity(a, b) == pytest.approx(similarity(b, a))
    assert 0.0 <= similarity(a, b) <= 1.0
