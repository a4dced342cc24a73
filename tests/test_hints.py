from spa_knowledge.knowledge import LOCAL_ENTRIES
from spa_knowledge.models import CATEGORIES
from spa_knowledge.services.hints import CATEGORY_HINTS, category_hints

def test_every_category_has_hints():
    assert set(CATEGORY_HINTS) == set(CATEGORIES)
    assert all(CATEGORY_HINTS[c] for c in CATEGORIES)

def test_local_categories_are_covered():
    assert {e.category for e in LOCAL_ENTRIES} <= set(CATEGORY_HINTS)

def test_tokens_are_lowercase():
    for tokens in CATEGORY_HINTS.values():
        assert all(t == t.lower() for t in tokens)

def test_single_hint():
    assert category_hints("Does Botox hurt?") == {"injectables"}

def test_multiple_hints():
    hints = category_hints("is swelling after filler normal")
    assert {"injectables", "aftercare"} <= hints

def test_no_hints():
    assert category_hints("hello there") == set()
    assert category_hints("") == set()

def test_edge_spaced_tokens_hit_at_end_of_query():
    assert "iv-therapy" in category_hints("do you do iv")
    assert "aesthetics" in category_hints("what is rf?")

def test_punctuation_counts_as_a_word_break():
    assert "comparisons" in category_hints("Botox vs. filler")
    assert "iv-therapy" in category_hints("IV, or a shot?")
