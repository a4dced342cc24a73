from spa_knowledge.knowledge import LOCAL_ENTRIES
from spa_knowledge.services.lint import check_library
from tests.conftest import make_entry
from scripts.check_library import main

def test_local_library_is_clean():
    report = check_library(LOCAL_ENTRIES)
    assert report.as_dict() == {"ok": True, "duplicate_ids": [], "dangling_related": [],
                                "unknown_categories": [], "unhinted_categories": [], "blank_triggers": []}

def test_local_ids_are_namespaced_by_category():
    for e in LOCAL_ENTRIES:
        assert e.id.split(".", 1)[0] == e.category

def test_reports_problems():
    entries = [
        make_entry("a.one", relatedTopics=["a.two", "nope.missing"]),
        make_entry("a.one"),
        make_entry("a.two", category="mystery", escalationTriggers=["fever", " "]),
    ]
    report = check_library(entries)
    assert not report.ok
    assert report.duplicate_ids == ["a.one"]
    assert report.dangling_related == [("a.one", "nope.missing")]
    assert report.unknown_categories == ["mystery"]
    assert report.unhinted_categories == ["mystery"]
    assert report.blank_triggers == ["a.two"]

def test_check_script_passes():
    assert main() == 0
