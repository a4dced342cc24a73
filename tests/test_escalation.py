from spa_knowledge.models import KnowledgeMatch
from spa_knowledge.services.escalation import SAFETY_MESSAGE, matched_trigger, safety_reply, should_escalate
from tests.conftest import make_entry

def _match(*triggers, id="a.b"):
    return KnowledgeMatch(entry=make_entry(id, escalationTriggers=list(triggers)), score=0.5, reason="semantic")

def test_trigger_in_query_escalates():
    assert should_escalate("I have trouble breathing", [_match("Trouble Breathing")]) is True

def test_no_matches_never_escalates():
    assert should_escalate("", []) is False
    assert should_escalate("I have trouble breathing", []) is False

def test_trigger_not_in_query():
    assert should_escalate("is swelling after filler normal", [_match("severe pain", "blanching")]) is False

def test_union_across_matches():
    matches = [_match("fever", id="a.one"), _match("severe pain", id="b.two")]
    assert should_escalate("Severe pain on my cheek", matches) is True
    assert matched_trigger("Severe pain on my cheek", matches) == "severe pain"

def test_substring_match_is_accepted():
    # short triggers can fire inside longer words
    assert should_escalate("feverish after my peel", [_match("fever")]) is True

def test_blank_triggers_are_ignored():
    assert should_escalate("anything at all", [_match("", "   ")]) is False

def test_safety_reply():
    assert safety_reply() == SAFETY_MESSAGE
    assert "911" in safety_reply()
