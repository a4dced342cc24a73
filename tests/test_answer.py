from spa_knowledge.services.answer import DISCLAIMER, compose_reply
from spa_knowledge.services.escalation import SAFETY_MESSAGE
from spa_knowledge.services.library import local_library
from spa_knowledge.services.retrieval import rank

def test_safety_path_wins():
    result = rank(local_library(), "botox forehead lines")
    assert compose_reply(result, escalate=True) == (SAFETY_MESSAGE, "safety_override")

def test_library_reply_uses_top_match():
    result = rank(local_library(), "is swelling after filler normal")
    reply, used = compose_reply(result, escalate=False)
    top = result.matches[0].entry
    assert used == "library"
    assert top.topic in reply and top.explanation in reply
    assert reply.endswith(DISCLAIMER)

def test_no_match_reply():
    reply, used = compose_reply(rank(local_library(), ""), escalate=False)
    assert used == "no_match"
    assert "consultation" in reply
