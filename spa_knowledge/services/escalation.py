from typing import Iterable, Optional

from loguru import logger

from spa_knowledge.models import KnowledgeMatch

SAFETY_MESSAGE = (
    "What you're describing may need a clinician's attention, so I'm not going to answer it "
    "with general education.\n\n"
    "- If this feels like an emergency (trouble breathing, chest pain, vision changes, "
    "severe swelling of the face or throat), call 911 or go to the nearest emergency room.\n"
    "- If you were recently treated with us, call the clinic right away so a provider can "
    "check in with you.\n"
    "- Otherwise, please contact your own doctor or an urgent care clinic.\n\n"
    "Your safety comes first. A licensed provider can evaluate what's going on and tell you "
    "what to do next."
)

# substring match; short triggers may fire inside longer words
def matched_trigger(query: str, matches: Iterable[KnowledgeMatch]) -> Optional[str]:
    q = (query or "").lower()
    if not q:
        return None
    triggers = {t.lower() for m in matches for t in m.entry.escalation_triggers if t.strip()}
    for t in sorted(triggers):
        if t in q:
            return t
    return None

def should_escalate(query: str, matches: Iterable[KnowledgeMatch]) -> bool:
    trigger = matched_trigger(query, matches)
    if trigger is not None:
        logger.info(f"Escalating query on trigger '{trigger}'")
    return trigger is not None

def safety_reply() -> str:
    return SAFETY_MESSAGE
