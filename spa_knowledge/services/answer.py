from typing import Tuple

from spa_knowledge.models import RetrievalResult
from spa_knowledge.services.escalation import safety_reply

DISCLAIMER = ("This is general education, not medical advice. Eligibility and treatment plans "
              "are decided with a licensed provider at an in-person consultation.")

NO_MATCH_REPLY = ("I don't have an education card on that yet. A consultation is the best place "
                  "to get a personalized answer, and you can ask our team anything when you book.")

def compose_reply(result: RetrievalResult, escalate: bool) -> Tuple[str, str]:
    # (reply text, path used)
    if escalate:
        return safety_reply(), "safety_override"
    if not result.matches:
        return f"{NO_MATCH_REPLY}\n\n{DISCLAIMER}", "no_match"

    top = result.matches[0].entry
    lines = [f"**{top.topic}**", "", top.explanation]
    if top.what_it_helps_with:
        lines += ["", "Often used for:"] + [f"- {x}" for x in top.what_it_helps_with]
    if top.safety_notes:
        lines += ["", "Good to know:"] + [f"- {x}" for x in top.safety_notes]
    if result.suggested_questions:
        lines += ["", "You might also ask:"] + [f"- {q}" for q in result.suggested_questions[:3]]
    lines += ["", DISCLAIMER]
    return "\n".join(lines), "library"
