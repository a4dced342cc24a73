from collections import Counter
from dataclasses import dataclass, field, asdict
from typing import Iterable, List, Tuple

from spa_knowledge.models import CATEGORIES, KnowledgeEntry
from spa_knowledge.services.hints import CATEGORY_HINTS

@dataclass
class LibraryReport:
    duplicate_ids: List[str] = field(default_factory=list)
    dangling_related: List[Tuple[str, str]] = field(default_factory=list)  # (entry id, missing id)
    unknown_categories: List[str] = field(default_factory=list)
    unhinted_categories: List[str] = field(default_factory=list)
    blank_triggers: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not any((self.duplicate_ids, self.dangling_related, self.unknown_categories,
                        self.unhinted_categories, self.blank_triggers))

    def as_dict(self) -> dict:
        return {"ok": self.ok, **asdict(self)}

def check_library(entries: Iterable[KnowledgeEntry]) -> LibraryReport:
    entries = list(entries)
    report = LibraryReport()
    counts = Counter(e.id for e in entries)
    report.duplicate_ids = sorted(i for i, n in counts.items() if n > 1)
    for e in entries:
        for rid in e.related_topics:
            if rid not in counts:
                report.dangling_related.append((e.id, rid))
        if any(not t.strip() for t in e.escalation_triggers):
            report.blank_triggers.append(e.id)
    used = {e.category for e in entries}
    report.unknown_categories = sorted(used - set(CATEGORIES))
    report.unhinted_categories = sorted((used | set(CATEGORIES)) - set(CATEGORY_HINTS))
    return report
