from typing import List

from spa_knowledge.models import KnowledgeEntry, KnowledgeLibrary, KnowledgeMatch, RetrievalResult
from spa_knowledge.services.hints import category_hints
from spa_knowledge.services.library import LibraryLoader
from spa_knowledge.services.trigrams import cosine, vectorize

DEFAULT_MAX_MATCHES = 4
# kept separate even though they share a value today
MATCH_THRESHOLD = 0.08
CATEGORY_BOOST = 0.08
MAX_RELATED = 6
MAX_SUGGESTED = 6
QUESTIONS_PER_MATCH = 2
QUESTIONS_PER_RELATED = 1

def searchable_text(entry: KnowledgeEntry) -> str:
    # who-for / not-for, safety notes and triggers drive other behaviour, not ranking
    return " ".join([
        entry.topic, entry.category, entry.explanation,
        " ".join(entry.what_it_helps_with),
        " ".join(entry.common_questions),
        " ".join(entry.related_topics),
    ])

def score_entries(library: KnowledgeLibrary, query: str) -> List[KnowledgeMatch]:
    qv = vectorize(query)
    hinted = category_hints(query)
    scored = []
    for entry in library.entries:
        score = cosine(qv, vectorize(searchable_text(entry)))
        boosted = entry.category in hinted
        if boosted:
            score += CATEGORY_BOOST
        scored.append(KnowledgeMatch(entry=entry, score=min(1.0, score),
                                     reason="category_boost" if boosted else "semantic"))
    scored.sort(key=lambda m: m.score, reverse=True)
    return scored

def related_entries(library: KnowledgeLibrary, matches: List[KnowledgeMatch]) -> List[KnowledgeEntry]:
    wanted = {rid for m in matches for rid in m.entry.related_topics}
    # library order, dangling ids simply never match
    return [e for e in library.entries if e.id in wanted][:MAX_RELATED]

def suggested_questions(matches: List[KnowledgeMatch], related: List[KnowledgeEntry]) -> List[str]:
    pool = [q for m in matches for q in m.entry.common_questions[:QUESTIONS_PER_MATCH]]
    pool += [q for e in related for q in e.common_questions[:QUESTIONS_PER_RELATED]]
    out: List[str] = []
    for q in pool:
        if q not in out:
            out.append(q)
        if len(out) >= MAX_SUGGESTED:
            break
    return out

def rank(library: KnowledgeLibrary, query: str, max_matches: int = DEFAULT_MAX_MATCHES) -> RetrievalResult:
    kept = [m for m in score_entries(library, query) if m.score >= MATCH_THRESHOLD]
    matches = kept[:max(0, max_matches)]
    related = related_entries(library, matches)
    return RetrievalResult(library=library.info(), matches=matches, related=related,
                           suggested_questions=suggested_questions(matches, related))

async def retrieve(query: str, max_matches: int = DEFAULT_MAX_MATCHES, *,
                   loader: LibraryLoader) -> RetrievalResult:
    library = await loader.get_library()
    return rank(library, query, max_matches)
