from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field
from typing import Optional, Tuple, Literal
from datetime import datetime
import uuid

CATEGORIES = (
    "injectables", "aesthetics", "weight-loss", "hormones", "skincare", "iv-therapy",
    "hair-restoration", "pain-recovery", "aftercare", "safety", "comparisons", "expectations",
)

class _Wire(BaseModel):
    # snake_case in Python, camelCase on the wire; both accepted on input
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

class KnowledgeEntry(_Wire):
    id: str
    topic: str
    category: str  # one of CATEGORIES, not enforced
    explanation: str
    what_it_helps_with: Tuple[str, ...] = ()
    who_its_for: Tuple[str, ...] = ()
    who_its_not_for: Tuple[str, ...] = ()
    common_questions: Tuple[str, ...] = ()
    safety_notes: Tuple[str, ...] = ()
    escalation_triggers: Tuple[str, ...] = ()
    related_topics: Tuple[str, ...] = ()
    updated_at: str
    version: int

class LibraryInfo(_Wire):
    source: Literal["local", "remote"]
    version: int
    updated_at: str

class KnowledgeLibrary(LibraryInfo):
    entries: Tuple[KnowledgeEntry, ...] = ()

    def info(self) -> LibraryInfo:
        return LibraryInfo(source=self.source, version=self.version, updated_at=self.updated_at)

class KnowledgeMatch(_Wire):
    entry: KnowledgeEntry
    score: float
    reason: Literal["semantic", "category_boost"]

class RetrievalResult(_Wire):
    library: LibraryInfo
    matches: Tuple[KnowledgeMatch, ...] = ()
    related: Tuple[KnowledgeEntry, ...] = ()
    suggested_questions: Tuple[str, ...] = ()

class Lookup(SQLModel, table=True):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True)
    query: str
    library_source: str  # local|remote
    library_version: int
    top_match_id: Optional[str] = None
    match_count: int = 0
    escalated: bool = False
    used: str = "library"  # library|no_match|safety_override
    created_at: datetime = Field(default_factory=datetime.utcnow)
