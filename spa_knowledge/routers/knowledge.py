from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlmodel import Session
from typing import List, Literal
from loguru import logger

from spa_knowledge.deps import get_loader, get_session
from spa_knowledge.models import KnowledgeMatch, LibraryInfo, Lookup, RetrievalResult
from spa_knowledge.services import retrieval
from spa_knowledge.services.answer import compose_reply
from spa_knowledge.services.escalation import should_escalate
from spa_knowledge.services.library import LibraryLoader

router = APIRouter()

class _Camel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class RetrieveRequest(_Camel):
    query: str = ""
    max_matches: int = Field(retrieval.DEFAULT_MAX_MATCHES, ge=0, le=20)

class EscalateRequest(_Camel):
    query: str = ""
    matches: List[KnowledgeMatch] = []

class EscalateResponse(_Camel):
    escalate: bool

class AskResponse(RetrievalResult):
    escalate: bool
    reply: str
    used: Literal["library", "no_match", "safety_override"]

class LibrarySummary(LibraryInfo):
    entry_count: int
    categories: List[str]

@router.post("/retrieve", response_model=RetrievalResult)
async def retrieve(req: RetrieveRequest, loader: LibraryLoader = Depends(get_loader)):
    return await retrieval.retrieve(req.query, req.max_matches, loader=loader)

@router.post("/escalate", response_model=EscalateResponse)
def escalate(req: EscalateRequest):
    return EscalateResponse(escalate=should_escalate(req.query, req.matches))

@router.post("/ask", response_model=AskResponse)
async def ask(req: RetrieveRequest, loader: LibraryLoader = Depends(get_loader),
              session: Session = Depends(get_session)):
    result = await retrieval.retrieve(req.query, req.max_matches, loader=loader)
    esc = should_escalate(req.query, result.matches)
    reply, used = compose_reply(result, esc)
    lookup = Lookup(query=req.query, library_source=result.library.source,
                    library_version=result.library.version,
                    top_match_id=result.matches[0].entry.id if result.matches else None,
                    match_count=len(result.matches), escalated=esc, used=used)
    session.add(lookup); session.commit()
    logger.info(f"ask: {len(result.matches)} match(es), used={used}, source={result.library.source}")
    return AskResponse(**result.model_dump(), escalate=esc, reply=reply, used=used)

@router.get("/library", response_model=LibrarySummary)
async def library(loader: LibraryLoader = Depends(get_loader)):
    lib = await loader.get_library()
    return LibrarySummary(source=lib.source, version=lib.version, updated_at=lib.updated_at,
                          entry_count=len(lib.entries),
                          categories=sorted({e.category for e in lib.entries}))
