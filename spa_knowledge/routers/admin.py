from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import Session, select
from spa_knowledge.deps import get_loader, get_session
from spa_knowledge.models import Lookup
from spa_knowledge.services.library import LibraryLoader
from spa_knowledge.services.lint import check_library

router = APIRouter()

class LookupOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
    id: str
    query: str
    library_source: str
    library_version: int
    top_match_id: Optional[str] = None
    match_count: int
    escalated: bool
    used: str
    created_at: datetime

class LookupList(BaseModel):
    lookups: List[LookupOut]

@router.get("/library-check")
async def library_check(loader: LibraryLoader = Depends(get_loader)):
    lib = await loader.get_library()
    return {"source": lib.source, "version": lib.version, **check_library(lib.entries).as_dict()}

@router.get("/loader-stats")
def loader_stats(loader: LibraryLoader = Depends(get_loader)):
    return {"remoteConfigured": bool(loader.remote_url), **loader.stats.as_dict()}

@router.get("/lookups", response_model=LookupList)
def lookups(limit: int = Query(50, ge=1, le=500), session: Session = Depends(get_session)):
    rows = session.exec(select(Lookup).order_by(Lookup.created_at.desc()).limit(limit)).all()
    return LookupList(lookups=[LookupOut.model_validate(r) for r in rows])
