from sqlmodel import SQLModel, create_engine, Session
from spa_knowledge.config import settings
from spa_knowledge.services.library import LibraryLoader, build_loader
from typing import Optional
import os

if not os.path.exists(settings.DATA_DIR):
    os.makedirs(settings.DATA_DIR, exist_ok=True)
engine = create_engine(settings.DB_URL, echo=False)

_loader: Optional[LibraryLoader] = None

def get_session():
    with Session(engine) as session:
        yield session

def init_db():
    SQLModel.metadata.create_all(engine)

def get_loader() -> LibraryLoader:
    # one loader (and so one cache) per process
    global _loader
    if _loader is None:
        _loader = build_loader()
    return _loader
