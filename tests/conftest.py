import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine
from spa_knowledge.main import app
from spa_knowledge.deps import get_loader, get_session
from spa_knowledge.models import KnowledgeEntry, KnowledgeLibrary
from spa_knowledge.services.library import LibraryLoader

def make_entry(id, topic="Topic", category="skincare", explanation="", **kw):
    base = {"id": id, "topic": topic, "category": category, "explanation": explanation,
            "updatedAt": "2025-01-01T00:00:00Z", "version": 1}
    base.update(kw)
    return KnowledgeEntry.model_validate(base)

def make_library(*entries, source="local"):
    return KnowledgeLibrary(source=source, version=1, updated_at="2025-01-01T00:00:00Z", entries=entries)

class FakeClock:
    def __init__(self, now=1_000.0):
        self.now = now
    def __call__(self):
        return self.now

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def loader():
    return LibraryLoader()

@pytest.fixture
def db_engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    return engine

@pytest.fixture
def client(loader, db_engine):
    def _session():
        with Session(db_engine) as session:
            yield session
    app.dependency_overrides[get_loader] = lambda: loader
    app.dependency_overrides[get_session] = _session
    yield TestClient(app)
    app.dependency_overrides.clear()
