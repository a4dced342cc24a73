from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
import sys, time
from spa_knowledge.config import settings
from spa_knowledge.deps import init_db
from spa_knowledge.routers import knowledge, admin

logger.remove()
logger.add(sys.stderr, level=settings.LOG_LEVEL)

@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"Knowledge service up (remote library: {settings.KNOWLEDGE_REMOTE_URL or 'disabled'})")
    yield

app = FastAPI(title="Med Spa Knowledge Library", version="1.0.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed = round((time.perf_counter() - start) * 1000, 2)
    logger.info(f"{request.method} {request.url.path} [{response.status_code}] {elapsed}ms")
    return response

@app.get("/healthz")
def healthz():
    return {"status": "ok"}

app.include_router(knowledge.router, prefix="/knowledge", tags=["knowledge"])
app.include_router(admin.router, prefix="/admin", tags=["admin"])
