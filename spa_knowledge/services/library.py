import asyncio, time
from dataclasses import dataclass, asdict
from typing import Callable, List, Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from spa_knowledge.config import settings
from spa_knowledge.knowledge import LOCAL_ENTRIES, LOCAL_LIBRARY_UPDATED_AT, LOCAL_LIBRARY_VERSION
from spa_knowledge.models import KnowledgeEntry, KnowledgeLibrary

@dataclass
class LibraryCache:
    fetched_at: Optional[float] = None
    value: Optional[KnowledgeLibrary] = None

    def get(self, now: float, ttl_seconds: float) -> Optional[KnowledgeLibrary]:
        if self.value is None or self.fetched_at is None:
            return None
        if now - self.fetched_at >= ttl_seconds:
            return None
        return self.value

    def store(self, now: float, value: KnowledgeLibrary) -> None:
        self.fetched_at, self.value = now, value

    def clear(self) -> None:
        self.fetched_at, self.value = None, None

@dataclass
class LoaderStats:
    cache_hits: int = 0
    remote_loads: int = 0
    local_loads: int = 0
    remote_failures: int = 0
    dropped_entries: int = 0

    def as_dict(self) -> dict:
        return asdict(self)

def local_library() -> KnowledgeLibrary:
    return KnowledgeLibrary(source="local", version=LOCAL_LIBRARY_VERSION,
                            updated_at=LOCAL_LIBRARY_UPDATED_AT, entries=LOCAL_ENTRIES)

class LibraryLoader:
    def __init__(self, remote_url: Optional[str] = None, ttl_seconds: float = 60.0,
                 timeout_seconds: float = 3.0, cache: Optional[LibraryCache] = None,
                 clock: Callable[[], float] = time.time,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.remote_url = (remote_url or "").strip()
        self.ttl_seconds = ttl_seconds
        self.timeout_seconds = timeout_seconds
        self.cache = cache if cache is not None else LibraryCache()
        self.stats = LoaderStats()
        self._clock = clock
        self._transport = transport
        self._lock = asyncio.Lock()

    async def get_library(self) -> KnowledgeLibrary:
        cached = self.cache.get(self._clock(), self.ttl_seconds)
        if cached is not None:
            self.stats.cache_hits += 1
            return cached
        async with self._lock:
            # another caller may have refreshed while we waited
            cached = self.cache.get(self._clock(), self.ttl_seconds)
            if cached is not None:
                self.stats.cache_hits += 1
                return cached
            library = await self._fetch_remote()
            if library is None:
                library = local_library()
                self.stats.local_loads += 1
            else:
                self.stats.remote_loads += 1
            self.cache.store(self._clock(), library)
            return library

    async def _fetch_remote(self) -> Optional[KnowledgeLibrary]:
        if not self.remote_url:
            return None
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                resp = await client.get(self.remote_url, headers={"Content-Type": "application/json"})
            if not resp.is_success:
                return self._reject(f"HTTP {resp.status_code}")
            payload = resp.json()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            return self._reject(f"{type(e).__name__}: {e}")
        except (ValueError, RecursionError) as e:
            return self._reject(f"invalid JSON: {e}")

        if not isinstance(payload, dict) or not isinstance(payload.get("entries"), list):
            return self._reject("payload has no entries array")
        entries = self._valid_entries(payload["entries"])
        try:
            library = KnowledgeLibrary(source="remote", version=payload.get("version", 0),
                                       updated_at=payload.get("updatedAt", ""), entries=entries)
        except ValidationError as e:
            return self._reject(f"invalid library metadata: {e.error_count()} error(s)")
        logger.info(f"Loaded remote knowledge library v{library.version} ({len(entries)} entries)")
        return library

    def _valid_entries(self, raw: list) -> List[KnowledgeEntry]:
        out = []
        for i, item in enumerate(raw):
            try:
                out.append(KnowledgeEntry.model_validate(item))
            except ValidationError as e:
                self.stats.dropped_entries += 1
                ident = item.get("id") if isinstance(item, dict) else None
                logger.warning(f"Dropping remote knowledge entry #{i} ({ident or 'no id'}): "
                               f"{e.error_count()} validation error(s)")
        return out

    def _reject(self, reason: str) -> None:
        self.stats.remote_failures += 1
        logger.warning(f"Remote knowledge library unavailable ({reason}); using local library")
        return None

def build_loader() -> LibraryLoader:
    return LibraryLoader(remote_url=settings.KNOWLEDGE_REMOTE_URL,
                         ttl_seconds=settings.KNOWLEDGE_CACHE_TTL_SECONDS,
                         timeout_seconds=settings.KNOWLEDGE_FETCH_TIMEOUT_SECONDS)
