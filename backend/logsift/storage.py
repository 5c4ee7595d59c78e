import time
from typing import Optional

import redis.asyncio as redis

from .config import settings
from .db import connect, init_db
from .types.issue import VersionCache

class CacheMiss(LookupError):
    pass

class MemoryVersionCache:
    def __init__(self, ttl_seconds: int = 0):
        self._ttl = ttl_seconds
        self._value: Optional[str] = None
        self._stored_at = 0.0

    async def get_cached_latest_version(self) -> str:
        if self._value is None:
            raise CacheMiss("no cached launcher version")
        if self._ttl and time.time() - self._stored_at > self._ttl:
            self._value = None
            raise CacheMiss("cached launcher version expired")
        return self._value

    async def set_cached_latest_version(self, version: str) -> None:
        self._value = version
        self._stored_at = time.time()

class RedisVersionCache:
    def __init__(self, redis_url: str, key: str = "launcher-version-v1", ttl_seconds: int = 0):
        self._redis = redis.Redis.from_url(redis_url, decode_responses=True)
        self._key = key
        self._ttl = ttl_seconds

    async def get_cached_latest_version(self) -> str:
        value = await self._redis.get(self._key)
        if not value:
            raise CacheMiss(f"{self._key} not set")
        return value

    async def set_cached_latest_version(self, version: str) -> None:
        await self._redis.set(self._key, version, ex=self._ttl or None)

    async def close(self) -> None:
        await self._redis.aclose()

class SqliteVersionCache:
    def __init__(self, db_path: str, key: str = "launcher-version-v1", ttl_seconds: int = 0):
        self.db_path = db_path
        self._key = key
        self._ttl = ttl_seconds

    async def init(self) -> None:
        await init_db(self.db_path)

    async def get_cached_latest_version(self) -> str:
        async with connect(self.db_path) as db:
            cur = await db.execute(
                "SELECT value, stored_at FROM kv WHERE key = ?",
                (self._key,),
            )
            row = await cur.fetchone()
        if not row:
            raise CacheMiss(f"{self._key} not set")
        value, stored_at = row
        if self._ttl and time.time() - stored_at > self._ttl:
            raise CacheMiss(f"{self._key} expired")
        return value

    async def set_cached_latest_version(self, version: str) -> None:
        async with connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO kv(key, value, stored_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET value = excluded.value, stored_at = excluded.stored_at
                """,
                (self._key, version, time.time()),
            )
            await db.commit()

def get_version_cache() -> Optional[VersionCache]:
    redis_url = (settings.REDIS_URL or "").strip()
    if redis_url.startswith("redis://") or redis_url.startswith("rediss://"):
        print("[startup] Using RedisVersionCache")
        return RedisVersionCache(redis_url, settings.CACHE_KEY, settings.CACHE_TTL_SECONDS)
    if settings.DB_PATH:
        print(f"[startup] REDIS_URL missing/invalid; using SqliteVersionCache at {settings.DB_PATH}")
        return SqliteVersionCache(settings.DB_PATH, settings.CACHE_KEY, settings.CACHE_TTL_SECONDS)
    print("[startup] No cache configured; every lookup goes to GitHub")
    return None
