from typing import Optional

from fastapi import FastAPI, APIRouter, HTTPException, Request

from .config import settings
from .github import GitHubClient, GitHubReleaseSource
from .storage import SqliteVersionCache, get_version_cache
from .services.analyzer import analyze
from .services.freshness import VersionLookupError, resolve_latest_version
from .types.issue import AnalysisEnv

app = FastAPI(title="logsift")
api = APIRouter()

gh: Optional[GitHubClient] = None
env: Optional[AnalysisEnv] = None

@app.on_event("startup")
async def on_startup():
    global gh, env
    gh = GitHubClient(settings.GITHUB_TOKEN)
    cache = get_version_cache()
    if isinstance(cache, SqliteVersionCache):
        await cache.init()
    env = AnalysisEnv(
        releases=GitHubReleaseSource(gh, settings.RELEASES_REPO),
        cache=cache,
    )
    print(f"[startup] tracking releases of {settings.RELEASES_REPO}")

@app.on_event("shutdown")
async def on_shutdown():
    if gh is not None:
        await gh.close()
    close = getattr(env.cache, "close", None) if env else None
    if close is not None:
        await close()

@api.get("/health")
async def health():
    return {"ok": True}

async def _read_limited(request: Request, limit: int) -> bytes:
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise HTTPException(status_code=413, detail="log too large")

    chunks = []
    size = 0
    async for chunk in request.stream():
        size += len(chunk)
        if size > limit:
            raise HTTPException(status_code=413, detail="log too large")
        chunks.append(chunk)
    return b"".join(chunks)

@api.post("/analyze")
async def analyze_log(request: Request):
    body = await _read_limited(request, settings.MAX_LOG_BYTES)
    log_text = body.decode("utf-8", errors="replace")

    try:
        issues = await analyze(log_text, env)
    except VersionLookupError as e:
        print(f"[analyze] failed: {e}")
        raise HTTPException(status_code=502, detail="could not determine the latest launcher version")

    return {"issues": [issue.as_dict() for issue in issues]}

@api.get("/debug/latest_version")
async def debug_latest_version():
    try:
        version = await resolve_latest_version(env)
    except VersionLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"repo": settings.RELEASES_REPO, "latest_version": version}

app.include_router(api, prefix="/api")

def run():
    import uvicorn

    uvicorn.run("logsift.main:app", host=settings.HOST, port=settings.PORT)
