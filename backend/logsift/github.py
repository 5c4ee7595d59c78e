import asyncio
import random
import httpx
from typing import Any, Dict, Optional, Tuple

GITHUB_API = "https://api.github.com"

class GitHubClient:
    def __init__(self, token: str, max_attempts: int = 4, transport: Optional[httpx.AsyncBaseTransport] = None):
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"

        self._max_attempts = max(1, max_attempts)
        self._client = httpx.AsyncClient(
            base_url=GITHUB_API,
            headers=headers,
            timeout=httpx.Timeout(15.0),
            transport=transport,
        )

    async def close(self):
        await self._client.aclose()

    async def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Tuple[Any, httpx.Headers]:
        delay = 1.0
        for attempt in range(self._max_attempts):
            resp = await self._client.get(url, params=params)

            if resp.status_code == 200:
                return resp.json(), resp.headers

            # backoff on rate limit / transient errors
            retryable = resp.status_code in (403, 429) or 500 <= resp.status_code < 600
            if retryable and attempt + 1 < self._max_attempts:
                ra = resp.headers.get("Retry-After")
                if ra:
                    sleep_s = float(ra)
                else:
                    sleep_s = delay + random.uniform(0, delay * 0.25)
                print(f"[github] {url} returned {resp.status_code}; retrying in {sleep_s:.1f}s")
                await asyncio.sleep(sleep_s)
                delay *= 2
                continue

            resp.raise_for_status()

        resp.raise_for_status()

    async def get_latest_release(self, owner: str, repo: str) -> Dict[str, Any]:
        data, _headers = await self.get_json(
            f"/repos/{owner}/{repo}/releases/latest",
        )
        return data

class GitHubReleaseSource:
    """Latest release version of one repository, read from its newest release tag."""

    def __init__(self, gh: GitHubClient, repo_full_name: str):
        if "/" not in repo_full_name:
            raise ValueError(f"expected owner/repo, got {repo_full_name!r}")
        self._gh = gh
        self.owner, self.repo = repo_full_name.split("/", 1)

    async def get_latest_release_version(self) -> str:
        release = await self._gh.get_latest_release(self.owner, self.repo)
        version = (release.get("tag_name") or release.get("name") or "").strip().lstrip("vV")
        if not version:
            raise ValueError(f"latest release of {self.owner}/{self.repo} has no tag name")
        return version
