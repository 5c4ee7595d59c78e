import re
from typing import List, Optional

from ..types.issue import AnalysisEnv, Issue
from ..versions import semver_split

DOWNLOAD_URL = "https://prismlauncher.org/download/"

class VersionLookupError(RuntimeError):
    pass

async def resolve_latest_version(env: AnalysisEnv) -> str:
    """Latest launcher release, read through the cache when one is configured.

    A failed or empty cache read falls back to the release source. A fetched
    version is written back to the cache once; a failed write is logged and
    the fetched value is still returned. Raises VersionLookupError when the
    release source fails.
    """
    if env.cache is not None:
        try:
            return await env.cache.get_cached_latest_version()
        except Exception as e:
            print(f"[freshness] cache read failed: {type(e).__name__}: {e}")
    else:
        print("[freshness] not caching launcher version, running without a storage backend")

    try:
        version = await env.releases.get_latest_release_version()
    except Exception as e:
        raise VersionLookupError(f"latest release lookup failed: {type(e).__name__}") from e

    if env.cache is not None:
        try:
            await env.cache.set_cached_latest_version(version)
        except Exception as e:
            print(f"[freshness] cache write failed: {type(e).__name__}: {e}")

    return version

def is_outdated(log_parts: List[int], latest_parts: List[int]) -> bool:
    # A log version that does not split into exactly two parts counts as outdated.
    if len(log_parts) != 2:
        return True
    if log_parts[0] < latest_parts[0]:
        return True
    return log_parts[0] == latest_parts[0] and log_parts[1] < latest_parts[1]

class LauncherVersionCheck:
    name = "outdated_launcher"

    def __init__(self, product: str = "Prism Launcher"):
        self.product = product
        self.pattern = re.compile(
            re.escape(product) + r" version: ((?:([0-9]+)\.)?([0-9]+)\.([0-9]+))"
        )

    def extract_version(self, log_text: str) -> Optional[str]:
        match = self.pattern.search(log_text)
        return match.group(1) if match else None

    async def check(self, log_text: str, env: AnalysisEnv) -> Optional[Issue]:
        log_version = self.extract_version(log_text)
        if log_version is None:
            return None

        latest_version = await resolve_latest_version(env)
        latest_parts = semver_split(latest_version)
        if len(latest_parts) < 2:
            print(f"[freshness] cannot compare against latest version {latest_version!r}")
            return None

        if not is_outdated(semver_split(log_version), latest_parts):
            return None

        return Issue(
            title=f"Outdated {self.product}",
            description=(
                f"Your installed version is {log_version}, while the newest version is {latest_version}.\n"
                f"Please update; for more info see {DOWNLOAD_URL}"
            ),
        )
