from dataclasses import dataclass
from typing import Dict, Optional, Protocol

@dataclass(frozen=True)
class Issue:
    title: str
    description: str

    def as_dict(self) -> Dict[str, str]:
        return {"title": self.title, "description": self.description}

class IssueRule(Protocol):
    name: str

    def check(self, log_text: str) -> Optional[Issue]:
        ...

class ReleaseSource(Protocol):
    async def get_latest_release_version(self) -> str:
        ...

class VersionCache(Protocol):
    async def get_cached_latest_version(self) -> str:
        ...

    async def set_cached_latest_version(self, version: str) -> None:
        ...

@dataclass(frozen=True)
class AnalysisEnv:
    releases: ReleaseSource
    cache: Optional[VersionCache] = None
