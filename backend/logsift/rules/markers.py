from typing import Optional, Sequence

from ..types.issue import Issue

class MarkerRule:
    """Fires when the log contains any one of a fixed set of literal markers."""

    def __init__(self, name: str, title: str, description: str, markers: Sequence[str]):
        self.name = name
        self.issue = Issue(title=title, description=description)
        self.markers = tuple(markers)

    def check(self, log_text: str) -> Optional[Issue]:
        if any(marker in log_text for marker in self.markers):
            return self.issue
        return None

    def __repr__(self) -> str:
        return f"MarkerRule({self.name!r})"
