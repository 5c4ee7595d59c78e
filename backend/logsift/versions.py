from typing import List

def semver_split(version: str) -> List[int]:
    """Return the major and minor components of a dotted version string.

    A leading "v" is dropped and empty or non-numeric groups are skipped, so
    "5.12.3" and "v5.12.3" give [5, 12] and ".8.4" gives [8, 4]. Anything
    past the second group is ignored.
    """
    parts: List[int] = []
    for group in version.strip().lstrip("vV").split("."):
        if not (group.isascii() and group.isdigit()):
            continue
        parts.append(int(group))
        if len(parts) == 2:
            break
    return parts
