from typing import Iterable, List

from ..config import settings
from ..rules.registry import STATIC_RULES
from ..types.issue import AnalysisEnv, Issue, IssueRule
from .freshness import LauncherVersionCheck

DEFAULT_VERSION_CHECK = LauncherVersionCheck(settings.LAUNCHER_NAME)

async def analyze(
    log_text: str,
    env: AnalysisEnv,
    rules: Iterable[IssueRule] = STATIC_RULES,
    version_check: LauncherVersionCheck = DEFAULT_VERSION_CHECK,
) -> List[Issue]:
    """Run every static rule, then the launcher version check.

    Issues come back in rule order with the version issue last. A
    VersionLookupError from the version check propagates and no issues are
    returned for the log.
    """
    issues: List[Issue] = []
    for rule in rules:
        issue = rule.check(log_text)
        if issue is not None:
            issues.append(issue)

    outdated = await version_check.check(log_text, env)
    if outdated is not None:
        issues.append(outdated)

    print(f"[analyze] {len(issues)} issue(s) found")
    return issues
