import re
from typing import Optional

from ..types.issue import Issue

VM_OPTION_RE = re.compile(r"Unrecognized VM option '(.+)'[\r\n]")
UNRECOGNIZED_OPTION_RE = re.compile(r"Unrecognized option: (.+)[\r\n]")
SWITCH_VERSION_RE = re.compile(
    r"Please switch to one of the following Java versions for this instance:[\r\n]+(Java version [\d.]+)",
    re.MULTILINE,
)

INCOMPATIBLE_JAVA_MARKER = "Java major version is incompatible. Things might break."

class JavaOptionRule:
    name = "java_option"

    def check(self, log_text: str) -> Optional[Issue]:
        match = VM_OPTION_RE.search(log_text)
        if match:
            option = match.group(1)
            # The Shenandoah flag gets the generic title; other -XX flags the Java 8 one.
            if option == "UseShenandoahGC":
                title = "Wrong Java Arguments"
            else:
                title = "Java 8 and below don't support ShenandoahGC"
            return Issue(
                title=title,
                description=f"Remove `-XX:{option}` from your Java arguments",
            )

        match = UNRECOGNIZED_OPTION_RE.search(log_text)
        if match:
            return Issue(
                title="Wrong Java Arguments",
                description=f"Remove `{match.group(1)}` from your Java arguments",
            )

        return None

class WrongJavaRule:
    name = "wrong_java"

    def check(self, log_text: str) -> Optional[Issue]:
        match = SWITCH_VERSION_RE.search(log_text)
        if match:
            versions = ", ".join(match.group(1).split("\n"))
            return Issue(
                title="Wrong Java Version",
                description=(
                    f"Please switch to one of the following: `{versions}`\n"
                    "For more information, type `/tag java`"
                ),
            )

        if INCOMPATIBLE_JAVA_MARKER in log_text:
            return Issue(
                title="Java compatibility check skipped",
                description=(
                    "The Java major version may not work with your Minecraft instance. "
                    "Please switch to a compatible version"
                ),
            )

        return None
