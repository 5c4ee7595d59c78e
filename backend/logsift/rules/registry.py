from typing import List

from ..types.issue import IssueRule
from .catalog import (
    FABRIC_INTERNAL,
    FLATPAK_NVIDIA,
    FORGE_JAVA,
    INTEL_HD,
    LWJGL_2_JAVA_9,
    MACOS_NS,
    OOM,
    OPTINOTFINE,
    PRE_1_12_NATIVE_TRANSPORT_JAVA_9,
)
from .java import JavaOptionRule, WrongJavaRule

# Output order follows this list.
STATIC_RULES: List[IssueRule] = [
    FABRIC_INTERNAL,
    FLATPAK_NVIDIA,
    FORGE_JAVA,
    INTEL_HD,
    JavaOptionRule(),
    LWJGL_2_JAVA_9,
    MACOS_NS,
    OOM,
    OPTINOTFINE,
    PRE_1_12_NATIVE_TRANSPORT_JAVA_9,
    WrongJavaRule(),
]
