"""Verifier configuration: thresholds, project directories and opt-in hooks.

Every field can be overridden from the environment:

    MIGRATION_VERIFIER_MIN_JAVA          minimum Java major version (default: 17)
    MIGRATION_VERIFIER_RECOMMENDED_JAVA  recommended Java major version (default: 21)
    MIGRATION_VERIFIER_JAVA              java executable (default: $JAVA_HOME/bin/java or java)
    MIGRATION_VERIFIER_SOURCE_DIR        source tree scanned for imports (default: src)
    MIGRATION_VERIFIER_RESOURCES_DIR     resources scanned for properties (default: src/main/resources)
    MIGRATION_VERIFIER_RUN_COMPILE       1/true to run the compile step
    MIGRATION_VERIFIER_RUN_TESTS         1/true to run the test step
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

_TRUTHY = {"1", "true", "yes", "on"}


def default_java_command() -> str:
    java_home = os.environ.get("JAVA_HOME")
    if java_home:
        return os.path.join(java_home, "bin", "java")
    return "java"


def _env_flag(key: str) -> bool:
    return os.environ.get(key, "").strip().lower() in _TRUTHY


@dataclass
class VerifierConfig:
    min_java: int = 17
    recommended_java: int = 21
    java_command: str = field(default_factory=default_java_command)
    source_dir: str = "src"
    resources_dir: str = "src/main/resources"
    run_compile: bool = False
    run_tests: bool = False

    @classmethod
    def from_env(cls) -> VerifierConfig:
        return cls(
            min_java=int(os.environ.get("MIGRATION_VERIFIER_MIN_JAVA", "17")),
            recommended_java=int(os.environ.get("MIGRATION_VERIFIER_RECOMMENDED_JAVA", "21")),
            java_command=os.environ.get("MIGRATION_VERIFIER_JAVA") or default_java_command(),
            source_dir=os.environ.get("MIGRATION_VERIFIER_SOURCE_DIR", "src"),
            resources_dir=os.environ.get("MIGRATION_VERIFIER_RESOURCES_DIR", "src/main/resources"),
            run_compile=_env_flag("MIGRATION_VERIFIER_RUN_COMPILE"),
            run_tests=_env_flag("MIGRATION_VERIFIER_RUN_TESTS"),
        )
