"""Inspection steps.

Every step is a plain function over already-read inputs (a parsed
version, a ``TextCorpus`` per scope) and returns the findings it
produced, in print order. Counting and printing happen in the runner.
"""

from __future__ import annotations

from collections.abc import Mapping

from migration_verifier.models import (
    BuildTool,
    Finding,
    failed,
    info,
    passed,
    warned,
)
from migration_verifier.rules import (
    DEPRECATED_PROPERTIES,
    DEPRECATED_STARTERS,
    MIGRATION_BRIDGES,
    OLD_IMPORTS,
    PRIOR_BOOT_PREFIX,
    REMOVED_FEATURES,
    TARGET_BOOT_PREFIX,
    RuleGroup,
    Scope,
)
from migration_verifier.search import TextCorpus


def build_tool_detected(tool: BuildTool) -> list[Finding]:
    return [info(f"Detected build tool: {tool.name}")]


def check_java_version(
    major: int | None,
    min_java: int = 17,
    recommended_java: int = 21,
) -> list[Finding]:
    """Two independent findings: the hard minimum and the advisory recommendation."""
    if major is None:
        return [
            failed(f"Java version could not be determined - minimum requirement is {min_java}+"),
            warned(f"Java version unknown - consider upgrading to {recommended_java}+"),
        ]

    findings: list[Finding] = []
    if major >= min_java:
        findings.append(passed(f"Java version {major} meets minimum requirement ({min_java}+)"))
    else:
        findings.append(
            failed(f"Java version {major} does not meet minimum requirement ({min_java}+)")
        )

    if major >= recommended_java:
        findings.append(
            passed(f"Java version {major} meets recommended version ({recommended_java}+)")
        )
    else:
        findings.append(warned(f"Java version {major} - consider upgrading to {recommended_java}+"))
    return findings


def classify_boot_version(version: str | None) -> Finding:
    if version and version.startswith(TARGET_BOOT_PREFIX):
        return passed(f"Spring Boot version {version} is 4.x")
    if version and version.startswith(PRIOR_BOOT_PREFIX):
        return warned(f"Spring Boot version {version} - ready for upgrade to 4.x")
    shown = version or "could not be determined"
    return failed(f"Spring Boot version {shown} - upgrade to 3.5.x first, then to 4.x")


def check_boot_version(version: str | None) -> list[Finding]:
    return [classify_boot_version(version)]


def apply_rule_groups(
    groups: list[RuleGroup],
    corpora: Mapping[Scope, TextCorpus],
) -> list[Finding]:
    """Evaluate rule groups in order; at most one finding per group."""
    findings: list[Finding] = []
    for group in groups:
        for rule in group.rules:
            corpus = corpora.get(rule.scope)
            if corpus is not None and corpus.contains(rule.pattern):
                findings.append(Finding(rule.status, rule.message))
                break
        else:
            if group.absent_message:
                findings.append(passed(group.absent_message))
    return findings


def check_deprecated_starters(corpora: Mapping[Scope, TextCorpus]) -> list[Finding]:
    return apply_rule_groups(DEPRECATED_STARTERS, corpora) + apply_rule_groups(
        MIGRATION_BRIDGES, corpora
    )


def check_old_imports(corpora: Mapping[Scope, TextCorpus]) -> list[Finding]:
    return apply_rule_groups(OLD_IMPORTS, corpora)


def check_deprecated_properties(corpora: Mapping[Scope, TextCorpus]) -> list[Finding]:
    # The step always completes with a PASS, whatever it found.
    return apply_rule_groups(DEPRECATED_PROPERTIES, corpora) + [passed("Property check complete")]


def check_removed_features(corpora: Mapping[Scope, TextCorpus]) -> list[Finding]:
    return apply_rule_groups(REMOVED_FEATURES, corpora)


def startup_reminder(tool: BuildTool) -> list[Finding]:
    return [
        info(
            "This check requires manual verification:",
            detail_lines=(
                f"1. Run: {tool.command} {tool.run_goal}",
                "2. Verify application starts without errors",
                "3. Check actuator health: curl http://localhost:8080/actuator/health",
                "4. Stop the application",
            ),
        ),
        warned("Manual startup verification required"),
    ]
