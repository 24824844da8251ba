"""MigrationVerifier: runs the ordered inspection steps and folds the findings."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import structlog

from migration_verifier import checks, runtime
from migration_verifier.build_hooks import check_compilation, check_tests
from migration_verifier.config import VerifierConfig
from migration_verifier.detector import BuildToolDetector
from migration_verifier.exceptions import JavaVersionError
from migration_verifier.manifests import load_manifests
from migration_verifier.models import BuildTool, Finding, Tally, VerificationResult
from migration_verifier.rules import SOURCE_SUFFIXES, Scope
from migration_verifier.search import TextCorpus

log = structlog.get_logger("migration_verifier.runner")


class Reporter:
    """Receives output as the run progresses. The default discards it."""

    def banner(self) -> None:
        pass

    def header(self, title: str) -> None:
        pass

    def finding(self, finding: Finding) -> None:
        pass

    def summary(self, tally: Tally) -> None:
        pass


@dataclass
class Step:
    title: str | None  # None: no section header
    run: Callable[[], list[Finding]]


class MigrationVerifier:
    """Run the Spring Boot 4.x readiness checks against one project.

    Build tool detection raises ``BuildToolNotFoundError`` before any
    other step runs. Every other step records findings and continues.
    """

    def __init__(
        self,
        project_path: str | Path = ".",
        config: VerifierConfig | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.project_path = Path(project_path)
        self.config = config or VerifierConfig()
        self.reporter = reporter or Reporter()

    def run(self) -> VerificationResult:
        self.reporter.banner()
        tool = BuildToolDetector().detect(self.project_path)
        result = VerificationResult(build_tool=tool)

        for step in self._steps(tool):
            if step.title:
                self.reporter.header(step.title)
            log.debug("verifier.step_started", step=step.title)
            for finding in step.run():
                self.reporter.finding(finding)
                result.findings.append(finding)
                result.tally.add(finding)

        log.debug(
            "verifier.finished",
            passed=result.tally.passed,
            failed=result.tally.failed,
            warned=result.tally.warned,
            bridged=result.tally.bridged,
        )
        self.reporter.summary(result.tally)
        return result

    # ── steps ────────────────────────────────────────────────────────────

    def _steps(self, tool: BuildTool) -> list[Step]:
        root = self.project_path
        manifests = load_manifests(root)
        corpora = {
            Scope.MANIFESTS: TextCorpus.from_text(manifests.searchable_text),
            Scope.SOURCES: TextCorpus.from_tree(root / self.config.source_dir, SOURCE_SUFFIXES),
            Scope.RESOURCES: TextCorpus.from_tree(root / self.config.resources_dir),
        }

        steps = [
            Step(None, lambda: checks.build_tool_detected(tool)),
            Step("Checking Java Version", self._java_version_findings),
            Step(
                "Checking Spring Boot Version",
                lambda: checks.check_boot_version(manifests.boot_version(tool.name)),
            ),
            Step("Checking for Deprecated Starters", lambda: checks.check_deprecated_starters(corpora)),
            Step("Checking for Old Imports", lambda: checks.check_old_imports(corpora)),
            Step(
                "Checking for Deprecated Properties",
                lambda: checks.check_deprecated_properties(corpora),
            ),
            Step("Checking for Removed Features", lambda: checks.check_removed_features(corpora)),
        ]
        if self.config.run_compile:
            steps.append(Step("Checking Compilation", lambda: check_compilation(tool, root)))
        if self.config.run_tests:
            steps.append(Step("Checking Tests", lambda: check_tests(tool, root)))
        steps.append(Step("Checking Application Startup", lambda: checks.startup_reminder(tool)))
        return steps

    def _java_version_findings(self) -> list[Finding]:
        try:
            output = runtime.read_java_version_output(self.config.java_command)
        except JavaVersionError as e:
            log.warning("verifier.java_unavailable", error=str(e))
            major = None
        else:
            major = runtime.parse_java_major(output)
        return checks.check_java_version(
            major,
            min_java=self.config.min_java,
            recommended_java=self.config.recommended_java,
        )
