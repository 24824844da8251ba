"""Data models for findings, counters and the detected build tool."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Status(str, enum.Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    WARN = "WARN"
    BRIDGE = "BRIDGE"
    INFO = "INFO"  # plain line, never counted


@dataclass(frozen=True)
class Finding:
    """One classified line of the report."""

    status: Status
    message: str
    detail_lines: tuple[str, ...] = ()

    @property
    def counted(self) -> bool:
        return self.status is not Status.INFO


def passed(message: str) -> Finding:
    return Finding(Status.PASS, message)


def failed(message: str) -> Finding:
    return Finding(Status.FAIL, message)


def warned(message: str, detail_lines: tuple[str, ...] = ()) -> Finding:
    return Finding(Status.WARN, message, detail_lines)


def bridged(message: str) -> Finding:
    return Finding(Status.BRIDGE, message)


def info(message: str, detail_lines: tuple[str, ...] = ()) -> Finding:
    return Finding(Status.INFO, message, detail_lines)


@dataclass
class Tally:
    """Running PASS/FAIL/WARN/BRIDGE counters for a single verification run."""

    passed: int = 0
    failed: int = 0
    warned: int = 0
    bridged: int = 0

    def add(self, finding: Finding) -> None:
        if finding.status is Status.PASS:
            self.passed += 1
        elif finding.status is Status.FAIL:
            self.failed += 1
        elif finding.status is Status.WARN:
            self.warned += 1
        elif finding.status is Status.BRIDGE:
            self.bridged += 1

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def verdict(self) -> str:
        """``ready`` | ``in_progress`` | ``incomplete``"""
        if self.failed > 0:
            return "incomplete"
        if self.bridged > 0:
            return "in_progress"
        return "ready"

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


@dataclass(frozen=True)
class BuildTool:
    """Detected build tool and the command used to invoke it."""

    name: str  # "maven" | "gradle"
    marker: str  # marker file that matched, e.g. "pom.xml"
    command: str  # "./mvnw" | "mvn" | "./gradlew" | "gradle"

    @property
    def run_goal(self) -> str:
        return "spring-boot:run" if self.name == "maven" else "bootRun"

    @property
    def compile_args(self) -> list[str]:
        if self.name == "maven":
            return ["clean", "compile", "-q"]
        return ["clean", "compileJava", "-q"]

    @property
    def test_args(self) -> list[str]:
        return ["test", "-q"]


@dataclass
class VerificationResult:
    """Outcome of a full run: every finding in order plus the folded tally."""

    build_tool: BuildTool
    findings: list[Finding] = field(default_factory=list)
    tally: Tally = field(default_factory=Tally)

    @property
    def exit_code(self) -> int:
        return self.tally.exit_code
