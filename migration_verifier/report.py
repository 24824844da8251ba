"""Console rendering: tagged finding lines, section headers, summary and verdict."""

from __future__ import annotations

import click

from migration_verifier.models import Finding, Status, Tally
from migration_verifier.runner import Reporter

_RULE = "=" * 46

_TAG_COLORS: dict[Status, str] = {
    Status.PASS: "green",
    Status.FAIL: "red",
    Status.WARN: "yellow",
    Status.BRIDGE: "blue",
    Status.INFO: "blue",
}


def tag(status: Status) -> str:
    return click.style(f"[{status.value}]", fg=_TAG_COLORS[status], bold=status is Status.WARN)


def verdict_lines(tally: Tally) -> list[tuple[str, str | None]]:
    """Verdict text as (line, color) pairs; the warning reminder can accompany any verdict."""
    lines: list[tuple[str, str | None]] = []
    if tally.verdict == "ready":
        lines.append(("Migration verification complete - Ready for production!", "green"))
    elif tally.verdict == "in_progress":
        lines.append(
            (f"Migration in progress - {tally.bridged} compatibility bridge(s) in use", "yellow")
        )
        lines.append(("Plan to remove bridges before final release.", None))
    else:
        lines.append((f"Migration incomplete - {tally.failed} issue(s) must be resolved", "red"))

    if tally.warned > 0:
        lines.append((f"{tally.warned} warning(s) should be reviewed", "yellow"))
    return lines


class ConsoleReporter(Reporter):
    """Write the report to stdout, colored when the terminal supports it."""

    def __init__(self, color: bool | None = None) -> None:
        self.color = color

    def _echo(self, message: str = "", err: bool = False) -> None:
        click.echo(message, err=err, color=self.color)

    def banner(self) -> None:
        self._echo("Spring Boot 4.x Migration Verification")
        self._echo("========================================")

    def header(self, title: str) -> None:
        self._echo()
        self._echo(_RULE)
        self._echo(title)
        self._echo(_RULE)

    def finding(self, finding: Finding) -> None:
        self._echo(f"{tag(finding.status)} {finding.message}")
        for line in finding.detail_lines:
            self._echo(f"  {line}")

    def fatal(self, message: str) -> None:
        self._echo(f"{tag(Status.FAIL)} {message}")

    def summary(self, tally: Tally) -> None:
        self.header("Migration Verification Summary")
        self._echo()
        self._echo(f"  {click.style('PASS:', fg='green')}   {tally.passed}")
        self._echo(f"  {click.style('FAIL:', fg='red')}   {tally.failed}")
        self._echo(f"  {click.style('WARN:', fg='yellow')}   {tally.warned}")
        self._echo(f"  {click.style('BRIDGE:', fg='blue')} {tally.bridged}")
        self._echo()
        for line, color in verdict_lines(tally):
            self._echo(click.style(line, fg=color) if color else line)
