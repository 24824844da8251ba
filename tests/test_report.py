"""Tests for console rendering."""

from __future__ import annotations

from migration_verifier.models import Finding, Status, Tally
from migration_verifier.report import ConsoleReporter, tag, verdict_lines


def _text(tally: Tally) -> list[str]:
    return [line for line, _ in verdict_lines(tally)]


class TestVerdictLines:
    def test_ready(self):
        assert _text(Tally(passed=5)) == ["Migration verification complete - Ready for production!"]

    def test_in_progress(self):
        assert _text(Tally(passed=5, bridged=2)) == [
            "Migration in progress - 2 compatibility bridge(s) in use",
            "Plan to remove bridges before final release.",
        ]

    def test_incomplete_ignores_bridges(self):
        assert _text(Tally(failed=3, bridged=1)) == [
            "Migration incomplete - 3 issue(s) must be resolved",
        ]

    def test_warnings_accompany_any_verdict(self):
        for tally in (Tally(warned=2), Tally(warned=2, bridged=1), Tally(warned=2, failed=1)):
            assert _text(tally)[-1] == "2 warning(s) should be reviewed"


class TestConsoleReporter:
    def test_header_layout(self, capsys):
        ConsoleReporter(color=False).header("Checking Java Version")
        out = capsys.readouterr().out.splitlines()
        assert out == ["", "=" * 46, "Checking Java Version", "=" * 46]

    def test_finding_with_details(self, capsys):
        finding = Finding(Status.INFO, "This check requires manual verification:", ("1. Run: mvn",))
        ConsoleReporter(color=False).finding(finding)
        assert capsys.readouterr().out.splitlines() == [
            "[INFO] This check requires manual verification:",
            "  1. Run: mvn",
        ]

    def test_colored_tag(self):
        assert "\x1b[" in tag(Status.PASS)
        assert "[PASS]" in tag(Status.PASS)

    def test_summary_block(self, capsys):
        ConsoleReporter(color=False).summary(Tally(passed=4, failed=0, warned=1, bridged=0))
        out = capsys.readouterr().out
        assert "Migration Verification Summary" in out
        assert "  PASS:   4" in out
        assert "  BRIDGE: 0" in out
        assert "1 warning(s) should be reviewed" in out


class TestTally:
    def test_info_not_counted(self):
        tally = Tally()
        tally.add(Finding(Status.INFO, "x"))
        tally.add(Finding(Status.BRIDGE, "y"))
        assert (tally.passed, tally.failed, tally.warned, tally.bridged) == (0, 0, 0, 1)
        assert tally.exit_code == 0
        assert tally.verdict == "in_progress"

    def test_fail_sets_exit_code(self):
        tally = Tally()
        tally.add(Finding(Status.FAIL, "x"))
        assert tally.exit_code == 1
        assert tally.verdict == "incomplete"
