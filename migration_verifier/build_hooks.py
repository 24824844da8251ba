"""Opt-in compile and test steps that invoke the project's build tool.

Both are off unless requested with ``--compile`` / ``--tests`` (or the
matching ``MIGRATION_VERIFIER_RUN_*`` environment variables).
"""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from migration_verifier.models import BuildTool, Finding, failed, info, passed

log = structlog.get_logger("migration_verifier.build_hooks")


def _run_build(tool: BuildTool, args: list[str], project_path: Path) -> tuple[bool, str]:
    """Run the build tool; return (succeeded, error detail)."""
    cmd = [tool.command, *args]
    log.info("build_hooks.run", cmd=" ".join(cmd), cwd=str(project_path))
    try:
        proc = subprocess.run(
            cmd,
            cwd=project_path,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        return False, f"cannot run {tool.command}: {e}"
    if proc.returncode != 0:
        tail = (proc.stderr or proc.stdout or "").strip().splitlines()[-5:]
        log.debug("build_hooks.failed", returncode=proc.returncode, tail=tail)
        return False, f"exit {proc.returncode}"
    return True, ""


def check_compilation(tool: BuildTool, project_path: Path) -> list[Finding]:
    ok, detail = _run_build(tool, tool.compile_args, project_path)
    findings = [info("Running compilation...")]
    if ok:
        findings.append(passed("Compilation successful"))
    else:
        findings.append(failed(f"Compilation failed ({detail}) - check build output"))
    return findings


def check_tests(tool: BuildTool, project_path: Path) -> list[Finding]:
    ok, detail = _run_build(tool, tool.test_args, project_path)
    findings = [info("Running tests...")]
    if ok:
        findings.append(passed("All tests passed"))
    else:
        findings.append(failed(f"Some tests failed ({detail}) - check build output"))
    return findings
