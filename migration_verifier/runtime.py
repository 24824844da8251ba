"""Java runtime probe: run ``java -version`` and parse the major version."""

from __future__ import annotations

import re
import subprocess

import structlog

from migration_verifier.exceptions import JavaVersionError

log = structlog.get_logger("migration_verifier.runtime")

_QUOTED_RE = re.compile(r'"([^"]+)"')
_NUMBER_RE = re.compile(r"(\d+)")


def read_java_version_output(java_command: str = "java") -> str:
    """Run ``<java_command> -version`` and return its combined output.

    ``java -version`` writes to stderr, so stdout and stderr are merged.

    Raises ``JavaVersionError`` if the binary is missing or cannot run.
    """
    try:
        proc = subprocess.run(
            [java_command, "-version"],
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise JavaVersionError(f"cannot run {java_command}: {e}") from e
    output = (proc.stderr or "") + (proc.stdout or "")
    log.debug("runtime.java_version", command=java_command, returncode=proc.returncode)
    return output


def parse_java_major(output: str) -> int | None:
    """Extract the major version from ``java -version`` output.

    Examples:
        openjdk version "17.0.2" 2022-01-18   -> 17
        java version "1.8.0_292"              -> 8
        openjdk version "21-ea" 2023-09-19    -> 21

    Returns None when no version can be found.
    """
    # The JVM announces JAVA_TOOL_OPTIONS and friends before the version line
    lines = [line for line in output.strip().splitlines() if not line.startswith("Picked up ")]
    if not lines:
        return None
    first = lines[0]

    m = _QUOTED_RE.search(first)
    version = m.group(1) if m else first
    parts = _NUMBER_RE.findall(version)
    if not parts:
        return None

    major = int(parts[0])
    # Pre-9 releases report as 1.x
    if major == 1 and len(parts) > 1:
        major = int(parts[1])
    return major
