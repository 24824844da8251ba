"""Build manifest reading — auto-registers parsers on import."""

from __future__ import annotations

from pathlib import Path

import structlog

from migration_verifier.manifests import (  # noqa: F401
    gradle_build,
    maven_pom,
    version_catalog,
)
from migration_verifier.manifests.models import ManifestSet, ParsedManifest
from migration_verifier.manifests.registry import discover_manifests
from migration_verifier.search import read_text

log = structlog.get_logger("migration_verifier.manifests")


def load_manifests(project_path: Path) -> ManifestSet:
    """Read and parse every manifest in the project root."""
    manifests: list[ParsedManifest] = []
    for parser, file_path in discover_manifests(project_path):
        content = read_text(file_path)
        if content is None:
            log.warning("manifests.unreadable", file=file_path.name)
            continue
        parsed = parser.parse(file_path, content)
        log.debug(
            "manifests.parsed",
            file=parsed.source_file,
            coordinates=len(parsed.coordinates),
            boot_version=parsed.boot_version,
        )
        manifests.append(parsed)
    return ManifestSet(manifests=manifests)


__all__ = ["ManifestSet", "ParsedManifest", "load_manifests"]
