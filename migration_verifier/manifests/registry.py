"""Parser registry — discover manifest files and match them to parsers."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from migration_verifier.manifests.models import ParsedManifest


@runtime_checkable
class ManifestParser(Protocol):
    """Interface that every manifest parser must satisfy."""

    build_tool: str
    file_patterns: list[str]

    def parse(self, file_path: Path, content: str) -> ParsedManifest: ...


PARSER_REGISTRY: dict[str, ManifestParser] = {}


def register_parser(name: str, parser: ManifestParser) -> None:
    """Register a parser instance under *name*."""
    PARSER_REGISTRY[name] = parser


def discover_manifests(project_path: Path) -> list[tuple[ManifestParser, Path]]:
    """Match manifest files in the project root to registered parsers.

    Only the root is searched; module sub-projects are not descended into.
    Returns a list of (parser, matched_file) pairs in registration order.
    """
    matches: list[tuple[ManifestParser, Path]] = []
    for parser in PARSER_REGISTRY.values():
        for pattern in parser.file_patterns:
            for hit in sorted(project_path.glob(pattern)):
                if hit.is_file():
                    matches.append((parser, hit))
    return matches
