"""Data models for parsed build manifests."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ParsedManifest:
    """A single build manifest read from the project root."""

    source_file: str  # path relative to the project root
    build_tool: str  # "maven" | "gradle"
    content: str
    coordinates: list[str] = field(default_factory=list)  # "group:artifact"
    boot_version: str | None = None


@dataclass
class ManifestSet:
    """All manifests found in a project, searched as one body of text."""

    manifests: list[ParsedManifest] = field(default_factory=list)

    @property
    def searchable_text(self) -> str:
        """Raw manifest text followed by every parsed coordinate, one per line.

        Maven declares ``junit:junit`` as separate groupId/artifactId
        elements, so coordinate lines make such patterns visible.
        """
        chunks = [m.content for m in self.manifests]
        chunks.extend(c for m in self.manifests for c in m.coordinates)
        return "\n".join(chunks)

    def boot_version(self, build_tool: str) -> str | None:
        """First Spring Boot version declared by a manifest of *build_tool*."""
        for m in self.manifests:
            if m.build_tool == build_tool and m.boot_version:
                return m.boot_version
        return None
