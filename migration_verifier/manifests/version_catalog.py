"""Parser for Gradle version catalogs (gradle/libs.versions.toml)."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import structlog

from migration_verifier.manifests.models import ParsedManifest
from migration_verifier.manifests.registry import register_parser

log = structlog.get_logger("migration_verifier.manifests")

_BOOT_VERSION_KEYS = ("spring-boot", "springBoot", "spring_boot", "springboot")
_BOOT_PLUGIN_ID = "org.springframework.boot"


def _resolve_version(entry: object, versions: dict) -> str | None:
    """Resolve a catalog version: a string, {ref = "..."} or {strictly/require = "..."}."""
    if isinstance(entry, str):
        return entry
    if isinstance(entry, dict):
        ref = entry.get("ref")
        if isinstance(ref, str):
            value = versions.get(ref)
            return value if isinstance(value, str) else None
        for key in ("strictly", "require", "prefer"):
            if isinstance(entry.get(key), str):
                return entry[key]
    return None


class VersionCatalogParser:
    build_tool = "gradle"
    file_patterns = ["gradle/libs.versions.toml"]

    def parse(self, file_path: Path, content: str) -> ParsedManifest:
        manifest = ParsedManifest(
            source_file=f"gradle/{file_path.name}",
            build_tool=self.build_tool,
            content=content,
        )
        try:
            data = tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            log.debug("manifests.catalog_unparseable", file=str(file_path), error=str(e))
            return manifest

        versions = data.get("versions", {})
        manifest.coordinates = self._extract_coordinates(data.get("libraries", {}))
        manifest.boot_version = self._extract_boot_version(data.get("plugins", {}), versions)
        return manifest

    @staticmethod
    def _extract_coordinates(libraries: dict) -> list[str]:
        coordinates: list[str] = []
        for entry in libraries.values():
            if isinstance(entry, str):
                name = ":".join(entry.split(":")[:2])
            elif isinstance(entry, dict) and isinstance(entry.get("module"), str):
                name = entry["module"]
            elif isinstance(entry, dict) and "group" in entry and "name" in entry:
                name = f"{entry['group']}:{entry['name']}"
            else:
                continue
            if name not in coordinates:
                coordinates.append(name)
        return coordinates

    @staticmethod
    def _extract_boot_version(plugins: dict, versions: dict) -> str | None:
        for entry in plugins.values():
            if isinstance(entry, dict) and entry.get("id") == _BOOT_PLUGIN_ID:
                version = _resolve_version(entry.get("version"), versions)
                if version:
                    return version
            elif isinstance(entry, str) and entry.startswith(f"{_BOOT_PLUGIN_ID}:"):
                return entry.split(":", 1)[1]

        for key in _BOOT_VERSION_KEYS:
            value = versions.get(key)
            if isinstance(value, str):
                return value
        return None


register_parser("gradle-version-catalog", VersionCatalogParser())
