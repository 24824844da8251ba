"""Parser for Maven pom.xml files."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from pathlib import Path

from migration_verifier.manifests.models import ParsedManifest
from migration_verifier.manifests.registry import register_parser

_NS = "{http://maven.apache.org/POM/4.0.0}"

_PROP_RE = re.compile(r"\$\{([^}]+)\}")
_VERSION_TAG_RE = re.compile(r"<version>\s*([^<]*?)\s*</version>")

_BOOT_PARENT = "spring-boot-starter-parent"
_BOOT_BOM = "spring-boot-dependencies"


def _resolve_props(value: str, props: dict[str, str]) -> str:
    """Replace ${property} placeholders with values from <properties>."""

    def _replace(m: re.Match) -> str:
        key = m.group(1)
        return props.get(key, m.group(0))  # keep original if not found

    return _PROP_RE.sub(_replace, value)


def _text(element: ET.Element | None) -> str | None:
    if element is None:
        return None
    return element.text.strip() if element.text else None


def boot_version_from_text(content: str) -> str | None:
    """Text heuristic for POMs that do not parse as XML.

    Looks for the first <version> within two lines after the
    spring-boot-starter-parent artifactId.
    """
    lines = content.splitlines()
    for i, line in enumerate(lines):
        if _BOOT_PARENT not in line:
            continue
        for candidate in lines[i : i + 3]:
            m = _VERSION_TAG_RE.search(candidate)
            if m:
                return m.group(1)
    return None


class MavenPomParser:
    build_tool = "maven"
    file_patterns = ["pom.xml"]

    def parse(self, file_path: Path, content: str) -> ParsedManifest:
        manifest = ParsedManifest(
            source_file=file_path.name,
            build_tool=self.build_tool,
            content=content,
        )
        try:
            root = ET.fromstring(content)
        except ET.ParseError:
            manifest.boot_version = boot_version_from_text(content)
            return manifest

        props = self._extract_properties(root)
        manifest.coordinates = self._extract_coordinates(root)
        manifest.boot_version = self._extract_boot_version(root, props)
        return manifest

    @staticmethod
    def _extract_coordinates(root: ET.Element) -> list[str]:
        coordinates: list[str] = []
        # Try both namespaced and non-namespaced
        for ns in (_NS, ""):
            for dep_el in root.iter(f"{ns}dependency"):
                group_id = _text(dep_el.find(f"{ns}groupId"))
                artifact_id = _text(dep_el.find(f"{ns}artifactId"))
                if not artifact_id:
                    continue
                name = f"{group_id}:{artifact_id}" if group_id else artifact_id
                if name not in coordinates:
                    coordinates.append(name)
        return coordinates

    @staticmethod
    def _extract_boot_version(root: ET.Element, props: dict[str, str]) -> str | None:
        for ns in (_NS, ""):
            parent = root.find(f"{ns}parent")
            if parent is not None and _text(parent.find(f"{ns}artifactId")) == _BOOT_PARENT:
                version = _text(parent.find(f"{ns}version"))
                if version:
                    return _resolve_props(version, props)

        # BOM import in <dependencyManagement>
        for ns in (_NS, ""):
            for dep_el in root.iter(f"{ns}dependency"):
                if _text(dep_el.find(f"{ns}artifactId")) != _BOOT_BOM:
                    continue
                version = _text(dep_el.find(f"{ns}version"))
                if version:
                    return _resolve_props(version, props)

        return props.get("spring-boot.version")

    @staticmethod
    def _extract_properties(root: ET.Element) -> dict[str, str]:
        """Extract <properties> key-value pairs from the POM root."""
        props: dict[str, str] = {}
        for ns in (_NS, ""):
            props_el = root.find(f"{ns}properties")
            if props_el is not None:
                for child in props_el:
                    # Strip namespace from tag name
                    tag = child.tag.split("}")[-1] if "}" in child.tag else child.tag
                    if child.text:
                        props[tag] = child.text.strip()
        return props


register_parser("maven-pom", MavenPomParser())
