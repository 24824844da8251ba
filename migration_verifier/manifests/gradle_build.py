"""Parser for Gradle build files (build.gradle / build.gradle.kts).

Handles both Groovy DSL and Kotlin DSL syntax:
  - implementation "group:artifact:version"
  - implementation("group:artifact")
  - id 'org.springframework.boot' version '3.5.2'
  - id("org.springframework.boot") version "4.0.0"
"""

from __future__ import annotations

import re
from pathlib import Path

from migration_verifier.manifests.models import ParsedManifest
from migration_verifier.manifests.registry import register_parser

# Gradle configuration names (not exhaustive, but covers the common ones)
_CONFIGS = (
    r"(?:implementation|api|compileOnly|compileOnlyApi|runtimeOnly|"
    r"annotationProcessor|kapt|ksp|developmentOnly|"
    r"testImplementation|testCompileOnly|testRuntimeOnly|"
    r"optional|provided|compile|runtime|testCompile|testRuntime|classpath|"
    r"\w+Implementation|\w+Api|\w+CompileOnly|\w+RuntimeOnly)"
)

# Match: configuration("group:artifact:version") or configuration "group:artifact"
_DEP_RE = re.compile(
    rf"{_CONFIGS}"
    r"\s*\(?\s*(?:platform\s*\(\s*)?"
    r"""["']"""                          # opening quote
    r"([A-Za-z0-9._-]+)"                # group
    r":"
    r"([A-Za-z0-9._-]+)"                # artifact
    r"(?::[^\"']*)?"                    # optional version
    r"""["']"""                          # closing quote
)

_BOOT_PLUGIN_ID = "org.springframework.boot"
_PLUGIN_VERSION_RE = re.compile(r"""version\s*[=(]?\s*["']([^"']+)["']""")
_GRADLE_PLUGIN_RE = re.compile(r"spring-boot-gradle-plugin:([A-Za-z0-9._+\-]+)")


def boot_version_from_script(content: str) -> str | None:
    """Spring Boot plugin version declared in a Gradle build script."""
    for line in content.splitlines():
        if _BOOT_PLUGIN_ID not in line:
            continue
        m = _PLUGIN_VERSION_RE.search(line)
        if m:
            return m.group(1)

    m = _GRADLE_PLUGIN_RE.search(content)
    if m:
        return m.group(1)
    return None


class GradleBuildParser:
    build_tool = "gradle"
    file_patterns = ["build.gradle", "build.gradle.kts"]

    def parse(self, file_path: Path, content: str) -> ParsedManifest:
        seen: set[str] = set()
        coordinates: list[str] = []

        for m in _DEP_RE.finditer(content):
            name = f"{m.group(1)}:{m.group(2)}"
            if name in seen:
                continue
            seen.add(name)
            coordinates.append(name)

        return ParsedManifest(
            source_file=file_path.name,
            build_tool=self.build_tool,
            content=content,
            coordinates=coordinates,
            boot_version=boot_version_from_script(content),
        )


register_parser("gradle", GradleBuildParser())
