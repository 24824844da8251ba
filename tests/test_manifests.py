"""Tests for manifest discovery and Spring Boot version extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from migration_verifier.manifests import load_manifests
from migration_verifier.manifests.gradle_build import GradleBuildParser, boot_version_from_script
from migration_verifier.manifests.maven_pom import MavenPomParser, boot_version_from_text
from migration_verifier.manifests.registry import PARSER_REGISTRY, discover_manifests
from migration_verifier.manifests.version_catalog import VersionCatalogParser

# ── Parser registry ──────────────────────────────────────────────────────


class TestRegistry:
    def test_all_parsers_registered(self):
        assert {"maven-pom", "gradle", "gradle-version-catalog"} <= set(PARSER_REGISTRY)

    def test_discover_empty_project(self, tmp_path):
        assert discover_manifests(tmp_path) == []

    def test_discover_root_only(self, tmp_path):
        (tmp_path / "pom.xml").write_text("<project/>")
        module = tmp_path / "module-a"
        module.mkdir()
        (module / "pom.xml").write_text("<project/>")
        files = [f for _, f in discover_manifests(tmp_path)]
        assert files == [tmp_path / "pom.xml"]

    def test_discover_gradle_and_catalog(self, tmp_path):
        (tmp_path / "build.gradle.kts").write_text("")
        (tmp_path / "gradle").mkdir()
        (tmp_path / "gradle" / "libs.versions.toml").write_text("[versions]\n")
        tools = [p.build_tool for p, _ in discover_manifests(tmp_path)]
        assert tools == ["gradle", "gradle"]


# ── MavenPomParser ───────────────────────────────────────────────────────


class TestMavenPomParser:
    @pytest.fixture
    def parser(self):
        return MavenPomParser()

    def test_parent_version(self, parser, tmp_path, make_pom):
        pom = make_pom(tmp_path, boot_version="3.5.2")
        parsed = parser.parse(pom, pom.read_text())
        assert parsed.boot_version == "3.5.2"
        assert parsed.build_tool == "maven"

    def test_coordinates(self, parser, tmp_path, make_pom):
        pom = make_pom(tmp_path, artifacts=["junit:junit", "io.undertow:undertow-core"])
        parsed = parser.parse(pom, pom.read_text())
        assert parsed.coordinates == ["junit:junit", "io.undertow:undertow-core"]

    def test_non_namespaced(self, parser, tmp_path):
        pom = tmp_path / "pom.xml"
        pom.write_text(
            "<project><parent><groupId>org.springframework.boot</groupId>"
            "<artifactId>spring-boot-starter-parent</artifactId>"
            "<version>4.0.1</version></parent></project>"
        )
        assert parser.parse(pom, pom.read_text()).boot_version == "4.0.1"

    def test_property_placeholder(self, parser, tmp_path):
        pom = tmp_path / "pom.xml"
        pom.write_text(
            "<project><properties><boot.version>3.4.1</boot.version></properties>"
            "<parent><artifactId>spring-boot-starter-parent</artifactId>"
            "<version>${boot.version}</version></parent></project>"
        )
        assert parser.parse(pom, pom.read_text()).boot_version == "3.4.1"

    def test_bom_import(self, parser, tmp_path):
        pom = tmp_path / "pom.xml"
        pom.write_text(
            "<project><dependencyManagement><dependencies><dependency>"
            "<groupId>org.springframework.boot</groupId>"
            "<artifactId>spring-boot-dependencies</artifactId>"
            "<version>4.0.0</version><type>pom</type><scope>import</scope>"
            "</dependency></dependencies></dependencyManagement></project>"
        )
        assert parser.parse(pom, pom.read_text()).boot_version == "4.0.0"

    def test_other_parent_ignored(self, parser, tmp_path):
        pom = tmp_path / "pom.xml"
        pom.write_text(
            "<project><parent><artifactId>company-parent</artifactId>"
            "<version>12</version></parent></project>"
        )
        assert parser.parse(pom, pom.read_text()).boot_version is None

    def test_malformed_xml_falls_back_to_text(self, parser, tmp_path):
        pom = tmp_path / "pom.xml"
        pom.write_text(
            "<project>\n<parent>\n"
            "<artifactId>spring-boot-starter-parent</artifactId>\n"
            "<version>3.5.0</version>\n"
            "</parent>\n<broken>\n"
        )
        parsed = parser.parse(pom, pom.read_text())
        assert parsed.boot_version == "3.5.0"
        assert parsed.coordinates == []

    def test_text_fallback_window(self):
        content = "spring-boot-starter-parent\n\n\n<version>3.5.0</version>\n"
        assert boot_version_from_text(content) is None


# ── GradleBuildParser ────────────────────────────────────────────────────


class TestGradleBuildParser:
    @pytest.fixture
    def parser(self):
        return GradleBuildParser()

    def test_groovy_plugin_version(self):
        script = (
            "plugins {\n"
            "    id 'java'\n"
            "    id 'org.springframework.boot' version '3.5.2'\n"
            "    id 'io.spring.dependency-management' version '1.1.7'\n"
            "}\n"
        )
        assert boot_version_from_script(script) == "3.5.2"

    def test_kotlin_plugin_version(self):
        script = 'plugins {\n    id("org.springframework.boot") version "4.0.0"\n}\n'
        assert boot_version_from_script(script) == "4.0.0"

    def test_buildscript_classpath(self):
        script = (
            "buildscript {\n  dependencies {\n"
            '    classpath "org.springframework.boot:spring-boot-gradle-plugin:3.2.0"\n'
            "  }\n}\n"
        )
        assert boot_version_from_script(script) == "3.2.0"

    def test_no_version(self):
        script = "dependencies {\n    implementation 'org.springframework.boot:spring-boot-starter-webmvc'\n}\n"
        assert boot_version_from_script(script) is None

    def test_coordinates(self, parser, tmp_path):
        f = tmp_path / "build.gradle.kts"
        content = (
            "dependencies {\n"
            '    implementation("org.springframework.boot:spring-boot-starter-web")\n'
            '    implementation(platform("org.springframework.cloud:spring-cloud-dependencies:2025.0.0"))\n'
            '    testImplementation("junit:junit:4.13.2")\n'
            '    testImplementation("junit:junit:4.13.2")\n'
            "}\n"
        )
        parsed = parser.parse(f, content)
        assert parsed.coordinates == [
            "org.springframework.boot:spring-boot-starter-web",
            "org.springframework.cloud:spring-cloud-dependencies",
            "junit:junit",
        ]


# ── VersionCatalogParser ─────────────────────────────────────────────────


class TestVersionCatalogParser:
    @pytest.fixture
    def parser(self):
        return VersionCatalogParser()

    def test_plugin_version_ref(self, parser, tmp_path):
        content = (
            '[versions]\nspring-boot = "3.5.3"\n\n'
            '[plugins]\nspring-boot = { id = "org.springframework.boot", version.ref = "spring-boot" }\n'
        )
        parsed = parser.parse(tmp_path / "libs.versions.toml", content)
        assert parsed.boot_version == "3.5.3"
        assert parsed.source_file == "gradle/libs.versions.toml"

    def test_versions_key_only(self, parser, tmp_path):
        content = '[versions]\nspringBoot = "4.0.0"\n'
        assert parser.parse(tmp_path / "libs.versions.toml", content).boot_version == "4.0.0"

    def test_libraries(self, parser, tmp_path):
        content = (
            "[libraries]\n"
            'junit4 = "junit:junit:4.13.2"\n'
            'jackson2 = { module = "org.springframework.boot:spring-boot-jackson2" }\n'
            'spock = { group = "org.spockframework", name = "spock-core", version = "2.4" }\n'
        )
        parsed = parser.parse(tmp_path / "libs.versions.toml", content)
        assert parsed.coordinates == [
            "junit:junit",
            "org.springframework.boot:spring-boot-jackson2",
            "org.spockframework:spock-core",
        ]

    def test_invalid_toml(self, parser, tmp_path):
        parsed = parser.parse(tmp_path / "libs.versions.toml", "[versions\n")
        assert parsed.boot_version is None
        assert parsed.coordinates == []


# ── load_manifests ───────────────────────────────────────────────────────


class TestLoadManifests:
    def test_gradle_script_wins_over_catalog(self, tmp_path: Path):
        (tmp_path / "build.gradle").write_text("plugins { id 'org.springframework.boot' version '4.0.0' }\n")
        (tmp_path / "gradle").mkdir()
        (tmp_path / "gradle" / "libs.versions.toml").write_text('[versions]\nspring-boot = "3.5.0"\n')
        manifests = load_manifests(tmp_path)
        assert [m.source_file for m in manifests.manifests] == ["build.gradle", "gradle/libs.versions.toml"]
        assert manifests.boot_version("gradle") == "4.0.0"

    def test_catalog_used_when_script_has_no_version(self, tmp_path: Path):
        (tmp_path / "build.gradle.kts").write_text("plugins { alias(libs.plugins.spring.boot) }\n")
        (tmp_path / "gradle").mkdir()
        (tmp_path / "gradle" / "libs.versions.toml").write_text('[versions]\nspring-boot = "3.5.0"\n')
        assert load_manifests(tmp_path).boot_version("gradle") == "3.5.0"

    def test_boot_version_scoped_to_build_tool(self, tmp_path: Path, make_pom):
        make_pom(tmp_path, boot_version="3.5.1")
        manifests = load_manifests(tmp_path)
        assert manifests.boot_version("maven") == "3.5.1"
        assert manifests.boot_version("gradle") is None

    def test_searchable_text_includes_coordinates(self, tmp_path: Path, make_pom):
        make_pom(tmp_path, artifacts=["junit:junit"])
        text = load_manifests(tmp_path).searchable_text
        assert "<artifactId>junit</artifactId>" in text
        assert "junit:junit" in text
