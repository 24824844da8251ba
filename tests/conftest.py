"""Shared pytest fixtures for migration-verifier tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

POM_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0">
    <modelVersion>4.0.0</modelVersion>
    <parent>
        <groupId>org.springframework.boot</groupId>
        <artifactId>spring-boot-starter-parent</artifactId>
        <version>{boot_version}</version>
        <relativePath/>
    </parent>
    <groupId>com.example</groupId>
    <artifactId>demo</artifactId>
    <version>0.0.1-SNAPSHOT</version>
    <dependencies>
{dependencies}
    </dependencies>
</project>
"""

JAVA_21 = 'openjdk version "21.0.1" 2023-10-17\nOpenJDK Runtime Environment (build 21.0.1+12-29)\n'


def maven_dependency(group_id: str, artifact_id: str) -> str:
    return (
        "        <dependency>\n"
        f"            <groupId>{group_id}</groupId>\n"
        f"            <artifactId>{artifact_id}</artifactId>\n"
        "        </dependency>"
    )


def write_pom(root: Path, boot_version: str = "4.0.0", artifacts: list[str] | None = None) -> Path:
    """Write a pom.xml; *artifacts* are "group:artifact" coordinates."""
    deps = []
    for coordinate in artifacts or ["org.springframework.boot:spring-boot-starter-webmvc"]:
        group_id, artifact_id = coordinate.split(":", 1)
        deps.append(maven_dependency(group_id, artifact_id))
    pom = root / "pom.xml"
    pom.write_text(POM_TEMPLATE.format(boot_version=boot_version, dependencies="\n".join(deps)))
    return pom


def write_source(root: Path, relative: str, content: str) -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def make_pom():
    return write_pom


@pytest.fixture
def make_source():
    return write_source


@pytest.fixture
def maven_project(tmp_path: Path) -> Path:
    """A clean Boot 4 Maven project with one application class."""
    write_pom(tmp_path)
    write_source(
        tmp_path,
        "src/main/java/com/example/DemoApplication.java",
        "package com.example;\n\n"
        "import org.springframework.boot.SpringApplication;\n"
        "import org.springframework.boot.autoconfigure.SpringBootApplication;\n\n"
        "@SpringBootApplication\n"
        "public class DemoApplication {\n"
        "    public static void main(String[] args) {\n"
        "        SpringApplication.run(DemoApplication.class, args);\n"
        "    }\n"
        "}\n",
    )
    write_source(tmp_path, "src/main/resources/application.properties", "spring.application.name=demo\n")
    return tmp_path


@pytest.fixture
def java_version():
    """Patch the ``java -version`` probe; yields the mock so tests can change the output."""
    with patch("migration_verifier.runtime.read_java_version_output", return_value=JAVA_21) as m:
        yield m
