"""Build tool detection from marker files in the project root."""

from __future__ import annotations

import logging
from pathlib import Path

from migration_verifier.exceptions import BuildToolNotFoundError
from migration_verifier.models import BuildTool

logger = logging.getLogger(__name__)

# Detection rules: (marker_file, build_tool, wrapper_script, global_binary)
# Ordered by priority
DETECTION_RULES: list[tuple[str, str, str, str]] = [
    ("pom.xml", "maven", "mvnw", "mvn"),
    ("build.gradle", "gradle", "gradlew", "gradle"),
    ("build.gradle.kts", "gradle", "gradlew", "gradle"),
    ("settings.gradle", "gradle", "gradlew", "gradle"),
    ("settings.gradle.kts", "gradle", "gradlew", "gradle"),
]


class BuildToolDetector:
    """
    Detect the build tool from project structure.

    Maven wins over Gradle when both are present. The invocation command
    prefers the project's wrapper script and falls back to the globally
    installed binary.
    """

    def detect(self, project_path: str | Path) -> BuildTool:
        """
        Detect the build tool.

        Raises:
            BuildToolNotFoundError: no marker file is present.
        """
        root = Path(project_path)

        for marker_file, build_tool, wrapper, binary in DETECTION_RULES:
            if (root / marker_file).is_file():
                command = f"./{wrapper}" if (root / wrapper).is_file() else binary
                logger.info("Detected build tool: %s (found %s)", build_tool, marker_file)
                return BuildTool(name=build_tool, marker=marker_file, command=command)

        logger.debug("No build tool detected in %s", project_path)
        raise BuildToolNotFoundError(str(project_path))
