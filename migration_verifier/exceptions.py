"""Custom exceptions for migration-verifier."""


class VerifierError(Exception):
    """Base exception for all verifier errors."""


class BuildToolNotFoundError(VerifierError):
    """Raised when neither a Maven nor a Gradle build file is present."""

    def __init__(self, project_path: str):
        self.project_path = project_path
        super().__init__("No pom.xml or build.gradle found")


class JavaVersionError(VerifierError):
    """Raised when ``java -version`` cannot be executed."""
