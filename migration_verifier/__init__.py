"""migration-verifier: Spring Boot 4.x migration readiness checks."""

__version__ = "0.1.0"

from migration_verifier.config import VerifierConfig
from migration_verifier.exceptions import (
    BuildToolNotFoundError,
    JavaVersionError,
    VerifierError,
)
from migration_verifier.models import (
    BuildTool,
    Finding,
    Status,
    Tally,
    VerificationResult,
)
from migration_verifier.runner import MigrationVerifier

__all__ = [
    "BuildTool",
    "BuildToolNotFoundError",
    "Finding",
    "JavaVersionError",
    "MigrationVerifier",
    "Status",
    "Tally",
    "VerificationResult",
    "VerifierConfig",
    "VerifierError",
]
