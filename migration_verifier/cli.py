"""CLI entry point: verify-migration.

Usage:
    verify-migration                      # verify the current directory
    verify-migration /path/to/project
    verify-migration --compile --tests    # also run the build tool
"""

from __future__ import annotations

import dataclasses
import sys

import click

from migration_verifier.config import VerifierConfig
from migration_verifier.exceptions import BuildToolNotFoundError
from migration_verifier.log import setup_logging
from migration_verifier.report import ConsoleReporter
from migration_verifier.runner import MigrationVerifier


def _build_config(run_compile: bool, run_tests: bool, java: str | None) -> VerifierConfig:
    """Environment defaults, overridden by whatever was passed on the command line."""
    config = VerifierConfig.from_env()
    overrides: dict = {}
    if run_compile:
        overrides["run_compile"] = True
    if run_tests:
        overrides["run_tests"] = True
    if java:
        overrides["java_command"] = java
    return dataclasses.replace(config, **overrides)


@click.command()
@click.argument(
    "project_path",
    default=".",
    type=click.Path(exists=True, file_okay=False),
)
@click.option("--compile", "run_compile", is_flag=True, help="Also run a clean compile")
@click.option("--tests", "run_tests", is_flag=True, help="Also run the test suite")
@click.option("--java", default=None, help="java executable used for the version check")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging (stderr)")
def main(
    project_path: str,
    run_compile: bool,
    run_tests: bool,
    java: str | None,
    no_color: bool,
    verbose: bool,
) -> None:
    """Check a Maven or Gradle project for Spring Boot 4.x migration readiness."""
    setup_logging(verbose)

    config = _build_config(run_compile, run_tests, java)
    reporter = ConsoleReporter(color=False if no_color else None)
    verifier = MigrationVerifier(project_path, config=config, reporter=reporter)

    try:
        result = verifier.run()
    except BuildToolNotFoundError as e:
        reporter.fatal(str(e))
        sys.exit(1)

    sys.exit(result.exit_code)


if __name__ == "__main__":
    main()
