"""Pattern tables for the Spring Boot 4.x readiness checks.

Each check walks a list of ``RuleGroup`` entries. Within a group the
rules are tried in order and the first hit produces the finding; when
nothing matches, the group emits its ``absent_message`` as PASS (or
nothing, if it has none). Adding a pattern never touches control flow.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

from migration_verifier.models import Status

TARGET_BOOT_PREFIX = "4."
PRIOR_BOOT_PREFIX = "3.5."


class Scope(str, enum.Enum):
    MANIFESTS = "manifests"  # pom.xml, build.gradle(.kts), gradle/libs.versions.toml
    SOURCES = "sources"  # *.java / *.kt under the source dir
    RESOURCES = "resources"  # every file under the resources dir


SOURCE_SUFFIXES = (".java", ".kt")


@dataclass(frozen=True)
class PatternRule:
    label: str
    regex: str
    scope: Scope
    status: Status
    message: str

    @property
    def pattern(self) -> re.Pattern[str]:
        return re.compile(self.regex, re.MULTILINE)


@dataclass(frozen=True)
class RuleGroup:
    rules: tuple[PatternRule, ...]
    absent_message: str | None = None


def _literal(text: str) -> str:
    return re.escape(text)


def _bare_artifact(artifact: str) -> str:
    """Match *artifact* but not a longer artifact sharing its prefix."""
    return re.escape(artifact) + r"(?![\w-])"


# ── Deprecated starters ─────────────────────────────────────────────────

# (label, regex, replacement)
_STARTER_RENAMES: list[tuple[str, str, str]] = [
    ("spring-boot-starter-web", _bare_artifact("spring-boot-starter-web"),
     "spring-boot-starter-webmvc"),
    ("spring-boot-starter-web-services", _literal("spring-boot-starter-web-services"),
     "spring-boot-starter-webservices"),
    ("spring-boot-starter-oauth2-client", _bare_artifact("spring-boot-starter-oauth2-client"),
     "spring-boot-starter-security-oauth2-client"),
    ("spring-boot-starter-oauth2-resource-server",
     _bare_artifact("spring-boot-starter-oauth2-resource-server"),
     "spring-boot-starter-security-oauth2-resource-server"),
    ("spring-boot-starter-aop", _bare_artifact("spring-boot-starter-aop"),
     "spring-boot-starter-aspectj"),
    ("spring-boot-starter-undertow", _literal("spring-boot-starter-undertow"),
     "spring-boot-starter-tomcat or spring-boot-starter-jetty"),
]

DEPRECATED_STARTERS: list[RuleGroup] = [
    RuleGroup((
        PatternRule(
            label=label,
            regex=regex,
            scope=Scope.MANIFESTS,
            status=Status.WARN,
            message=f"Found deprecated starter pattern: {label} - consider updating to {replacement}",
        ),
    ))
    for label, regex, replacement in _STARTER_RENAMES
]

MIGRATION_BRIDGES: list[RuleGroup] = [
    RuleGroup((
        PatternRule(
            label=label,
            regex=_bare_artifact(label),
            scope=Scope.MANIFESTS,
            status=Status.BRIDGE,
            message=f"Using {label} ({kind})",
        ),
    ))
    for label, kind in [
        ("spring-boot-starter-classic", "migration bridge"),
        ("spring-boot-starter-test-classic", "migration bridge"),
        ("spring-boot-jackson2", "Jackson 2 compatibility bridge"),
    ]
]

# ── Old imports ─────────────────────────────────────────────────────────

OLD_IMPORTS: list[RuleGroup] = [
    RuleGroup((
        PatternRule(
            label="com.fasterxml.jackson.databind",
            regex=_literal("com.fasterxml.jackson.databind"),
            scope=Scope.SOURCES,
            status=Status.WARN,
            message="Found Jackson 2 databind imports - migrate to tools.jackson.databind",
        ),
    )),
    RuleGroup((
        PatternRule(
            label="org.springframework.lang.Nullable",
            regex=_literal("org.springframework.lang.Nullable"),
            scope=Scope.SOURCES,
            status=Status.WARN,
            message=(
                "Found org.springframework.lang.Nullable - "
                "migrate to org.jspecify.annotations.Nullable"
            ),
        ),
    )),
    RuleGroup(
        (
            PatternRule(
                label="org.springframework.boot.test.mock.mockito.MockBean",
                regex=_literal("org.springframework.boot.test.mock.mockito.MockBean"),
                scope=Scope.SOURCES,
                status=Status.WARN,
                message="Found old @MockBean import - migrate to @MockitoBean",
            ),
        ),
        absent_message="No old @MockBean imports found",
    ),
    RuleGroup((
        PatternRule(
            label="org.springframework.boot.autoconfigure.domain.EntityScan",
            regex=_literal("org.springframework.boot.autoconfigure.domain.EntityScan"),
            scope=Scope.SOURCES,
            status=Status.WARN,
            message=(
                "Found old @EntityScan import - migrate to "
                "org.springframework.boot.persistence.autoconfigure.EntityScan"
            ),
        ),
    )),
    RuleGroup((
        PatternRule(
            label="javax.*",
            regex=r"^\s*import\s+(?:static\s+)?javax\.(?!(?:crypto|net|xml)\.)",
            scope=Scope.SOURCES,
            status=Status.WARN,
            message="Found javax.* imports - ensure migration to jakarta.*",
        ),
    )),
]

# ── Deprecated properties ───────────────────────────────────────────────

# (label, regex, replacement)
_PROPERTY_RENAMES: list[tuple[str, str, str]] = [
    ("spring.dao.exceptiontranslation", _literal("spring.dao.exceptiontranslation"),
     "spring.persistence.exceptiontranslation"),
    ("spring.session.redis.", _literal("spring.session.redis."),
     "spring.session.data.redis."),
    ("spring.session.mongodb.", _literal("spring.session.mongodb."),
     "spring.session.data.mongodb."),
    ("management.tracing.enabled", _literal("management.tracing.enabled") + r"(?!\.)",
     "management.tracing.export.enabled"),
    ("management.health.mongo.enabled", _literal("management.health.mongo.enabled"),
     "management.health.mongodb.enabled"),
    ("management.metrics.mongo.", _literal("management.metrics.mongo."),
     "management.metrics.mongodb."),
    ("spring.kafka.retry.topic.backoff.random",
     _literal("spring.kafka.retry.topic.backoff.random"),
     "spring.kafka.retry.topic.backoff.jitter"),
]

DEPRECATED_PROPERTIES: list[RuleGroup] = [
    RuleGroup((
        PatternRule(
            label=label,
            regex=regex,
            scope=Scope.RESOURCES,
            status=Status.WARN,
            message=f"Found deprecated property: {label} (replace with {replacement})",
        ),
    ))
    for label, regex, replacement in _PROPERTY_RENAMES
]

# ── Removed features ────────────────────────────────────────────────────

REMOVED_FEATURES: list[RuleGroup] = [
    RuleGroup(
        (
            PatternRule(
                label="undertow",
                regex=_literal("undertow"),
                scope=Scope.MANIFESTS,
                status=Status.FAIL,
                message="Undertow dependency found - NOT SUPPORTED in Boot 4. Use Tomcat or Jetty.",
            ),
        ),
        absent_message="No Undertow dependency (removed in Boot 4)",
    ),
    RuleGroup(
        (
            PatternRule(
                label="junit:junit",
                regex=r"junit:junit\b",
                scope=Scope.MANIFESTS,
                status=Status.FAIL,
                message="JUnit 4 dependency found - NOT SUPPORTED. Migrate to JUnit 5/6.",
            ),
            PatternRule(
                label="import org.junit.Test",
                regex=r"^\s*import\s+org\.junit\.Test\b",
                scope=Scope.SOURCES,
                status=Status.FAIL,
                message="JUnit 4 imports found - migrate to JUnit Jupiter",
            ),
        ),
        absent_message="No JUnit 4 detected",
    ),
    RuleGroup((
        PatternRule(
            label="spockframework",
            regex=_literal("spockframework"),
            scope=Scope.MANIFESTS,
            status=Status.WARN,
            message="Spock Framework found - verify Groovy 5 compatibility",
        ),
    )),
]
