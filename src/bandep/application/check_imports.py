from __future__ import annotations

from pathlib import Path
import logging

from bandep.adapters.errors import SourceParseError
from bandep.application.resolve_packages import match_packages_in_fs
from bandep.domain.config import CheckConfig
from bandep.domain.diagnostics import (
    Diagnostic,
    FileLocation,
    PackageLocation,
    Severity,
)
from bandep.domain.imports import DenyList, banned_imports
from bandep.domain.result import Result
from bandep.ports.package_validator import PackageValidatorPort
from bandep.ports.source_parser import SourceParserPort

logger = logging.getLogger(__name__)


def _no_match(pattern: str) -> Diagnostic:
    return Diagnostic(
        code="PATTERN_NO_MATCH",
        rule="resolve.empty",
        severity=Severity.WARN,
        message=f'"{pattern}" matched no packages',
        location=PackageLocation(pattern),
        hint="Check --pkg; directories need at least one .py file to count.",
        upgradeable=True,
    )


def check_package(
    package: str, bans: DenyList, parser: SourceParserPort
) -> Diagnostic | None:
    """Check one package, returning the diagnostic for its first failure."""
    try:
        parsed = parser.parse_dir(Path(package))
    except SourceParseError as e:
        return Diagnostic(
            code="PARSE_FAILED",
            rule="check.parse",
            severity=Severity.ERROR,
            message=f"failed to parse pkg: {package}: {e}",
            location=PackageLocation(package),
            hint="Every .py file in the package must parse with the running Python.",
            details=e.details,
        )
    for filename, imports in parsed.items():
        hits = banned_imports(imports, bans)
        if not hits:
            continue
        modules = [ref.module for ref in hits]
        return Diagnostic(
            code="BANNED_IMPORT",
            rule="check.banned",
            severity=Severity.ERROR,
            message=f"{package} is using banned dependencies {', '.join(modules)}",
            location=FileLocation(f"{package}/{filename}", hits[0].line, hits[0].col),
            hint="Remove the import or drop it from the ban list.",
            details={"package": package, "file": filename, "imports": modules},
        )
    return None


def check(
    config: CheckConfig,
    parser: SourceParserPort,
    validator: PackageValidatorPort,
) -> Result[list[str]]:
    pattern = config.pattern
    if not pattern.is_recursive:
        packages = [pattern.text]
    else:
        resolved = match_packages_in_fs(pattern, validator)
        if resolved.errors:
            return resolved.strict(config.strict)
        packages = resolved.value or []
        if not packages:
            return Result(value=[], diagnostics=[_no_match(pattern.text)]).strict(
                config.strict
            )

    checked: list[str] = []
    for package in packages:
        logger.debug("checking %s", package)
        failure = check_package(package, config.bans, parser)
        if failure is not None:
            return Result(value=checked, diagnostics=[failure])
        checked.append(package)
    return Result(value=checked)
