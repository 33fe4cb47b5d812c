from __future__ import annotations

from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from typing import Any, TypeVar

from bandep.domain.diagnostics import Diagnostic, Location
from bandep.domain.result import Result

T = TypeVar("T")

RESULT_SCHEMA_VERSION = 1


def _serialize_location(location: Location | None) -> dict[str, Any] | None:
    if location is None:
        return None
    if is_dataclass(location):
        return asdict(location)
    return {"kind": str(getattr(location, "kind", "unknown"))}


def serialize_diagnostic(diag: Diagnostic) -> dict[str, Any]:
    return {
        "id": diag.id,
        "code": diag.code,
        "rule": diag.rule,
        "severity": diag.severity.value,
        "message": diag.message,
        "hint": diag.hint,
        "details": diag.details,
        "location": _serialize_location(diag.location),
    }


def serialize_result(
    result: Result[T],
    command: str,
    args: list[str],
) -> dict[str, Any]:
    return {
        "result_schema_version": RESULT_SCHEMA_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "command": command,
        "args": args,
        "exit_code": result.exit_code,
        "packages": result.value,
        "diagnostics": [serialize_diagnostic(d) for d in result.diagnostics],
    }
