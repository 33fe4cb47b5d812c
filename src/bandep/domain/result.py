from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Generic, TypeVar

from bandep.domain.diagnostics import Diagnostic, Severity

T = TypeVar("T")


def _new_diagnostics() -> list[Diagnostic]:
    return []


def _upgrade(diagnostic: Diagnostic) -> Diagnostic:
    if diagnostic.severity == Severity.WARN and diagnostic.upgradeable:
        return replace(diagnostic, severity=Severity.ERROR)
    return diagnostic


@dataclass
class Result(Generic[T]):
    value: T | None = None
    diagnostics: list[Diagnostic] = field(default_factory=_new_diagnostics)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def exit_code(self) -> int:
        return 1 if self.errors else 0

    def strict(self, enabled: bool = True) -> Result[T]:
        """Return a copy with upgradeable warnings raised to errors."""
        if not enabled:
            return self
        return Result(
            value=self.value,
            diagnostics=[_upgrade(d) for d in self.diagnostics],
        )
