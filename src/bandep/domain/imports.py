from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class ImportRef:
    module: str
    line: int
    col: int = 1


@dataclass(frozen=True)
class DenyList:
    modules: frozenset[str] = frozenset()

    @classmethod
    def parse(cls, raw: str) -> DenyList:
        """Build a deny list from a comma separated string of module names."""
        return cls.of(raw.split(","))

    @classmethod
    def of(cls, entries: Iterable[str]) -> DenyList:
        return cls(frozenset(e.strip() for e in entries if e.strip()))

    def union(self, other: DenyList) -> DenyList:
        return DenyList(self.modules | other.modules)

    def __contains__(self, module: object) -> bool:
        return module in self.modules

    def __bool__(self) -> bool:
        return bool(self.modules)


def banned_imports(imports: Iterable[ImportRef], deny: DenyList) -> list[ImportRef]:
    # Exact names only; a.b does not ban a.bc or a.b.c.
    return [ref for ref in imports if ref.module in deny]
