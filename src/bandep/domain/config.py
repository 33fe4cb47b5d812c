from __future__ import annotations

from dataclasses import dataclass, field

from bandep.domain.imports import DenyList
from bandep.domain.pattern import PackagePattern

DEFAULT_PATTERN = "./..."


@dataclass(frozen=True)
class CheckConfig:
    pattern: PackagePattern = field(default_factory=lambda: PackagePattern(DEFAULT_PATTERN))
    bans: DenyList = field(default_factory=DenyList)
    strict: bool = False
