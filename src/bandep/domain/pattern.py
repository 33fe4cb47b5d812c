from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property
import posixpath
import re

WILDCARD = "..."

_ANY = ".*"


def split_pattern(pattern: str) -> list[str]:
    """Split a package pattern into the literal text around each wildcard.

    The result always has one more element than there are wildcards, so
    ``"a/.../b"`` becomes ``["a/", "/b"]`` and ``"a"`` becomes ``["a"]``.
    """
    return pattern.split(WILDCARD)


def compile_pattern(literals: list[str]) -> re.Pattern[str]:
    parts = [re.escape(literal) for literal in literals]
    # foo/... matches foo too.
    trailing_optional = (
        len(literals) > 1 and literals[-1] == "" and literals[-2].endswith("/")
    )
    if trailing_optional:
        parts[-2] = re.escape(literals[-2][:-1])
        body = _ANY.join(parts[:-1]) + f"(?:/{_ANY})?"
    else:
        body = _ANY.join(parts)
    return re.compile(body, re.DOTALL)


def match_pattern(pattern: str) -> Callable[[str], bool]:
    """Return a predicate reporting whether a name matches ``pattern``.

    Pattern is a limited glob in which ``...`` means any string, path
    separators included, and there is no other special syntax.
    """
    regex = compile_pattern(split_pattern(pattern))

    def match(name: str) -> bool:
        return regex.fullmatch(name) is not None

    return match


@dataclass(frozen=True)
class PackagePattern:
    text: str

    @property
    def literals(self) -> list[str]:
        return split_pattern(self.text)

    @property
    def is_recursive(self) -> bool:
        return WILDCARD in self.text

    @property
    def static_prefix(self) -> str:
        return self.literals[0]

    @property
    def root(self) -> str:
        directory, _ = posixpath.split(self.static_prefix)
        if not directory:
            return "."
        return directory

    @property
    def dot_prefix(self) -> str:
        return "./" if self.text.startswith("./") else ""

    @cached_property
    def predicate(self) -> Callable[[str], bool]:
        return match_pattern(self.text)

    def matches(self, name: str) -> bool:
        return self.predicate(name)
