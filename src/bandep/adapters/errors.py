from dataclasses import dataclass
from typing import Any


@dataclass
class AdapterError(Exception):
    message: str
    details: dict[str, Any] | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        return self.message


class TraversalError(AdapterError):
    pass


class PackageLoadError(AdapterError):
    pass


class NoSourceError(PackageLoadError):
    pass


class SourceParseError(AdapterError):
    pass


class ConfigError(AdapterError):
    pass
