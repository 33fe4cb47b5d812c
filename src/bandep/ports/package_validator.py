from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class SourcePackage:
    directory: Path
    files: tuple[str, ...]


class PackageValidatorPort(Protocol):
    def load(self, directory: Path) -> SourcePackage:
        """Load ``directory`` as a package.

        Raises ``NoSourceError`` when it holds no source files and
        ``PackageLoadError`` for any other failure.
        """
        ...
