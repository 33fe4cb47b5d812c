from pathlib import Path
import os

from bandep.adapters.errors import NoSourceError, PackageLoadError
from bandep.ports.package_validator import SourcePackage

SOURCE_SUFFIX = ".py"
INIT_FILE = "__init__.py"


def is_source_name(name: str) -> bool:
    return name.endswith(SOURCE_SUFFIX) and not name.startswith(".")


class FilesystemPackageValidator:
    def load(self, directory: Path) -> SourcePackage:
        try:
            with os.scandir(directory) as entries:
                candidates = [e for e in entries if is_source_name(e.name)]
                files = sorted(e.name for e in candidates if e.is_file())
                init_entries = [e for e in candidates if e.name == INIT_FILE]
        except OSError as e:
            raise PackageLoadError(
                f"cannot read package directory {directory}: {e.strerror or e}",
                details={"directory": str(directory)},
                cause=e,
            ) from e
        if init_entries and INIT_FILE not in files:
            raise PackageLoadError(
                f"{directory / INIT_FILE} is not a regular file",
                details={"directory": str(directory)},
            )
        if not files:
            raise NoSourceError(
                f"no Python source files in {directory}",
                details={"directory": str(directory)},
            )
        return SourcePackage(directory=directory, files=tuple(files))
