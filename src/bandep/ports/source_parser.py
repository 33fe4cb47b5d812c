from pathlib import Path
from typing import Protocol

from bandep.domain.imports import ImportRef


class SourceParserPort(Protocol):
    def parse_dir(self, directory: Path) -> dict[str, list[ImportRef]]: ...
