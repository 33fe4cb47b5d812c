from __future__ import annotations

from pathlib import Path
import ast

from bandep.adapters.errors import SourceParseError
from bandep.adapters.package.filesystem import is_source_name
from bandep.domain.imports import ImportRef


def extract_imports(source: str | bytes, filename: str = "<unknown>") -> list[ImportRef]:
    hits: list[ImportRef] = []
    tree = ast.parse(source, filename=filename)
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                hits.append(ImportRef(alias.name, node.lineno, node.col_offset + 1))
        elif isinstance(node, ast.ImportFrom):
            module = "." * node.level + (node.module or "")
            hits.append(ImportRef(module, node.lineno, node.col_offset + 1))
    hits.sort(key=lambda ref: (ref.line, ref.col))
    return hits


class AstSourceParser:
    def parse_dir(self, directory: Path) -> dict[str, list[ImportRef]]:
        try:
            names = sorted(
                p.name for p in directory.iterdir() if p.is_file() and is_source_name(p.name)
            )
        except OSError as e:
            raise SourceParseError(str(e), cause=e) from e
        parsed: dict[str, list[ImportRef]] = {}
        for name in names:
            path = directory / name
            try:
                parsed[name] = extract_imports(path.read_bytes(), filename=str(path))
            except SyntaxError as e:
                raise SourceParseError(
                    f"{path}:{e.lineno}: {e.msg}", details={"file": str(path)}, cause=e
                ) from e
            except (OSError, UnicodeDecodeError, ValueError) as e:
                raise SourceParseError(f"{path}: {e}", details={"file": str(path)}, cause=e) from e
        return parsed
