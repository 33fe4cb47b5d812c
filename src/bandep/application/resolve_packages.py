from __future__ import annotations

from pathlib import Path, PurePath
import logging
import os

from bandep.adapters.errors import NoSourceError, PackageLoadError, TraversalError
from bandep.domain.diagnostics import Diagnostic, FileLocation, Severity
from bandep.domain.pattern import PackagePattern
from bandep.domain.pruning import is_prunable
from bandep.domain.result import Result
from bandep.ports.package_validator import PackageValidatorPort

logger = logging.getLogger(__name__)


def _describe(error: OSError) -> str:
    return f"cannot read directory {error.filename}: {error.strerror or error}"


def walk_candidates(root: str) -> list[str]:
    """List every non-pruned directory under ``root``, root first.

    Directories come out depth-first, siblings in lexical order. Paths are
    cleaned; the walk reports the root exactly as given (``./io/``) while
    children are joined onto it, so every path needs cleaning before it
    can be matched.

    Only an unreadable root raises ``TraversalError``; an unreadable
    directory below it is logged and left out along with its subtree.
    """
    clean_root = os.path.normpath(root)

    def on_error(error: OSError) -> None:
        failed = os.path.normpath(os.fspath(error.filename or root))
        if failed == clean_root:
            raise TraversalError(
                _describe(error),
                details={"directory": str(error.filename)},
                cause=error,
            )
        logger.warning("skipping %s: %s", failed, error.strerror or error)

    found: list[str] = []
    for dirpath, dirnames, _ in os.walk(root, onerror=on_error):
        dirnames[:] = sorted(d for d in dirnames if not is_prunable(d))
        found.append(os.path.normpath(dirpath))
    return found


def match_packages_in_fs(
    pattern: PackagePattern, validator: PackageValidatorPort
) -> Result[list[str]]:
    """Resolve a pattern beginning ``./`` or ``../`` against the tree on disk.

    The scan starts at the directory before the first ``...``; that is
    enough since ``...`` is usually at the end of the pattern. A leading
    ``./`` is kept on every name, both for matching and in the returned
    package names, because path cleaning would drop it.
    """
    prefix = pattern.dot_prefix

    try:
        candidates = walk_candidates(pattern.root)
    except TraversalError as e:
        return Result(
            value=[],
            diagnostics=[
                Diagnostic(
                    code="TRAVERSAL_FAILED",
                    rule="resolve.traversal",
                    severity=Severity.ERROR,
                    message=f'"{pattern.text}": {e}',
                    location=FileLocation(pattern.root),
                    hint="Run from the directory the pattern is relative to.",
                    details=e.details,
                )
            ],
        )

    packages: list[str] = []
    for path in candidates:
        name = prefix + PurePath(path).as_posix()
        if not pattern.matches(name):
            continue
        try:
            validator.load(Path(path))
        except NoSourceError:
            logger.debug("skipping %s: no Python source files", name)
            continue
        except PackageLoadError as e:
            logger.warning("skipping %s: %s", name, e)
            continue
        packages.append(name)
    logger.debug("pattern %s matched %d packages", pattern.text, len(packages))
    return Result(value=packages)
