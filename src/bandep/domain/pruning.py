from __future__ import annotations

RESERVED_DIR_NAMES = frozenset({"testdata", "vendor"})


def is_prunable(name: str) -> bool:
    """Report whether a directory tree should be skipped by its base name.

    Avoids ``.foo``, ``_foo``, ``testdata`` and ``vendor`` trees, but not
    ``.`` or ``..``.
    """
    if name in (".", ".."):
        return False
    if name.startswith((".", "_")):
        return True
    return name in RESERVED_DIR_NAMES
