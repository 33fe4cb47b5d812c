import pytest

from bandep.adapters.errors import SourceParseError
from bandep.adapters.parser.python_ast import AstSourceParser, extract_imports
from bandep.domain.imports import ImportRef


def test_extract_imports_covers_import_forms():
    source = (
        "import a.b, c as d\n"
        "from e.f import g\n"
        "from . import h\n"
        "from ..i import j\n"
        "def fn():\n"
        "    import k\n"
        "try:\n"
        "    import l\n"
        "except ImportError:\n"
        "    pass\n"
    )
    assert [ref.module for ref in extract_imports(source)] == [
        "a.b", "c", "e.f", ".", "..i", "k", "l",
    ]


def test_extract_imports_records_lines():
    assert extract_imports("\n\nimport x\n") == [ImportRef("x", 3)]


def test_parse_dir_reads_only_python_files(tmp_path):
    (tmp_path / "b.py").write_text("import os\n")
    (tmp_path / "a.py").write_text("import sys\n")
    (tmp_path / "notes.txt").write_text("import nope")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c.py").write_text("import json\n")
    parsed = AstSourceParser().parse_dir(tmp_path)
    assert list(parsed) == ["a.py", "b.py"]
    assert parsed["a.py"] == [ImportRef("sys", 1)]


def test_parse_dir_honours_encoding_cookie(tmp_path):
    (tmp_path / "latin.py").write_bytes(
        b"# -*- coding: latin-1 -*-\nname = '\xe9'\nimport os\n"
    )
    assert AstSourceParser().parse_dir(tmp_path)["latin.py"] == [ImportRef("os", 3)]


def test_parse_dir_raises_on_syntax_error(tmp_path):
    (tmp_path / "bad.py").write_text("import\n")
    with pytest.raises(SourceParseError) as excinfo:
        AstSourceParser().parse_dir(tmp_path)
    assert "bad.py" in str(excinfo.value)


def test_parse_dir_raises_on_missing_directory(tmp_path):
    with pytest.raises(SourceParseError):
        AstSourceParser().parse_dir(tmp_path / "missing")


def test_extract_imports_records_columns():
    source = "def fn():\n    from evil import thing\n"
    assert extract_imports(source) == [ImportRef("evil", 2, 5)]
