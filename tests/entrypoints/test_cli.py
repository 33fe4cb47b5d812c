import json
from pathlib import Path

from typer.testing import CliRunner

from bandep.entrypoints.cli import app


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


def test_cli_passes_clean_tree():
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write(Path("app/mod.py"), "import os\n")
        result = runner.invoke(app, ["--ban", "evil.pkg"])
    assert result.exit_code == 0


def test_cli_fails_on_banned_import():
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write(Path("app/mod.py"), "import evil.pkg\n")
        result = runner.invoke(app, ["--pkg", "./...", "--ban", "other, evil.pkg"])
    assert result.exit_code == 1
    assert "./app is using banned dependencies evil.pkg" in result.output


def test_cli_warns_when_nothing_matches():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(app, ["--ban", "evil"])
        strict = runner.invoke(app, ["--ban", "evil", "--strict"])
    assert result.exit_code == 0
    assert 'warning: "./..." matched no packages' in result.output
    assert strict.exit_code == 1


def test_cli_json_output():
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write(Path("app/mod.py"), "import evil\n")
        result = runner.invoke(app, ["--ban", "evil", "--json"])
    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["result_schema_version"] == 1
    assert data["diagnostics"][0]["code"] == "BANNED_IMPORT"
    assert data["diagnostics"][0]["location"]["path"] == "./app/mod.py"


def test_cli_reads_config_file():
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write(Path("app/mod.py"), "import evil\n")
        _write(Path("bandep.yaml"), "ban: [evil]\n")
        result = runner.invoke(app, ["--config", "bandep.yaml"])
    assert result.exit_code == 1


def test_cli_reports_bad_config():
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write(Path("pyproject.toml"), "[tool.bandep]\nstrict = 'yes'\n")
        result = runner.invoke(app, [])
    assert result.exit_code == 1
    assert "error: invalid config" in result.output


def test_cli_version_and_help():
    runner = CliRunner()
    version = runner.invoke(app, ["-v"])
    assert version.exit_code == 0
    assert version.output.strip()
    help_result = runner.invoke(app, ["-h"])
    assert help_result.exit_code == 0
    assert "--ban" in help_result.output


def test_cli_ignores_unrelated_broken_pyproject():
    runner = CliRunner()
    with runner.isolated_filesystem():
        _write(Path("pyproject.toml"), "[project\n")
        _write(Path("app/mod.py"), "import os\n")
        result = runner.invoke(app, ["--ban", "evil"])
    assert result.exit_code == 0


def test_cli_json_includes_hint():
    runner = CliRunner()
    with runner.isolated_filesystem():
        result = runner.invoke(app, ["--json"])
    data = json.loads(result.stdout)
    assert data["diagnostics"][0]["code"] == "PATTERN_NO_MATCH"
    assert data["diagnostics"][0]["hint"]
