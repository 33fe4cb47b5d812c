from importlib import metadata
from pathlib import Path
import json as _json
import logging
import sys

import typer

from bandep.adapters.errors import ConfigError
from bandep.adapters.package.filesystem import FilesystemPackageValidator
from bandep.adapters.parser.python_ast import AstSourceParser
from bandep.application.check_imports import check
from bandep.application.config_loading import (
    build_config,
    discover_settings,
    load_config_file,
)
from bandep.application.result_serialization import serialize_result
from bandep.domain.diagnostics import Diagnostic, FileLocation, Severity
from bandep.domain.result import Result

app = typer.Typer(
    add_completion=False,
    help="Enforce banned dependency imports.",
    context_settings={"help_option_names": ["-h", "--help"]},
)

_PREFIXES = {Severity.ERROR: "error", Severity.WARN: "warning"}


def _version() -> str:
    try:
        return metadata.version("bandep")
    except metadata.PackageNotFoundError:
        return "dev"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(_version())
        raise typer.Exit()


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _report(result: Result[list[str]]) -> None:
    for d in result.diagnostics:
        prefix = _PREFIXES.get(d.severity)
        if prefix:
            typer.echo(f"{prefix}: {d.message}", err=True)


@app.command()
def bandep(
    pkg: str | None = typer.Option(
        None, "--pkg", help='Package to check, "./..." when unset.'
    ),
    ban: str = typer.Option(
        "", "--ban", metavar="BAN1,BAN2,...", help="Import paths to ban (comma separated list)."
    ),
    config: Path | None = typer.Option(
        None, "--config", help="YAML or TOML file with pkg, ban and strict settings."
    ),
    strict: bool | None = typer.Option(
        None, "--strict", help="Fail when the package pattern matches nothing."
    ),
    json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    debug: bool = typer.Option(False, "--debug", help="Log every directory visited."),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show application version.",
    ),
):
    _configure_logging(debug)
    try:
        settings = load_config_file(config) if config else discover_settings(Path("."))
    except ConfigError as e:
        result: Result[list[str]] = Result(
            value=[],
            diagnostics=[
                Diagnostic(
                    code="CONFIG_INVALID",
                    rule="config.load",
                    severity=Severity.ERROR,
                    message=str(e),
                    location=FileLocation(str(config or "pyproject.toml")),
                )
            ],
        )
    else:
        cfg = build_config(settings, pkg=pkg, ban=ban, strict=strict)
        result = check(cfg, AstSourceParser(), FilesystemPackageValidator())
    if json:
        data = serialize_result(result, command="bandep", args=sys.argv[1:])
        typer.echo(_json.dumps(data))
    else:
        _report(result)
    raise typer.Exit(result.exit_code)
