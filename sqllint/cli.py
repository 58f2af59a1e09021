"""Command line entry point: lint .sql files and print the diagnostics."""

import json
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import typer

from .engine import RuleEngine
from .linter import Linter
from .parser import DEFAULT_DIALECT

app = typer.Typer(help="Lint SQL DDL scripts against schema conventions")

logger = logging.getLogger(__name__)


def discover_files(paths: List[str]) -> List[str]:
    """Expand directories into the .sql files below them, sorted."""
    found = []
    for path in paths:
        if os.path.isdir(path):
            for root, _, files in os.walk(path):
                found.extend(os.path.join(root, f) for f in files if f.lower().endswith(".sql"))
        else:
            found.append(path)
    return sorted(found)


def lint_file(linter: Linter, path: str):
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    return linter.lint(content, name=path)


@app.command()
def lint(
    paths: List[str] = typer.Argument(..., help="SQL files or directories to lint"),
    checks: Optional[str] = typer.Option(None, "--checks", "-c", help="Path to a checks.json config"),
    dialect: str = typer.Option(DEFAULT_DIALECT, "--dialect", "-d", help="SQL dialect of the scripts"),
    jobs: int = typer.Option(1, "--jobs", "-j", help="Number of files linted in parallel"),
    json_output: bool = typer.Option(False, "--json", help="Print diagnostics as JSON"),
) -> None:
    """Lint SQL files. Exits with code 1 when any diagnostic is reported."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    files = discover_files(paths)
    if not files:
        typer.echo("No .sql files found.", err=True)
        raise typer.Exit(code=2)

    linter = Linter(RuleEngine(checks_config_path=checks), dialect=dialect)

    # one Script per file, nothing shared between files
    with ThreadPoolExecutor(max_workers=max(1, jobs)) as pool:
        reports = list(pool.map(lambda p: lint_file(linter, p), files))

    total = sum(len(r) for r in reports)
    if json_output:
        payload = {path: [e.to_dict() for e in errs] for path, errs in zip(files, reports)}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for errs in reports:
            for err in errs:
                typer.echo(str(err))
        typer.echo(f"{len(files)} file(s) checked, {total} problem(s) found.")

    if total:
        raise typer.Exit(code=1)


def main():
    app()


if __name__ == "__main__":
    main()
