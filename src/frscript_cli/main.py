import json
import logging
import sys
from pathlib import Path

import typer
from frscript_linter.autofix import AutoFixEngine
from frscript_linter.docgen import generate_all_docstrings
from frscript_linter.engine import LinterEngine
from frscript_linter.metrics import calculate_file_metrics, summarize
from frscript_linter.models import Severity
from frscript_symbol_db.extractor import get_symbols
from frscript_symbol_db.index import WorkspaceIndex
from frscript_symbol_db.inference import infer_expression_type

from .config import LintConfig
from .converters import diagnostic_to_lint_issue, symbol_to_entry

app = typer.Typer(help="Frscript Static Analyzer - Analyze Frscript code for type errors and smells")

logger = logging.getLogger(__name__)

# Fixes that change line structure go last
FIX_PRIORITY = ["missing-return-type", "no-semicolons"]


def _configure_logging(verbosity: int) -> None:
    """0 -> WARNING, 1 -> INFO, 2+ -> DEBUG on stderr"""
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    for name in ("frscript_symbol_db", "frscript_linter", "frscript_cli"):
        root = logging.getLogger(name)
        root.setLevel(level)
        root.handlers = [handler]


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: cannot read {path}: {e}", err=True)
        raise typer.Exit(code=2)


@app.callback()
def main(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase log verbosity"),
):
    _configure_logging(verbose)


@app.command()
def lint(
    files: list[Path] = typer.Argument(..., help="Files to lint"),
    config_file: Path = typer.Option(None, "--config", help="Path to config file"),
    severity: str = typer.Option("HINT", help="Minimum severity to show"),
    fix: bool = typer.Option(False, help="Automatically fix issues"),
):
    """Run linter on Frscript files"""
    config = LintConfig(config_file)
    engine = LinterEngine(config=config.to_linter_config())
    enabled_rules = config.apply_to_registry(engine.registry)
    autofix = AutoFixEngine()
    all_issues = []

    for file_path in files:
        max_passes = 10
        passes = 0
        current_issues = []

        while passes < max_passes:
            passes += 1
            content = _read(file_path)
            current_issues = engine.validate(content, rules=enabled_rules)

            if not fix:
                break

            fixable = [i for i in current_issues if i.auto_fixable and autofix.can_fix(i.code)]
            if not fixable:
                break

            target_code = next(
                (c for c in FIX_PRIORITY if any(i.code == c for i in fixable)),
                fixable[0].code,
            )
            code_issues = [i for i in fixable if i.code == target_code]
            typer.echo(f"  Applying fixes for {target_code} ({len(code_issues)} issues) in {file_path.name}...")

            file_path.write_text(autofix.apply_fixes(content, code_issues), encoding="utf-8")

            if passes == max_passes:
                typer.echo(f"Warning: Reached max fix passes for {file_path}")

        all_issues.extend(diagnostic_to_lint_issue(i, file_path) for i in current_issues)

    try:
        min_rank = Severity(severity.lower()).rank
    except ValueError:
        typer.echo(f"Error: unknown severity '{severity}'", err=True)
        raise typer.Exit(code=2)

    reported_count = 0
    for issue in sorted(all_issues, key=lambda x: (x.file_path, x.line_number, x.column)):
        if Severity(issue.severity.value.lower()).rank >= min_rank:
            typer.echo(
                f"{issue.severity.value}: {issue.file_path}:{issue.line_number}:{issue.column} "
                f"[{issue.rule_id}] - {issue.message}"
            )
            reported_count += 1

    typer.echo(f"\nTotal issues found: {len(all_issues)} ({reported_count} reported)")

    errors = sum(1 for i in all_issues if i.severity == "ERROR")
    if errors > 0:
        raise typer.Exit(code=1)


@app.command()
def symbols(
    files: list[Path] = typer.Argument(..., help="Files to index"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON"),
    search: str = typer.Option(None, help="Only show symbols matching this query (fuzzy)"),
):
    """List functions, structs and variables"""
    index = WorkspaceIndex()
    for file_path in files:
        index.get_symbols(str(file_path), _read(file_path))

    if search:
        found = [(m.document_id, m.symbol) for m in index.search(search)]
    else:
        found = [(str(f), s) for f in files for s in index.get_symbols(str(f), _read(f))]

    entries = [symbol_to_entry(s, doc) for doc, s in found]
    if as_json:
        typer.echo(json.dumps([e.model_dump() for e in entries], indent=2))
        return

    for e in entries:
        detail = e.signature or e.type or ""
        typer.echo(f"{e.file_path}:{e.line_number} {e.kind} {e.name} {detail}".rstrip())


@app.command()
def metrics(
    file_path: Path = typer.Argument(..., help="File to measure"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON"),
):
    """Show per-function complexity, length and nesting depth"""
    results = calculate_file_metrics(_read(file_path))
    summary = summarize(results)

    if as_json:
        typer.echo(json.dumps({"functions": [m.to_dict() for m in results], "summary": summary}, indent=2))
        return

    for m in results:
        typer.echo(
            f"{m.name} (line {m.line + 1}): CC {m.complexity} | Len {m.function_length} | Depth {m.nesting_depth}"
        )
    typer.echo(
        f"\n{summary['functions']} function(s), {summary['total_lines']} lines, "
        f"average complexity {summary['average_complexity']}"
    )


@app.command()
def infer(
    expression: str = typer.Argument(..., help="Expression to type"),
    file_path: Path = typer.Option(None, "--file", help="Resolve names against this file's symbols"),
):
    """Infer the type of an expression"""
    context = get_symbols(_read(file_path)) if file_path else []
    inferred = infer_expression_type(expression, context)
    typer.echo(inferred or "unknown")


@app.command()
def docgen(
    file_path: Path = typer.Argument(..., help="File to document"),
    write: bool = typer.Option(False, help="Rewrite the file in place"),
    config_file: Path = typer.Option(None, "--config", help="Path to config file"),
):
    """Generate `///` blocks for undocumented functions"""
    config = LintConfig(config_file)
    new_text, count = generate_all_docstrings(_read(file_path), config.include_examples)

    if write:
        if count:
            file_path.write_text(new_text, encoding="utf-8")
        typer.echo(f"Generated documentation for {count} function(s)")
    else:
        typer.echo(new_text)


if __name__ == "__main__":
    app()
