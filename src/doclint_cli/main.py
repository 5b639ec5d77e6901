import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from doclint_linter.config import LintConfig
from doclint_linter.engine import LinterEngine
from doclint_linter.errors import DoclintError
from doclint_linter.models import OutputFormat, has_errors
from doclint_linter.registry import registry
from doclint_linter.report import format_report
from doclint_markdown import ParseError

from .config import load_config
from .converters import records_to_json

app = typer.Typer(help="doclint - Check markdown documents against style and structure rules")


def _fail(message: str):
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """doclint - Check markdown documents against style and structure rules"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


@app.command()
def lint(
    files: List[Path] = typer.Argument(..., help="Markdown files to lint"),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write the report to this file"),
    config_file: Optional[Path] = typer.Option(None, "--config", help="Path to config file"),
    jobs: int = typer.Option(1, "--jobs", "-j", min=1, help="Worker threads for files and rules"),
):
    """Lint markdown files"""
    for file_path in files:
        if not file_path.is_file():
            _fail(f"File not found: {file_path}")

    try:
        config = load_config(config_file)
    except DoclintError as e:
        _fail(str(e))

    engine = LinterEngine(config, max_workers=jobs)
    try:
        results = engine.lint_files(files)
    except ParseError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Error reading file: {e}")

    try:
        report = render_report(results, config)
    except DoclintError as e:
        _fail(str(e))

    if output:
        try:
            output.write_text(report, encoding="utf-8")
        except OSError as e:
            _fail(f"Error writing output: {e}")
        typer.secho(f"Output written to {output}", fg=typer.colors.GREEN)
    elif report:
        typer.echo(report)

    if any(has_errors(diagnostics) for _, diagnostics in results):
        raise typer.Exit(code=1)


def render_report(results, config: LintConfig) -> str:
    """Render per-file results into one report string in config.format"""
    rendered = [format_report(path, diagnostics, config.format) for path, diagnostics in results]

    if config.format == OutputFormat.JSON.value:
        return records_to_json([record for records in rendered for record in records])
    return "\n".join(text for text in rendered if text)


@app.command()
def rules():
    """List available rules and their default settings"""
    defaults = LintConfig.default().rules
    for rule in registry.get_all_rules():
        rule_config = defaults[rule.name.config_key]
        typer.echo(f"{rule.rule_id} ({rule.name.config_key}) [{rule_config.level.value}]")
        typer.echo(f"  {rule.description}")


if __name__ == "__main__":
    app()
