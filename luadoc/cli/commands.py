"""CLI commands for the Lua Documentation Generator.

Provides the Click-based command group 'luadoc' with subcommands for
scanning sources into docs.json, building the static site from it,
doing both in one step, and listing what would be documented.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from luadoc import __version__
from luadoc.output.html import SiteWriter
from luadoc.output.json_writer import (
    DocumentationFormatError,
    read_documentation,
    write_documentation,
)
from luadoc.parsers.scanner import AnnotationScanner
from luadoc.parsers.structure import Documentation
from luadoc.utils.config import AppConfig, ScannerConfig, load_config
from luadoc.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def collect_files(path: str, config: ScannerConfig) -> list[Path]:
    """Collect all source files with a recognized extension.

    Args:
        path: File or directory path to scan.
        config: Scanner settings with extensions and exclusions.

    Returns:
        Source file paths in sorted depth-first order.
    """
    root = Path(path)
    if root.is_file():
        return [root]

    exclude = set(config.exclude_patterns)
    extensions = {ext.lower() for ext in config.extensions}
    files = []
    for f in sorted(root.rglob("*")):
        if not f.is_file() or f.suffix.lower() not in extensions:
            continue
        if any(part in exclude for part in f.relative_to(root).parts):
            continue
        files.append(f)
    return files


def _scan(files: list[Path], config: ScannerConfig, strict: bool) -> Documentation:
    """Scan files into one Documentation, skipping unreadable ones.

    Args:
        files: Files to scan, in discovery order.
        config: Scanner settings.
        strict: Abort on the first unreadable file instead of skipping it.

    Returns:
        The merged Documentation.

    Raises:
        click.ClickException: If strict and a file cannot be read.
    """
    scanner = AnnotationScanner(config)
    docs = Documentation()
    for file_path in files:
        try:
            docs.merge(scanner.scan_file(str(file_path)))
        except (OSError, UnicodeDecodeError) as e:
            if strict:
                raise click.ClickException(f"Cannot read {file_path}: {e}") from e
            logger.warning("Skipping %s: %s", file_path, e)
    return docs


def _write_site(docs: Documentation, config: AppConfig, site_dir: str) -> Path:
    writer = SiteWriter(
        site_dir=site_dir,
        title=config.output.site_title,
        footer=config.output.footer,
        clean=config.output.clean,
    )
    return writer.write_site(docs)


@click.group()
@click.version_option(version=__version__, prog_name="luadoc")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a YAML config file.",
)
@click.pass_context
def luadoc(ctx: click.Context, config_path: Optional[str]) -> None:
    """Lua Documentation Generator: build API docs from annotated Lua sources."""
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@luadoc.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), default=None, help="docs.json path.")
@click.option("--strict", is_flag=True, help="Fail on the first unreadable file.")
@click.pass_obj
def scan(config: AppConfig, path: str, output: Optional[str], strict: bool) -> None:
    """Scan Lua sources and write the extracted documentation as JSON."""
    files = collect_files(path, config.scanner)
    click.echo(f"Found {len(files)} source files")

    docs = _scan(files, config.scanner, strict)
    out_path = write_documentation(docs, output or config.output.docs_file)
    click.echo(
        f"Documented {docs.function_count} functions in {len(docs)} categories"
    )
    click.echo(f"Documentation written to {out_path}")


@luadoc.command()
@click.option("--input", "-i", "input_path", type=click.Path(), default=None)
@click.option("--site-dir", type=click.Path(), default=None, help="Site directory.")
@click.pass_obj
def build(
    config: AppConfig, input_path: Optional[str], site_dir: Optional[str]
) -> None:
    """Build the static HTML site from a docs.json file."""
    source = input_path or config.output.docs_file
    try:
        docs = read_documentation(source)
    except FileNotFoundError as e:
        raise click.ClickException(f"Documentation file not found: {source}") from e
    except DocumentationFormatError as e:
        raise click.ClickException(str(e)) from e

    out_dir = _write_site(docs, config, site_dir or config.output.site_dir)
    click.echo(f"Site written to {out_dir}")


@luadoc.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--output", "-o", type=click.Path(), default=None, help="docs.json path.")
@click.option("--site-dir", type=click.Path(), default=None, help="Site directory.")
@click.option("--strict", is_flag=True, help="Fail on the first unreadable file.")
@click.pass_obj
def generate(
    config: AppConfig,
    path: str,
    output: Optional[str],
    site_dir: Optional[str],
    strict: bool,
) -> None:
    """Scan Lua sources and build the site in one step."""
    files = collect_files(path, config.scanner)
    click.echo(f"Found {len(files)} source files")

    docs = _scan(files, config.scanner, strict)
    write_documentation(docs, output or config.output.docs_file)
    out_dir = _write_site(docs, config, site_dir or config.output.site_dir)
    click.echo(
        f"Documented {docs.function_count} functions in {len(docs)} categories"
    )
    click.echo(f"Site written to {out_dir}")


@luadoc.command("list")
@click.argument("path", type=click.Path(exists=True))
@click.pass_obj
def list_functions(config: AppConfig, path: str) -> None:
    """List documented functions by category without writing files."""
    docs = _scan(collect_files(path, config.scanner), config.scanner, strict=False)
    if not len(docs):
        click.echo("No documented functions found")
        return

    for category in docs:
        click.echo(f"{category}:")
        for function in docs[category]:
            summary = f" - {function.description}" if function.description else ""
            click.echo(f"  {function.name}{summary}")
