"""CLI interface for Labdocs.

Command-line tool for serving the documentation site and inspecting its
content.
"""

import logging
import sys
from pathlib import Path

import click

from labdocs.config import Config
from labdocs.core.documents import DocumentStore
from labdocs.core.frontmatter import FrontMatterError, split_front_matter
from labdocs.core.renderer import MarkdownRenderer
from labdocs.core.types import slug_to_url

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover labdocs.toml)",
)
source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)


@click.group()
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (debug logging)",
)
def cli(verbose: bool) -> None:
    """Labdocs - Data Science Lab documentation site."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@config_option
@source_dir_option
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--escape-html/--no-escape-html",
    default=None,
    help="Escape HTML in Markdown sources (overrides config, default: disabled)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    escape_html: bool | None,
) -> None:
    """Start the documentation server."""
    from labdocs.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
        escape_html=escape_html,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    click.echo(f"Sections: {', '.join(config.docs.sections) or '(none)'}")
    if config.render.escape_html:
        click.echo("HTML escaping: enabled")
    else:
        click.echo("HTML escaping: disabled")

    run_server(config)


@cli.command()
@config_option
@source_dir_option
def routes(config_path: Path | None, source_dir: Path | None) -> None:
    """List the route of every document."""
    config = _load_config(config_path).with_overrides(source_dir=source_dir)
    store = DocumentStore(config.docs.source_dir, config.docs.sections)

    for slug in store.list_all_slugs():
        click.echo(slug_to_url(slug))


@cli.command()
@click.argument("markdown_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--escape-html",
    is_flag=True,
    help="Escape HTML in the Markdown source",
)
def render(markdown_file: Path, escape_html: bool) -> None:
    """Render a Markdown file to an HTML fragment."""
    try:
        text = markdown_file.read_text(encoding="utf-8")
        _, body = split_front_matter(text)
    except UnicodeDecodeError as e:
        click.echo(
            click.style(f"Error: {markdown_file} is not valid UTF-8: {e}", fg="red"),
            err=True,
        )
        sys.exit(1)
    except FrontMatterError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(MarkdownRenderer(escape_html=escape_html).render(body))


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli()
