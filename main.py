#!/usr/bin/env python3
"""
Main CLI entrypoint for the static site generator.
"""

import logging

import click
from dotenv import load_dotenv

from models import SiteConfig
from services.errors import BuildError, ServerError
from services.site_builder import SiteBuilder
from services.static_server import StaticServer

# Load environment variables
load_dotenv()


def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )


@click.command()
@click.option('--content', 'content_dir', default=None, type=click.Path(file_okay=False),
              help='Content directory (default: content)')
@click.option('--templates', 'templates_dir', default=None, type=click.Path(file_okay=False),
              help='Templates directory (default: templates)')
@click.option('--static', 'static_dir', default=None, type=click.Path(file_okay=False),
              help='Static assets directory (default: static)')
@click.option('--out', 'out_dir', default=None, type=click.Path(file_okay=False),
              help='Output directory (default: public)')
@click.option('--host', default=None, help='Address to serve on (default: all interfaces)')
@click.option('--port', default=None, type=int, help='Port to serve on (default: 8080)')
@click.option('--no-serve', is_flag=True, help='Build the site and exit without serving it.')
@click.option('--no-listing', is_flag=True, help='Disable directory listings on the server.')
@click.option('--strict', is_flag=True, help='Exit with an error if any document fails to build.')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging.')
def cli(content_dir, templates_dir, static_dir, out_dir, host, port, no_serve, no_listing, strict, verbose):
    """Build a static site from Markdown content and serve it."""
    _configure_logging(verbose)

    try:
        config = SiteConfig.from_env(
            content_dir=content_dir,
            templates_dir=templates_dir,
            static_dir=static_dir,
            out_dir=out_dir,
            host=host,
            port=port,
            listing=False if no_listing else None,
        )
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    try:
        result = SiteBuilder(config).build()
    except BuildError as e:
        raise click.ClickException(f"Site build failed: {e}") from e

    for path in result.generated:
        click.echo(f"Generated {path}")
    for path, error in result.failed.items():
        click.echo(f"✗ {path}: {error}", err=True)

    if result.ok:
        click.echo(f"[OK] {result.summary()}")
    else:
        click.echo(f"[WARN] {result.summary()}")
        if strict:
            raise click.ClickException(f"{result.failure_count} documents failed to build")

    if no_serve:
        return

    server = StaticServer(config.out_dir, host=config.host, port=config.port, listing=config.listing)
    try:
        server.start()
    except ServerError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Serving site at {server.url}")
    if not server.info.listing:
        click.echo("Directory listings are disabled")
    click.echo("Press Ctrl+C to stop")
    server.serve_forever()


if __name__ == '__main__':
    cli()
