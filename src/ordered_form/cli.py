"""
Main CLI entry point for Ordered Form
"""

import logging
import sys
from pathlib import Path

import click

from ordered_form import __version__
from ordered_form.commands.order import OrderCommand
from ordered_form.core.config import OUTPUT_FORMATS, Config

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(
    version=__version__,
    prog_name="ordered-form",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="Configuration file path",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress output",
)
@click.pass_context
def cli(
    ctx,
    config: str | None,
    verbose: bool,
    quiet: bool,
):
    """Order sibling items from their declared positions

    Each item may declare no position, "first", "last", or a mapping with
    "before" and/or "after" naming a sibling.
    """
    ctx.ensure_object(dict)

    if config:
        ctx.obj["config"] = Config.from_file(Path(config))
    else:
        ctx.obj["config"] = Config.load_hierarchy(Path.cwd())

    if verbose:
        ctx.obj["config"].verbose = True
    if quiet:
        ctx.obj["config"].quiet = True

    if ctx.obj["config"].verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif ctx.obj["config"].quiet:
        logging.getLogger().setLevel(logging.WARNING)

    errors = ctx.obj["config"].validate()
    if errors:
        for error in errors:
            click.echo(f"❌ {error}", err=True)
        sys.exit(2)


@cli.command()
@click.argument(
    "path",
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    help="Output format (defaults to the configured one)",
)
@click.option(
    "--positions",
    is_flag=True,
    help="Show the declared position next to each name",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Write the order to a file instead of stdout",
)
@click.pass_context
def order(
    ctx,
    path: str,
    output_format: str | None,
    positions: bool,
    output: str | None,
):
    """Print the resolved order of the items declared in PATH.

    PATH is a YAML or JSON document listing the items.

    Examples:
        ordered-form order fields.yaml
        ordered-form order fields.json --format table --positions
        ordered-form order fields.yaml -f json -o order.json
    """
    config = ctx.obj["config"]
    if positions:
        config.output.show_positions = True

    command = OrderCommand(config)
    result = command.execute(Path(path))

    if not result.is_success:
        click.echo(f"❌ {result.error_message}", err=True)
        sys.exit(1)

    rendered = command.render(result, output_format)

    if output:
        Path(output).write_text(rendered + "\n", encoding="utf-8")
        if not config.quiet:
            click.echo(f"✅ Order of {len(result.order)} items written to {output}")
    else:
        click.echo(rendered)


@cli.command()
@click.argument(
    "path",
    type=click.Path(exists=True, dir_okay=False),
)
@click.pass_context
def check(ctx, path: str):
    """Check that the positions declared in PATH can be resolved.

    Examples:
        ordered-form check fields.yaml
    """
    command = OrderCommand(ctx.obj["config"])
    result = command.execute(Path(path))

    if not result.is_success:
        click.echo(f"❌ {result.error_message}", err=True)
        sys.exit(1)

    if not ctx.obj["config"].quiet:
        click.echo(str(result))


def main():
    """Main entry point"""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
