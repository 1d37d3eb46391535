import logging
import sys
import click

from common.config import load_settings, update_settings
from errors import ConfigError, UnknownCaseStyleError
from utils.logger import setup_logging
from utils.string_case import CASE_STYLES, convert as convert_value, normalize_style

logger = logging.getLogger("main")


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="TOML file to load settings from (defaults to ./casekit.toml).",
)
@click.pass_context
def cli(ctx, config_path):
    """Convert strings between camelCase, kebab-case, dot.case and friends."""
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    update_settings(settings)

    # Converted values go to stdout, keep log lines out of the way.
    setup_logging(
        level=settings.logging.level,
        format_type=settings.logging.format,
        app_name=settings.name,
        stream=sys.stderr,
    )
    ctx.obj = settings


@cli.command()
@click.argument("values", nargs=-1, required=True)
@click.option("--style", "-s", default=None, help="Target case style (see `styles`).")
@click.pass_obj
def convert(settings, values, style):
    """Prints each VALUE converted to the target case, one per line."""
    target = style or settings.converter.default_style
    try:
        target = normalize_style(target)
    except UnknownCaseStyleError as e:
        raise click.BadParameter(str(e), param_hint="'--style'") from e

    logger.debug(f"Converting {len(values)} value(s) to {target}")
    for value in values:
        click.echo(convert_value(value, target))


@cli.command()
def styles():
    """Lists the registered case styles."""
    for name in sorted(CASE_STYLES):
        click.echo(name)


if __name__ == "__main__":
    cli()
