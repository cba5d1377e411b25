import logging

import click

from galias.cli.aliases import format_alias_listing, resolve_alias
from galias.cli.commands.registry import HANDLERS
from galias.cli.ensure import UnresolvedAliasError
from galias.cli.invocation import parse_invocation
from galias.cli.preflight import run_preflight
from galias.core.context import GaliasContext, create_context
from galias.gateway.process import ProcessFailedError

logger = logging.getLogger(__name__)

# Everything after the alias belongs to the handler, including tokens such as
# "-b" that look like options.
CONTEXT_SETTINGS = dict(
    help_option_names=["--help"],
    ignore_unknown_options=True,
    allow_interspersed_args=False,
)


@click.command("g", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="galias")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--dry-run", is_flag=True, help="Print mutating commands instead of running them")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, debug: bool, dry_run: bool, args: tuple[str, ...]) -> None:
    """Short aliases for everyday git and hub commands.

    \b
    Usage:
      g <alias> [opts...]

    Run `g help` for examples, or `g` with no arguments for the alias list.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run)
    galias_ctx: GaliasContext = ctx.obj

    run_preflight(galias_ctx.shell)

    invocation = parse_invocation(args)
    command = resolve_alias(invocation.command)
    if command is None:
        raise UnresolvedAliasError(
            "Command alias not found, available aliases:\n\n" + format_alias_listing() + "\n"
        )

    logger.debug("Dispatching %s with %d option(s)", command.value, len(invocation.opts))
    handler = HANDLERS[command]
    try:
        handler(galias_ctx, invocation.opts)
    except ProcessFailedError as e:
        raise click.ClickException(str(e)) from e


def main() -> None:
    """CLI entry point used by the `g` and `galias` console scripts."""
    cli()
