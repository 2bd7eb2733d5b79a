import click

from propgate.cli.check import check
from propgate.cli.describe import describe
from propgate.version import PACKAGE_VERSION


@click.group(invoke_without_command=True)
@click.version_option(PACKAGE_VERSION, prog_name="propgate")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """propgate CLI"""
    # Show help when no subcommand is provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(check)
cli.add_command(describe)


if __name__ == "__main__":
    cli()
