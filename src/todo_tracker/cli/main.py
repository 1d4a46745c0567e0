import click

from . import __version__
from .commands.migrate_cmd import migrate
from .commands.run_cmd import run


@click.group(context_settings=dict(help_option_names=['-h', '--help']))
@click.version_option(
    __version__, "-v", "--version", help="Show the CLI version and exit."
)
def cli():
    """Todo Tracker command line."""
    pass


cli.add_command(run)
cli.add_command(migrate)


def main():
    cli()


if __name__ == "__main__":
    main()
