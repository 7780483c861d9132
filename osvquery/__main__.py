import typer

from osvquery.__version__ import __version__
from osvquery.commands import parse
from osvquery.commands import refs
from osvquery.core.logging import setup_logging

app = typer.Typer(
    help='osvquery: turn SPDX external references into OSV vulnerability queries.',
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
)

app.command('parse')(parse.main)
app.command('refs')(refs.main)


def version_callback(value: bool):
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(False, '--debug', help='Enable debug logging'),
    version: bool = typer.Option(
        False, '--version', callback=version_callback, is_eager=True,
        help='Show the version and exit',
    ),
):
    """
    osvquery CLI - SPDX external references to OSV queries.
    """
    level = 'DEBUG' if debug else 'INFO'
    setup_logging(level=level)


if __name__ == '__main__':
    app()
