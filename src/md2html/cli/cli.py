"""CLI entrypoint: Typer app definition and command registration"""

import typer

from md2html.cli.commands import convert_cmd


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    name="md2html",
    no_args_is_help=True,
    add_completion=False,
    help="Convert Markdown files to HTML",
    context_settings=CONTEXT_SETTINGS,
)

app.command(name="convert", context_settings=CONTEXT_SETTINGS)(convert_cmd)
