"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdconvert.cli.commands import convert_cmd, formats_cmd, history_cmd, init_cmd, render_cmd, show_cmd


app = typer.Typer(name="mdconvert", no_args_is_help=True, help="Markdown to HTML converter with conversion history")

app.command(name="convert")(convert_cmd)
app.command(name="render")(render_cmd)
app.command(name="history")(history_cmd)
app.command(name="show")(show_cmd)
app.command(name="formats")(formats_cmd)
app.command(name="init")(init_cmd)
