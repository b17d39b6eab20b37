"""CLI entrypoint: Typer app definition and command registration"""

import typer

from idbdoc.cli.commands import css_cmd, render_cmd


app = typer.Typer(name="idbdoc", no_args_is_help=True, help="Render the IndexedDB tutorial markdown to HTML")

app.command(name="render")(render_cmd)
app.command(name="css")(css_cmd)
