import typer

from clearly_defined.cli.definitions import get, parse

app = typer.Typer(
    name="clearly-defined",
    help="ClearlyDefined CLI: look up license and provenance definitions of components.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("get")(get)
app.command("parse")(parse)


def main() -> None:
    app()
