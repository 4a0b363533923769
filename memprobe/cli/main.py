import typer

from memprobe.cli.commands import stat

app = typer.Typer(
    name="memprobe",
    help="Report available system memory using the platform's native counters.",
    add_completion=False,
)

# Single command: invoked as `memprobe <platform>`
app.command("stat")(stat.stat)

cli_app = app

if __name__ == "__main__":
    app()
