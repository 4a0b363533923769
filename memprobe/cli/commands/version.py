import typer
import importlib.metadata


def version_callback(value: bool):
    """
    Show the memprobe version.
    """
    if not value:
        return
    try:
        # Read version from the installed package metadata
        package_version = importlib.metadata.version("memprobe")
        typer.echo(f"memprobe version: {package_version}")
    except importlib.metadata.PackageNotFoundError:
        typer.echo("memprobe is not installed or version metadata not found.")
        typer.echo("Please install the package first (e.g., pip install . or pip install -e .)")
        raise typer.Exit(1)
    raise typer.Exit()
