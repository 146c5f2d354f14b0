"""
Point d'entrée CLI de Mediatheque.

Configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger
from pydantic import ValidationError

from .adapters.cli.commands import integrate, plan, scan, tags, xml
from .adapters.cli.helpers import console
from .config import Settings
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="mediatheque",
    help="Integration de mediensets dans une mediatheque personnelle",
)

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


def _log_level(settings: Settings) -> str:
    """Niveau de log console selon -v / -q et la configuration."""
    if state["quiet"]:
        return "ERROR"
    if state["verbose"] >= 1:
        return "DEBUG"
    return settings.log_level


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """Mediatheque - Integration de productions video dans la mediatheque."""
    state["quiet"] = quiet
    state["verbose"] = 0 if quiet else verbose

    try:
        settings = Settings()
    except ValidationError as e:
        console.print(f"[red]Erreur de configuration:[/red] {e}")
        raise typer.Exit(1)

    configure_logging(
        log_level=_log_level(settings),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )


app.command()(integrate)
app.command()(plan)
app.command()(scan)
app.command()(tags)
app.command()(xml)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = Settings()
    logger.info("Configuration Mediatheque")
    typer.echo(f"Source : {config.source_dir or '(non configuree)'}")
    typer.echo(f"Mediatheque : {config.library_dir or '(non configuree)'}")
    typer.echo(f"Suffixes de variante : {', '.join(config.variant_suffixes)}")
    typer.echo(f"Postfixe banner : {config.banner_file_postfix or '(non configure)'}")
    typer.echo(f"ffmpeg : {config.ffmpeg_binary}")
    typer.echo(f"ffprobe : {config.ffprobe_binary}")
    typer.echo(f"Workers : {config.max_workers}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Mediatheque v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrompu.[/yellow]")
        raise SystemExit(130)


if __name__ == "__main__":
    main()
