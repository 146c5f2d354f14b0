"""Commandes CLI d'integration : integrate, plan, scan, tags et xml."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.table import Table

from src.adapters.cli.helpers import build_container, console
from src.adapters.cli.report_display import (
    display_media_sets,
    display_plan_tree,
    display_result_line,
    display_results,
    display_skipped,
    display_summary,
)
from src.adapters.parsing.ffmpeg_metadata_extractor import parse_ffmetadata
from src.core.errors import (
    ConfigurationError,
    DirectoryNotFoundError,
    FileOperationError,
    MetadataExtractionError,
)


def integrate(
    workers: Annotated[
        Optional[int],
        typer.Option(
            "--workers",
            "-w",
            min=1,
            max=32,
            help="Nombre de mediensets integres en parallele (defaut: config)",
        ),
    ] = None,
) -> None:
    """
    Integre les mediensets du repertoire source dans la mediatheque.

    Chaque medienset est traite independamment : un echec n'interrompt pas
    les suivants. Le code retour vaut 1 si au moins un medienset est en erreur.

    Exemples:
      mediatheque integrate
      mediatheque integrate --workers 4
    """
    container = build_container(max_workers=workers)
    engine = container.engine

    console.print(f"[bold cyan]Source:[/bold cyan] {engine.source_dir}")
    console.print(f"[bold cyan]Mediatheque:[/bold cyan] {engine.library_dir}\n")

    try:
        report = engine.run(on_result=display_result_line)
    except (ConfigurationError, DirectoryNotFoundError) as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(1)

    console.print()
    display_results(report, engine.library_dir)
    display_summary(report)

    if report.has_errors:
        raise typer.Exit(1)


def plan() -> None:
    """
    Affiche les chemins cibles sans deplacer aucun fichier.

    Les tags album sont lus sur les videos (ffprobe) comme pour une
    integration reelle.
    """
    container = build_container()
    engine = container.engine

    try:
        planned = engine.plan()
    except (ConfigurationError, DirectoryNotFoundError) as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(1)

    if not planned:
        console.print("[yellow]Aucun medienset dans le repertoire source.[/yellow]")
        return

    display_plan_tree(planned, engine.library_dir)


def scan() -> None:
    """Liste les mediensets du repertoire source sans lire les videos."""
    container = build_container()
    engine = container.engine

    try:
        engine.validate(require_library=False)
    except (ConfigurationError, DirectoryNotFoundError) as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(1)

    media_sets, skipped = engine.discover()
    if not media_sets:
        console.print("[yellow]Aucun medienset dans le repertoire source.[/yellow]")
    else:
        display_media_sets(media_sets)
    display_skipped(skipped)


def tags(
    file: Annotated[
        Path,
        typer.Argument(help="Fichier video a inspecter", exists=True, dir_okay=False),
    ],
) -> None:
    """Affiche les tags globaux d'une video (dump ffmetadata)."""
    container = build_container()

    try:
        raw = container.metadata_extractor.get_raw_metadata(file)
    except MetadataExtractionError as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(1)

    values = parse_ffmetadata(raw)
    if not values:
        console.print(f"[yellow]Aucun tag dans {file.name}[/yellow]")
        return

    table = Table(title=file.name)
    table.add_column("Tag", style="cyan")
    table.add_column("Valeur")
    for key, value in values.items():
        table.add_row(key, value)
    console.print(table)


def xml(
    file: Annotated[
        Path,
        typer.Argument(
            help="Video (MPEG-4 ou QuickTime) source des tags",
            exists=True,
            dir_okay=False,
        ),
    ],
    save: Annotated[
        bool,
        typer.Option("--save", "-s", help="Ecrire le descripteur a cote de la video"),
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Fichier cible (implique --save)", dir_okay=False),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Remplacer un descripteur existant"),
    ] = False,
) -> None:
    """
    Genere le descripteur XML Infuse d'une video depuis ses tags.

    Sans --save, le XML est affiche. Avec --save, il est ecrit sous le nom
    du descripteur du medienset (suffixe de variante retire).

    Exemples:
      mediatheque xml "2023-05-01 Hochzeit-4K.mp4"
      mediatheque xml "2023-05-01 Hochzeit-4K.mp4" --save
    """
    container = build_container()
    service = container.infuse_xml_service

    try:
        if save or output is not None:
            target = service.write_descriptor(file, destination=output, overwrite=force)
            console.print(f"[green]Descripteur ecrit:[/green] {target}")
        else:
            typer.echo(service.read_metadata(file), nl=False)
    except (MetadataExtractionError, FileOperationError) as e:
        console.print(f"[red]Erreur:[/red] {e}")
        raise typer.Exit(1)
