"""
Helpers CLI d'affichage des rapports d'integration.

Responsabilites:
- Tableau des resultats par medienset
- Resume final (compteurs par issue, fichiers ecartes)
- Arborescence des chemins cibles en mode simulation
- Liste des mediensets detectes (scan)
"""

from pathlib import Path
from typing import Optional

from rich.table import Table
from rich.tree import Tree

from src.core.entities.media_set import MediaSet
from src.core.entities.report import (
    IntegrationResult,
    IntegrationStatus,
    RunReport,
    SkippedFile,
)
from src.core.value_objects.media_kind import MediaKind
from src.services.library_engine import PlannedIntegration

_STATUS_STYLES = {
    IntegrationStatus.DONE: "[green]integre[/green]",
    IntegrationStatus.PARTIALLY_DONE: "[yellow]partiel[/yellow]",
    IntegrationStatus.SKIPPED: "[dim]ignore[/dim]",
    IntegrationStatus.ERROR: "[red]erreur[/red]",
}


def format_status(status: IntegrationStatus) -> str:
    """Libelle colore d'une issue d'integration."""
    return _STATUS_STYLES.get(status, status.value)


def _relative(path: Optional[Path], root: Optional[Path]) -> str:
    if path is None:
        return "-"
    if root is not None:
        try:
            return str(path.relative_to(root))
        except ValueError:
            pass
    return str(path)


def display_results(report: RunReport, library_dir: Optional[Path] = None) -> None:
    """
    Affiche le tableau des resultats par medienset.

    Args:
        report: Rapport de l'execution
        library_dir: Racine de la mediatheque (chemins affiches en relatif)
    """
    from src.adapters.cli.helpers import console

    if not report.results:
        console.print("[yellow]Aucun medienset a integrer.[/yellow]")
        return

    table = Table(title="Integration des mediensets")
    table.add_column("Medienset", style="cyan")
    table.add_column("Issue")
    table.add_column("Etape", style="dim")
    table.add_column("Destination")
    table.add_column("Details", style="dim")

    for result in report.results:
        details = result.error or "; ".join(result.warnings)
        table.add_row(
            result.title,
            format_status(result.status),
            result.stage.value,
            _relative(result.target_path, library_dir),
            details,
        )

    console.print(table)


def display_summary(report: RunReport) -> None:
    """Affiche les compteurs finaux et les fichiers ecartes."""
    from src.adapters.cli.helpers import console

    console.print(
        f"\n[bold]Resume:[/bold] "
        f"[green]{report.count(IntegrationStatus.DONE)} integre(s)[/green], "
        f"[yellow]{report.count(IntegrationStatus.PARTIALLY_DONE)} partiel(s)[/yellow], "
        f"{report.count(IntegrationStatus.SKIPPED)} ignore(s), "
        f"[red]{report.count(IntegrationStatus.ERROR)} erreur(s)[/red]"
    )
    display_skipped(report.skipped_files)


def display_skipped(skipped: list[SkippedFile]) -> None:
    """Affiche les fichiers non reconnus du repertoire source."""
    from src.adapters.cli.helpers import console

    if not skipped:
        return
    console.print(f"\n[dim]Fichiers ecartes: {len(skipped)}[/dim]")
    for item in skipped[:10]:
        console.print(f"  [dim]{item.path.name} ({item.reason})[/dim]")
    if len(skipped) > 10:
        console.print(f"  [dim]... et {len(skipped) - 10} autre(s)[/dim]")


def display_result_line(result: IntegrationResult) -> None:
    """Ligne de progression apres chaque medienset."""
    from src.adapters.cli.helpers import console

    console.print(f"  {format_status(result.status)} {result.title}")


def display_plan_tree(planned: list[PlannedIntegration], library_dir: Optional[Path]) -> None:
    """
    Affiche l'arborescence des integrations prevues (mode simulation).

    Les mediensets sans video ou dont le chemin n'a pas pu etre calcule sont
    listes a part.

    Args:
        planned: Integrations prevues
        library_dir: Racine de la mediatheque
    """
    from src.adapters.cli.helpers import console

    tree = Tree(f"[bold blue]{library_dir or '(mediatheque non configuree)'}[/bold blue]")
    branches: dict[str, Tree] = {}
    problems: list[str] = []

    for item in planned:
        if item.error:
            problems.append(f"[red]{item.media_set.title}[/red]: {item.error}")
            continue
        if item.target_path is None:
            problems.append(f"[dim]{item.media_set.title}: pas de video pour le medienserver[/dim]")
            continue

        parent = _relative(item.target_path.parent, library_dir)
        branch = branches.get(parent)
        if branch is None:
            branch = tree.add(f"[bold cyan]{parent}/[/bold cyan]")
            branches[parent] = branch
        branch.add(item.target_path.name)

        files = item.media_set.local_media_server_files
        if files is not None and files.images:
            branch.add(f"[dim]+ {len(files.images)} image(s)[/dim]")

    console.print(tree)
    for line in problems:
        console.print(f"  {line}")


def display_media_sets(media_sets: list[MediaSet]) -> None:
    """Affiche les mediensets detectes et la composition de chacun."""
    from src.adapters.cli.helpers import console

    table = Table(title=f"Mediensets detectes ({len(media_sets)})")
    table.add_column("Medienset", style="cyan")
    table.add_column("Videos", justify="right")
    table.add_column("Images", justify="right")
    table.add_column("Descripteur")
    table.add_column("Video retenue")

    for media_set in media_sets:
        videos = len(media_set.files_of_kind(MediaKind.PRIMARY_VIDEO)) + len(
            media_set.files_of_kind(MediaKind.ALTERNATE_VIDEO)
        )
        descriptor = media_set.descriptor
        files = media_set.local_media_server_files
        table.add_row(
            media_set.title,
            str(videos),
            str(len(media_set.files_of_kind(MediaKind.IMAGE))),
            (descriptor.album or descriptor.title) if descriptor else "-",
            files.video.path.name if files else "[dim]aucune[/dim]",
        )

    console.print(table)
