"""
Entites de rapport de l'integration.

Le coeur ne journalise pas les resultats de maniere definitive : il retourne
des enregistrements structures que la CLI affiche (tableau rich) et que le
moteur consigne via loguru.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from src.core.entities.media_set import LocalMediaServerFiles


class IntegrationStatus(str, Enum):
    """Issue de l'integration d'un medienset."""

    DONE = "done"
    PARTIALLY_DONE = "partially_done"
    SKIPPED = "skipped"
    ERROR = "error"


class IntegrationStage(str, Enum):
    """Etapes de la machine a etats de l'integration."""

    START = "start"
    METADATA_RESOLVED = "metadata_resolved"
    PATH_RESOLVED = "path_resolved"
    DIRECTORY_ENSURED = "directory_ensured"
    VIDEO_MOVED = "video_moved"
    IMAGES_RESOLVED = "images_resolved"
    DONE = "done"


@dataclass
class IntegrationResult:
    """
    Resultat de l'integration d'un medienset.

    Attributs :
        title : Titre du medienset
        status : DONE, PARTIALLY_DONE, SKIPPED ou ERROR
        stage : Derniere etape atteinte (etape en echec pour ERROR et PARTIALLY_DONE)
        files : Fichiers integres avec leurs nouveaux emplacements
        target_path : Chemin cible de la video, si calcule
        error : Cause de l'echec (ERROR)
        warnings : Avertissements (images non deplacees, images ignorees...)
    """

    title: str
    status: IntegrationStatus
    stage: IntegrationStage
    files: Optional[LocalMediaServerFiles] = None
    target_path: Optional[Path] = None
    error: Optional[str] = None
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Vrai pour DONE et PARTIALLY_DONE."""
        return self.status in (IntegrationStatus.DONE, IntegrationStatus.PARTIALLY_DONE)


@dataclass(frozen=True)
class SkippedFile:
    """Fichier exclu du regroupement (type non reconnu)."""

    path: Path
    reason: str


@dataclass
class RunReport:
    """Rapport final d'une execution."""

    results: list[IntegrationResult] = field(default_factory=list)
    skipped_files: list[SkippedFile] = field(default_factory=list)

    def count(self, status: IntegrationStatus) -> int:
        """Nombre de mediensets ayant une issue donnee."""
        return sum(1 for r in self.results if r.status == status)

    @property
    def has_errors(self) -> bool:
        return self.count(IntegrationStatus.ERROR) > 0
