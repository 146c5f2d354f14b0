"""
Hierarchie des exceptions du domaine.

Les absences attendues (tag manquant, variante introuvable) ne levent pas
d'exception : elles sont representees par None ou une chaine vide.
Les exceptions ci-dessous signalent les echecs reels (configuration, I/O,
processus externe) et portent la portee de l'echec :

- erreurs de run (ConfigurationError, DirectoryNotFoundError) : levees avant
  tout traitement par medienset
- erreurs par medienset (MetadataExtractionError, PathResolutionError,
  FileOperationError) : capturees par MediaIntegrator et consignees
- erreurs par fichier (VariantResolutionError)
"""

from pathlib import Path
from typing import Optional


class MediathekError(Exception):
    """Exception de base de l'application."""


class ConfigurationError(MediathekError):
    """Parametre manquant ou invalide (chemins, suffixes, postfixe banner)."""


class DirectoryNotFoundError(MediathekError):
    """
    Repertoire source ou racine de la mediatheque introuvable.

    Attributes:
        path: Chemin du repertoire manquant
    """

    def __init__(self, path: Path, label: str = "Repertoire") -> None:
        self.path = path
        super().__init__(f"{label} introuvable : {path}")


class ProcessError(MediathekError):
    """
    Echec d'invocation d'un outil externe.

    Attributes:
        tool: Nom de l'outil (ffmpeg, ffprobe)
        returncode: Code retour du processus, None s'il n'a pas pu demarrer
    """

    def __init__(
        self, tool: str, message: str, returncode: Optional[int] = None
    ) -> None:
        self.tool = tool
        self.returncode = returncode
        super().__init__(f"{tool}: {message}")


class MetadataExtractionError(MediathekError):
    """Echec de transport lors de l'extraction des metadonnees (pas un tag absent)."""


class VariantResolutionError(MediathekError):
    """Aucun suffixe de variante configure ne correspond au nom du fichier."""


class PathResolutionError(MediathekError):
    """Le chemin cible ne peut pas etre calcule (racine de la mediatheque absente)."""


class FileOperationError(MediathekError):
    """Echec d'une operation fichier (creation de repertoire, deplacement)."""
