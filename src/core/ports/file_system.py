"""
Interfaces ports pour le système de fichiers.

Interface abstraite (port) définissant le contrat des opérations fichiers
utilisées par l'intégration. Les opérations retournent un succès/échec
explicite (bool ou None) et ne lèvent jamais d'exception à travers la frontière.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class IFileOperations(ABC):
    """
    Interface pour les opérations de base sur les fichiers.

    Définit les opérations pour interagir avec le système de fichiers :
    vérification d'existence, lecture, déplacement/copie, création de répertoires.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Vérifie si un chemin existe."""
        ...

    @abstractmethod
    def list_files(self, directory: Path) -> list[Path]:
        """
        Liste les fichiers d'un répertoire (non récursif).

        Args :
            directory : Répertoire à lister

        Retourne :
            Fichiers triés par nom (ordre d'énumération stable), liste vide
            si le répertoire est illisible
        """
        ...

    @abstractmethod
    def read_file(self, path: Path) -> Optional[str]:
        """
        Lit le contenu texte (UTF-8) d'un fichier.

        Retourne :
            Le contenu, ou None si la lecture échoue
        """
        ...

    @abstractmethod
    def write_file(self, path: Path, content: str, overwrite: bool = False) -> bool:
        """
        Écrit un fichier texte (UTF-8), en créant les répertoires parents.

        Args :
            path : Fichier à écrire
            content : Contenu texte
            overwrite : Autorise le remplacement d'un fichier existant

        Retourne :
            True si écrit, False sinon (y compris si le fichier existe)
        """
        ...

    @abstractmethod
    def create_directory(self, path: Path) -> bool:
        """
        Crée un répertoire et ses parents.

        Idempotent : un répertoire déjà existant n'est pas une erreur.

        Retourne :
            True si le répertoire existe après l'appel, False sinon
        """
        ...

    @abstractmethod
    def move_file(self, source: Path, destination: Path) -> bool:
        """
        Déplace un fichier sans jamais écraser la destination.

        Args :
            source : Chemin actuel du fichier
            destination : Chemin cible du fichier

        Retourne :
            True si réussi, False sinon (y compris si la destination existe)
        """
        ...

    @abstractmethod
    def copy_file(self, source: Path, destination: Path, overwrite: bool = False) -> bool:
        """
        Copie un fichier.

        Args :
            source : Chemin du fichier source
            destination : Chemin du fichier cible
            overwrite : Autorise le remplacement d'une destination existante

        Retourne :
            True si réussi, False sinon
        """
        ...

    @abstractmethod
    def delete(self, path: Path) -> bool:
        """Supprime un fichier. Retourne True si supprimé."""
        ...

    @abstractmethod
    def calculate_hash(self, path: Path) -> Optional[str]:
        """
        Calcule une empreinte du contenu pour détecter les doublons.

        Retourne :
            Hash hexadécimal, ou None si le calcul échoue
        """
        ...
