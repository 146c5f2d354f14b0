"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileOperations pour les operations fichiers reelles.
Les deplacements ne remplacent jamais une destination existante.
"""

import os
import shutil
from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.ports.file_system import IFileOperations
from src.infrastructure.hash_service import compute_file_hash


class FileSystemAdapter(IFileOperations):
    """
    Implementation de IFileOperations pour le systeme de fichiers reel.

    Fournit les operations basiques sur les fichiers (exists, read, move,
    copy, delete) et la creation idempotente de repertoires.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        return path.exists()

    def list_files(self, directory: Path) -> list[Path]:
        """
        Liste les fichiers d'un repertoire (non recursif), tries par nom.

        Ignore les sous-repertoires, les symlinks et les fichiers caches.
        """
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError:
            return []
        return [
            path
            for path in entries
            if path.is_file() and not path.is_symlink() and not path.name.startswith(".")
        ]

    def read_file(self, path: Path) -> Optional[str]:
        """Lit un fichier texte UTF-8, None si la lecture echoue."""
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None

    def write_file(self, path: Path, content: str, overwrite: bool = False) -> bool:
        """Ecrit un fichier texte UTF-8 ; mode 'x' sans overwrite."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w" if overwrite else "x", encoding="utf-8") as handle:
                handle.write(content)
            return True
        except OSError:
            return False

    def create_directory(self, path: Path) -> bool:
        """Cree le repertoire et ses parents (sans erreur s'il existe deja)."""
        try:
            path.mkdir(parents=True, exist_ok=True)
            return True
        except OSError:
            return False

    def move_file(self, source: Path, destination: Path) -> bool:
        """
        Deplace un fichier sans ecraser la destination.

        Essaie d'abord os.link + unlink (la creation du lien echoue si la
        destination existe). Si le filesystem refuse les liens (exFAT, SMB,
        autre device), copie dans une destination ouverte en creation
        exclusive puis supprime la source.
        """
        if destination.exists():
            return False
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            try:
                os.link(source, destination)
            except FileExistsError:
                return False
            except OSError as e:
                logger.debug(f"Lien impossible vers {destination} ({e}), copie exclusive")
                return self._move_by_exclusive_copy(source, destination)
            source.unlink()
            return True
        except OSError:
            return False

    def _move_by_exclusive_copy(self, source: Path, destination: Path) -> bool:
        """Copie vers une destination creee en mode 'xb', puis retire la source."""
        try:
            with open(source, "rb") as src:
                try:
                    dst = open(destination, "xb")
                except OSError:
                    return False
                try:
                    with dst:
                        shutil.copyfileobj(src, dst)
                except OSError:
                    destination.unlink(missing_ok=True)
                    return False
            shutil.copystat(source, destination)
            source.unlink()
        except OSError:
            return False
        return True

    def copy_file(self, source: Path, destination: Path, overwrite: bool = False) -> bool:
        """Copie un fichier, en refusant d'ecraser la destination sauf si overwrite."""
        if destination.exists() and not overwrite:
            return False
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(str(source), str(destination))
            return True
        except (OSError, shutil.Error):
            return False

    def delete(self, path: Path) -> bool:
        """Supprime un fichier."""
        try:
            path.unlink()
            return True
        except OSError:
            return False

    def calculate_hash(self, path: Path) -> Optional[str]:
        """Hash XXH3 par echantillons, None si le fichier est illisible."""
        try:
            return compute_file_hash(path)
        except OSError:
            return None
