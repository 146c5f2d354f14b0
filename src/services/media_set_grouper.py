"""
Service de regroupement des fichiers en mediensets.

Les fichiers d'un repertoire partageant le meme nom de base (sans suffixe de
variante ni extension, insensible a la casse) forment un medienset.

Exemple : "Hochzeit-4K.mp4", "Hochzeit-4K.mov", "Hochzeit.xml" -> medienset "Hochzeit"
"""

from pathlib import Path
from typing import Iterable

from loguru import logger

from src.core.entities.media_set import MediaSet
from src.core.entities.report import SkippedFile
from src.core.value_objects.media_kind import MediaKind, classify_media_kind
from src.services.variant_resolver import VariantResolver


class MediaSetGrouper:
    """
    Partitionne une liste plate de fichiers en mediensets.

    L'ordre des mediensets suit l'ordre d'enumeration des fichiers
    (premiere apparition de chaque nom de base). Chaque fichier reconnu
    appartient a exactement un medienset.
    """

    def __init__(self, variant_resolver: VariantResolver) -> None:
        self._variants = variant_resolver

    def grouping_key(self, path: Path) -> str:
        """Nom de base du fichier, sans suffixe de variante ni extension."""
        return self._variants.strip_variant_suffix(path.stem)

    def group(self, files: Iterable[Path]) -> list[MediaSet]:
        """Regroupe les fichiers en mediensets (fichiers non reconnus ignores)."""
        media_sets, _ = self.group_with_diagnostics(files)
        return media_sets

    def group_with_diagnostics(
        self, files: Iterable[Path]
    ) -> tuple[list[MediaSet], list[SkippedFile]]:
        """
        Regroupe les fichiers et retourne aussi les fichiers ecartes.

        Args:
            files: Fichiers d'un repertoire (ordre d'enumeration)

        Returns:
            Tuple (mediensets, fichiers non reconnus)
        """
        sets_by_key: dict[str, MediaSet] = {}
        skipped: list[SkippedFile] = []

        for path in files:
            if classify_media_kind(path) == MediaKind.UNRECOGNIZED:
                logger.debug(f"Fichier non reconnu ignore: {path.name}")
                skipped.append(SkippedFile(path=path, reason="type de fichier non reconnu"))
                continue

            title = self.grouping_key(path)
            key = title.lower()
            media_set = sets_by_key.get(key)
            if media_set is None:
                media_set = MediaSet(title=title)
                sets_by_key[key] = media_set
            media_set.files.append(path)

        # dict conserve l'ordre d'insertion
        return list(sets_by_key.values()), skipped
