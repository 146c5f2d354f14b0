"""
Service de resolution des variantes d'un medienset.

Une production est exportee en plusieurs variantes dont le nom se termine par
un suffixe configure (ex: "Hochzeit-4K.mp4", "Hochzeit-1080p.mp4") et
accompagnee d'un descripteur XML sans suffixe ("Hochzeit.xml"). Les suffixes
sont testes dans l'ordre configure, sans tenir compte de la casse : le premier
suffixe satisfaisant l'emporte, meme si un suivant conviendrait aussi.
"""

import re
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from src.core.entities.media_set import SupportedVideo
from src.core.errors import ConfigurationError, VariantResolutionError
from src.core.value_objects.media_kind import MediaKind


def _remove_ignore_case(text: str, token: str) -> str:
    """Retire toutes les occurrences de token (insensible a la casse)."""
    return re.sub(re.escape(token), "", text, flags=re.IGNORECASE)


class VariantResolver:
    """
    Resolution des variantes video et des noms de descripteurs.

    Methodes :
        find_alternate_variant: Variante QuickTime d'une video MPEG-4
        resolve_descriptor_name: Nom du descripteur XML d'un fichier media
        strip_variant_suffix: Nom de base sans suffixe de variante
    """

    def __init__(
        self, variant_suffixes: Iterable[str], descriptor_extension: str = ".xml"
    ) -> None:
        """
        Args:
            variant_suffixes: Suffixes de variante, par ordre de priorite
            descriptor_extension: Extension des fichiers descripteurs

        Raises:
            ConfigurationError: Si aucun suffixe n'est configure
        """
        self._suffixes = [s for s in variant_suffixes if s]
        if not self._suffixes:
            raise ConfigurationError("Aucun suffixe de variante configure.")
        self._descriptor_extension = descriptor_extension

    @property
    def suffixes(self) -> list[str]:
        return list(self._suffixes)

    def find_alternate_variant(
        self, primary: SupportedVideo, siblings: Iterable[SupportedVideo | Path]
    ) -> Optional[SupportedVideo]:
        """
        Retourne la variante QuickTime correspondant a une video MPEG-4.

        Pour chaque suffixe, le suffixe est retire du nom de la video primaire
        et la premiere video alternative dont le nom commence par ce nom de
        base est retenue.

        Args:
            primary: Video MPEG-4 de reference
            siblings: Fichiers du meme medienset

        Returns:
            La variante trouvee, ou None (absence n'est pas une erreur)
        """
        candidates = [
            video
            for video in (
                s if isinstance(s, SupportedVideo) else SupportedVideo.create(s)
                for s in siblings
            )
            if video is not None and video.kind == MediaKind.ALTERNATE_VIDEO
        ]

        primary_stem = primary.path.stem
        for suffix in self._suffixes:
            base = _remove_ignore_case(primary_stem, suffix).lower()
            for candidate in candidates:
                if candidate.path.stem.lower().startswith(base):
                    logger.debug(
                        f"Variante QuickTime trouvee pour {primary.path.name}: "
                        f"{candidate.path.name}"
                    )
                    return candidate

        return None

    def _matching_suffix(self, stem: str) -> Optional[str]:
        """Premier suffixe (ordre configure) par lequel le nom se termine."""
        stem_lower = stem.lower()
        for suffix in self._suffixes:
            if stem_lower.endswith(suffix.lower()):
                return suffix
        return None

    def resolve_descriptor_name(self, media_file: Path) -> Path:
        """
        Retourne le chemin du descripteur XML d'un fichier media.

        Le suffixe de variante terminal est retire du nom et l'extension
        du descripteur est ajoutee, dans le meme repertoire.

        Args:
            media_file: Fichier media (video, image)

        Returns:
            Chemin attendu du descripteur (non verifie sur disque)

        Raises:
            VariantResolutionError: Si aucun suffixe ne correspond
        """
        suffix = self._matching_suffix(media_file.stem)
        if suffix is None:
            raise VariantResolutionError(
                f"Aucun suffixe de variante ne correspond a {media_file.name}"
            )
        base = media_file.stem[: len(media_file.stem) - len(suffix)]
        return media_file.parent / f"{base}{self._descriptor_extension}"

    def strip_variant_suffix(self, stem: str) -> str:
        """
        Retire le suffixe de variante final d'un nom de base.

        Seul le suffixe terminal est retire. Un nom sans suffixe est
        retourne tel quel.
        """
        suffix = self._matching_suffix(stem)
        if suffix is None:
            return stem
        return stem[: len(stem) - len(suffix)]
