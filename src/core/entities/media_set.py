"""
Entites medienset.

Un medienset regroupe tous les fichiers issus d'une meme production
(variantes video, images de couverture, descripteurs XML) partageant
un nom de base. Les entites sont transitoires : elles sont reconstruites
a chaque execution depuis l'etat du repertoire source.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from src.core.value_objects.descriptor import Descriptor
from src.core.value_objects.media_kind import MediaKind, classify_media_kind


@dataclass(frozen=True)
class SupportedVideo:
    """
    Fichier video reconnu.

    Construit via create() qui retourne None si le fichier n'est pas
    une video supportee.

    Attributs :
        path : Emplacement actuel du fichier
        kind : PRIMARY_VIDEO (MPEG-4) ou ALTERNATE_VIDEO (QuickTime)
    """

    path: Path
    kind: MediaKind

    @classmethod
    def create(cls, path: Path) -> Optional["SupportedVideo"]:
        """Retourne un SupportedVideo, ou None si le fichier n'est pas une video."""
        kind = classify_media_kind(path)
        if not kind.is_video:
            return None
        return cls(path=path, kind=kind)

    @property
    def is_primary(self) -> bool:
        return self.kind == MediaKind.PRIMARY_VIDEO


@dataclass(frozen=True)
class SupportedImage:
    """Image de couverture reconnue (JPEG ou PNG)."""

    path: Path

    @classmethod
    def create(cls, path: Path) -> Optional["SupportedImage"]:
        """Retourne un SupportedImage, ou None si le fichier n'est pas une image."""
        if classify_media_kind(path) != MediaKind.IMAGE:
            return None
        return cls(path=path)


@dataclass(frozen=True)
class LocalMediaServerFiles:
    """
    Sous-ensemble d'un medienset destine a la mediatheque.

    Exactement une video et zero ou plusieurs images. Apres integration,
    une nouvelle instance reference les emplacements sur disque.

    Attributs :
        video : La video a integrer
        images : Images candidates (ordre de decouverte)
    """

    video: SupportedVideo
    images: tuple[SupportedImage, ...] = ()


@dataclass
class MediaSet:
    """
    Unite logique d'une production.

    Attributs :
        title : Titre canonique (nom de base sans suffixe de variante ni extension)
        files : Fichiers du medienset (ordre d'enumeration)
        descriptor : Metadonnees du descripteur XML, si present et valide
        local_media_server_files : Fichiers a integrer, apres classification
    """

    title: str
    files: list[Path] = field(default_factory=list)
    descriptor: Optional[Descriptor] = None
    local_media_server_files: Optional[LocalMediaServerFiles] = None

    def files_of_kind(self, kind: MediaKind) -> list[Path]:
        """Retourne les fichiers du medienset d'un type donne."""
        return [f for f in self.files if classify_media_kind(f) == kind]
