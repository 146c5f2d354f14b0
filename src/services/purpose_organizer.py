"""
Classification des fichiers d'un medienset selon leur usage.

Le medienserver local recoit une seule video MPEG-4 et les images du
medienset. La video retenue est celle dont le suffixe de variante est le
plus prioritaire ; les variantes QuickTime (fichiers maitres) restent dans
le repertoire source.
"""

from typing import Optional

from loguru import logger

from src.core.entities.media_set import (
    LocalMediaServerFiles,
    MediaSet,
    SupportedImage,
    SupportedVideo,
)
from src.core.value_objects.media_kind import MediaKind
from src.services.variant_resolver import VariantResolver


class MediaPurposeOrganizer:
    """Construit les LocalMediaServerFiles de chaque medienset."""

    def __init__(self, variant_resolver: VariantResolver) -> None:
        self._variants = variant_resolver

    def select_video(self, media_set: MediaSet) -> Optional[SupportedVideo]:
        """
        Choisit la video MPEG-4 destinee au medienserver.

        Les suffixes sont parcourus dans l'ordre configure ; sans video
        suffixee, la premiere video MPEG-4 est retenue.
        """
        videos = [
            video
            for video in (SupportedVideo.create(p) for p in media_set.files)
            if video is not None and video.is_primary
        ]
        if not videos:
            return None

        for suffix in self._variants.suffixes:
            for video in videos:
                if video.path.stem.lower().endswith(suffix.lower()):
                    return video
        return videos[0]

    def organize(self, media_set: MediaSet) -> Optional[LocalMediaServerFiles]:
        """
        Retourne la video et les images a integrer, ou None sans video MPEG-4.

        Renseigne aussi media_set.local_media_server_files.
        """
        video = self.select_video(media_set)
        if video is None:
            logger.debug(f"Pas de video MPEG-4 dans le medienset '{media_set.title}'")
            media_set.local_media_server_files = None
            return None

        alternate = self._variants.find_alternate_variant(
            video,
            [p for p in media_set.files if p != video.path],
        )
        if alternate is not None:
            logger.debug(
                f"Variante QuickTime de '{media_set.title}' conservee dans la source: "
                f"{alternate.path.name}"
            )

        images = tuple(
            image
            for image in (SupportedImage.create(p) for p in media_set.files_of_kind(MediaKind.IMAGE))
            if image is not None
        )
        files = LocalMediaServerFiles(video=video, images=images)
        media_set.local_media_server_files = files
        return files

    def organize_all(self, media_sets: list[MediaSet]) -> list[MediaSet]:
        """Organise chaque medienset (en place) et retourne la liste."""
        for media_set in media_sets:
            self.organize(media_set)
        return media_sets
