"""
Service de lecture des fichiers descripteurs XML.

Chaque variante d'un medienset est accompagnee d'un descripteur nomme
d'apres la variante sans son suffixe ("Hochzeit-4K.mp4" -> "Hochzeit.xml").
Un XML qui n'est pas un descripteur reconnu est ignore (avertissement).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.entities.media_set import MediaSet
from src.core.errors import VariantResolutionError
from src.core.ports.file_system import IFileOperations
from src.core.ports.parser import IDescriptorParser
from src.core.value_objects.descriptor import Descriptor
from src.core.value_objects.media_kind import MediaKind, classify_media_kind
from src.services.variant_resolver import VariantResolver


@dataclass(frozen=True)
class DescriptorFile:
    """Descripteur XML valide et son emplacement."""

    path: Path
    descriptor: Descriptor


class DescriptorService:
    """
    Lecture des descripteurs XML et rattachement aux mediensets.

    Methodes :
        read_descriptor: Lit et parse un descripteur
        list_descriptors: Descripteurs valides d'un repertoire
        attach_descriptors: Renseigne MediaSet.descriptor
    """

    def __init__(
        self,
        file_operations: IFileOperations,
        parser: IDescriptorParser,
        variant_resolver: VariantResolver,
    ) -> None:
        self._fs = file_operations
        self._parser = parser
        self._variants = variant_resolver

    def read_descriptor(self, path: Path) -> Optional[Descriptor]:
        """Lit un descripteur, None s'il est illisible ou non reconnu."""
        content = self._fs.read_file(path)
        if content is None:
            logger.warning(f"Le fichier XML {path} n'a pas pu etre lu")
            return None

        descriptor = self._parser.parse(content)
        if descriptor is None:
            logger.warning(f"Le fichier XML {path} n'est pas un descripteur reconnu, ignore")
        return descriptor

    def list_descriptors(self, directory: Path) -> list[DescriptorFile]:
        """Retourne les descripteurs valides d'un repertoire (non recursif)."""
        xml_files = [
            path
            for path in self._fs.list_files(directory)
            if classify_media_kind(path) == MediaKind.DESCRIPTOR
        ]
        logger.info(f"Fichiers XML trouves: {len(xml_files)}")

        descriptor_files = []
        for path in xml_files:
            descriptor = self.read_descriptor(path)
            if descriptor is not None:
                descriptor_files.append(DescriptorFile(path=path, descriptor=descriptor))

        logger.info(f"Descripteurs valides: {len(descriptor_files)}")
        return descriptor_files

    def _descriptor_path_for(self, media_set: MediaSet) -> Optional[Path]:
        """Nom de descripteur attendu, deduit des videos du medienset."""
        xml_by_name = {
            path.name.lower(): path
            for path in media_set.files_of_kind(MediaKind.DESCRIPTOR)
        }
        if not xml_by_name:
            return None

        videos = media_set.files_of_kind(MediaKind.PRIMARY_VIDEO) + media_set.files_of_kind(
            MediaKind.ALTERNATE_VIDEO
        )
        for video in videos:
            try:
                expected = self._variants.resolve_descriptor_name(video)
            except VariantResolutionError as e:
                logger.warning(str(e))
                continue
            if expected.name.lower() in xml_by_name:
                return xml_by_name[expected.name.lower()]

        # Medienset sans variante suffixee : premier XML du medienset
        return next(iter(xml_by_name.values()))

    def attach_descriptors(self, media_sets: list[MediaSet]) -> None:
        """Renseigne le descripteur de chaque medienset (en place)."""
        for media_set in media_sets:
            path = self._descriptor_path_for(media_set)
            if path is None:
                continue
            media_set.descriptor = self.read_descriptor(path)
            if media_set.descriptor is not None:
                logger.debug(
                    f"Descripteur de '{media_set.title}': album={media_set.descriptor.album}, "
                    f"publie={media_set.descriptor.published_label}"
                )
