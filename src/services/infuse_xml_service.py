"""
Service de generation des descripteurs Infuse depuis les tags d'une video.

Lit le dump ffmetadata d'une video (MPEG-4 ou QuickTime), le convertit en
document XML Infuse et l'ecrit optionnellement a cote de la video, sous le
nom du descripteur du medienset (suffixe de variante retire).
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.entities.media_set import SupportedVideo
from src.core.errors import FileOperationError, MetadataExtractionError
from src.core.ports.file_system import IFileOperations
from src.core.ports.parser import IDescriptorParser, IMetadataExtractor
from src.services.variant_resolver import VariantResolver


class InfuseXmlService:
    """
    Conversion tags video -> descripteur XML Infuse.

    Utilisation:
        service = InfuseXmlService(extractor, parser, file_ops, resolver)
        xml = service.read_metadata(Path("/src/2023-05-01 Hochzeit-4K.mp4"))
        path = service.write_descriptor(Path("/src/2023-05-01 Hochzeit-4K.mp4"))
        # -> /src/2023-05-01 Hochzeit.xml
    """

    def __init__(
        self,
        metadata_extractor: IMetadataExtractor,
        descriptor_parser: IDescriptorParser,
        file_operations: IFileOperations,
        variant_resolver: VariantResolver,
        descriptor_extension: str = ".xml",
    ) -> None:
        self._extractor = metadata_extractor
        self._parser = descriptor_parser
        self._fs = file_operations
        self._resolver = variant_resolver
        self._descriptor_extension = descriptor_extension

    def read_metadata(self, video_path: Path) -> str:
        """
        Retourne le descripteur Infuse construit depuis les tags de la video.

        Raises:
            MetadataExtractionError: Fichier non video ou echec de ffmpeg
        """
        video = SupportedVideo.create(video_path)
        if video is None:
            raise MetadataExtractionError(
                f"{video_path.name} n'est ni une video MPEG-4 ni un film QuickTime"
            )

        logger.info(f"Extraction des metadonnees de {video_path.name} ({video.kind.value})")
        tags = self._extractor.get_tags(video_path)
        logger.debug(f"Tags extraits de {video_path.name}: {sorted(tags)}")
        return self._parser.render(tags)

    def descriptor_path(self, video_path: Path) -> Path:
        """Chemin du descripteur du medienset de la video (meme repertoire)."""
        base = self._resolver.strip_variant_suffix(video_path.stem)
        return video_path.parent / f"{base}{self._descriptor_extension}"

    def write_descriptor(
        self,
        video_path: Path,
        destination: Optional[Path] = None,
        overwrite: bool = False,
    ) -> Path:
        """
        Ecrit le descripteur Infuse de la video.

        Args:
            video_path: Video source des tags
            destination: Fichier cible (defaut : descriptor_path)
            overwrite: Remplace un descripteur existant

        Returns:
            Chemin du descripteur ecrit

        Raises:
            MetadataExtractionError: Si les tags sont illisibles
            FileOperationError: Si l'ecriture echoue ou si le fichier existe
        """
        content = self.read_metadata(video_path)
        target = destination or self.descriptor_path(video_path)

        if not overwrite and self._fs.exists(target):
            raise FileOperationError(f"Le descripteur {target} existe deja")
        if not self._fs.write_file(target, content, overwrite=overwrite):
            raise FileOperationError(f"Impossible d'ecrire le descripteur {target}")

        logger.info(f"Descripteur Infuse ecrit: {target}")
        return target
