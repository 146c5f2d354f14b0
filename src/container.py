"""
Construction explicite des composants de l'application.

Chaque composant est construit une seule fois par execution a partir des
Settings ; les interfaces CLI n'instancient jamais les adaptateurs
elles-memes.
"""

from typing import Optional

from .adapters.file_system import FileSystemAdapter
from .adapters.parsing.descriptor_parser import XmlDescriptorParser
from .adapters.parsing.ffmpeg_metadata_extractor import FFmpegMetadataExtractor
from .adapters.process.command_executor import SubprocessCommandExecutor
from .config import Settings
from .services.descriptor_service import DescriptorService
from .services.infuse_xml_service import InfuseXmlService
from .services.library_engine import LibraryEngine
from .services.media_integrator import MediaIntegrator
from .services.media_set_grouper import MediaSetGrouper
from .services.poster_fanart import PosterFanartSelector
from .services.purpose_organizer import MediaPurposeOrganizer
from .services.target_path import TargetPathResolver
from .services.variant_resolver import VariantResolver


class Container:
    """Composants de l'application, construits a partir des Settings.

    Utilisation :
        container = Container.build()
        report = container.engine.run()
        album = container.metadata_extractor.get_album(path)

    Raises:
        ConfigurationError: Si aucun suffixe de variante n'est configure
    """

    def __init__(self, settings: Settings, max_workers: Optional[int] = None) -> None:
        self.config = settings

        # Adapters - implementations concretes des ports
        self.file_system = FileSystemAdapter()
        self.command_executor = SubprocessCommandExecutor(
            timeout_seconds=settings.tool_timeout_seconds
        )
        self.metadata_extractor = FFmpegMetadataExtractor(
            self.command_executor,
            ffmpeg_binary=settings.ffmpeg_binary,
            ffprobe_binary=settings.ffprobe_binary,
        )
        self.descriptor_parser = XmlDescriptorParser()

        # Services
        self.variant_resolver = VariantResolver(
            settings.variant_suffixes, settings.descriptor_extension
        )
        self.grouper = MediaSetGrouper(self.variant_resolver)
        self.descriptor_service = DescriptorService(
            self.file_system, self.descriptor_parser, self.variant_resolver
        )
        self.organizer = MediaPurposeOrganizer(self.variant_resolver)
        self.infuse_xml_service = InfuseXmlService(
            self.metadata_extractor,
            self.descriptor_parser,
            self.file_system,
            self.variant_resolver,
            settings.descriptor_extension,
        )
        self.target_path_resolver = TargetPathResolver(settings.library_dir)
        self.integrator = MediaIntegrator(
            metadata_extractor=self.metadata_extractor,
            file_operations=self.file_system,
            poster_fanart_selector=PosterFanartSelector(),
            target_path_resolver=self.target_path_resolver,
            banner_file_postfix=settings.banner_file_postfix,
        )
        self.engine = LibraryEngine(
            source_dir=settings.source_dir,
            library_dir=settings.library_dir,
            file_operations=self.file_system,
            grouper=self.grouper,
            descriptor_service=self.descriptor_service,
            organizer=self.organizer,
            integrator=self.integrator,
            max_workers=max_workers or settings.max_workers,
        )

    @classmethod
    def build(
        cls, settings: Optional[Settings] = None, max_workers: Optional[int] = None
    ) -> "Container":
        """Construit le container (Settings lus depuis l'environnement par defaut)."""
        return cls(settings or Settings(), max_workers=max_workers)
