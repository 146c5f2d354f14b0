"""
Moteur d'integration de la mediatheque.

Enchaine les etapes sur un repertoire source :
    enumeration -> regroupement en mediensets -> descripteurs
    -> classification -> integration de chaque medienset -> rapport

Un echec sur un medienset n'interrompt jamais les suivants ; seules les
erreurs de configuration (repertoires absents, suffixes vides) arretent le
lancement avant tout traitement.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

from src.core.entities.media_set import MediaSet
from src.core.entities.report import (
    IntegrationResult,
    IntegrationStage,
    IntegrationStatus,
    RunReport,
    SkippedFile,
)
from src.core.errors import (
    ConfigurationError,
    DirectoryNotFoundError,
    MetadataExtractionError,
    PathResolutionError,
)
from src.core.ports.file_system import IFileOperations
from src.services.descriptor_service import DescriptorService
from src.services.media_integrator import MediaIntegrator
from src.services.media_set_grouper import MediaSetGrouper
from src.services.purpose_organizer import MediaPurposeOrganizer


@dataclass
class PlannedIntegration:
    """
    Integration prevue d'un medienset (mode simulation).

    Attributs :
        media_set : Medienset concerne
        target_path : Chemin cible de la video (None si non calculable)
        error : Message d'erreur si le chemin n'a pas pu etre calcule
    """

    media_set: MediaSet
    target_path: Optional[Path] = None
    error: Optional[str] = None


class LibraryEngine:
    """
    Orchestration d'un lancement complet sur le repertoire source.

    Utilisation:
        engine = LibraryEngine(source_dir, library_dir, fs, grouper, descriptors,
                               organizer, integrator, max_workers=4)
        report = engine.run()
    """

    def __init__(
        self,
        source_dir: Optional[Path],
        library_dir: Optional[Path],
        file_operations: IFileOperations,
        grouper: MediaSetGrouper,
        descriptor_service: DescriptorService,
        organizer: MediaPurposeOrganizer,
        integrator: MediaIntegrator,
        max_workers: int = 1,
    ) -> None:
        self._source_dir = source_dir
        self._library_dir = library_dir
        self._fs = file_operations
        self._grouper = grouper
        self._descriptors = descriptor_service
        self._organizer = organizer
        self._integrator = integrator
        self._max_workers = max(1, max_workers)

    @property
    def source_dir(self) -> Optional[Path]:
        return self._source_dir

    @property
    def library_dir(self) -> Optional[Path]:
        return self._library_dir

    def validate(self, require_library: bool = True) -> None:
        """
        Verifie la configuration avant tout traitement.

        Raises:
            ConfigurationError: Repertoire non configure
            DirectoryNotFoundError: Repertoire configure mais absent
        """
        if self._source_dir is None:
            raise ConfigurationError("Le repertoire source n'est pas configure.")
        if not self._fs.exists(self._source_dir):
            raise DirectoryNotFoundError(self._source_dir, "source")

        if not require_library:
            return
        if self._library_dir is None:
            raise ConfigurationError("Le repertoire de la mediatheque n'est pas configure.")
        if not self._fs.exists(self._library_dir):
            raise DirectoryNotFoundError(self._library_dir, "mediatheque")

    def discover(self) -> tuple[list[MediaSet], list[SkippedFile]]:
        """
        Enumere le repertoire source et prepare les mediensets.

        Returns:
            Tuple (mediensets classes, fichiers ecartes)
        """
        files = self._fs.list_files(self._source_dir)
        logger.info(f"Fichiers trouves dans {self._source_dir}: {len(files)}")

        media_sets, skipped = self._grouper.group_with_diagnostics(files)
        logger.info(f"Mediensets trouves: {len(media_sets)}")

        self._descriptors.attach_descriptors(media_sets)
        self._organizer.organize_all(media_sets)
        return media_sets, skipped

    def plan(self) -> list[PlannedIntegration]:
        """
        Calcule les chemins cibles sans rien deplacer.

        Raises:
            ConfigurationError, DirectoryNotFoundError
        """
        self.validate(require_library=False)
        media_sets, _ = self.discover()

        planned = []
        for media_set in media_sets:
            try:
                target = self._integrator.resolve_target(media_set)
            except (MetadataExtractionError, PathResolutionError) as e:
                planned.append(PlannedIntegration(media_set=media_set, error=str(e)))
                continue
            planned.append(PlannedIntegration(media_set=media_set, target_path=target))
        return planned

    def _integrate_safely(self, media_set: MediaSet) -> IntegrationResult:
        """Integre un medienset ; une exception inattendue devient un resultat ERROR."""
        try:
            return self._integrator.integrate(media_set)
        except Exception as e:
            logger.exception(f"Erreur inattendue sur le medienset '{media_set.title}'")
            return IntegrationResult(
                title=media_set.title,
                status=IntegrationStatus.ERROR,
                stage=IntegrationStage.START,
                error=str(e),
            )

    def run(
        self,
        on_result: Optional[Callable[[IntegrationResult], None]] = None,
    ) -> RunReport:
        """
        Integre tous les mediensets du repertoire source.

        Args:
            on_result: Callback appele apres chaque medienset (progression)

        Returns:
            RunReport avec un resultat par medienset, dans l'ordre de decouverte

        Raises:
            ConfigurationError, DirectoryNotFoundError
        """
        self.validate()
        media_sets, skipped = self.discover()

        results: list[IntegrationResult] = []
        if self._max_workers == 1 or len(media_sets) <= 1:
            for media_set in media_sets:
                result = self._integrate_safely(media_set)
                results.append(result)
                if on_result:
                    on_result(result)
        else:
            logger.info(f"Integration parallele ({self._max_workers} workers)")
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                # map() conserve l'ordre de decouverte
                for result in executor.map(self._integrate_safely, media_sets):
                    results.append(result)
                    if on_result:
                        on_result(result)

        report = RunReport(results=results, skipped_files=skipped)
        logger.info(
            "Integration terminee",
            done=report.count(IntegrationStatus.DONE),
            partial=report.count(IntegrationStatus.PARTIALLY_DONE),
            skipped=report.count(IntegrationStatus.SKIPPED),
            errors=report.count(IntegrationStatus.ERROR),
        )
        return report
