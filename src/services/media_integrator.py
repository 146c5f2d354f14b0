"""
Service d'integration d'un medienset dans la mediatheque.

Machine a etats par medienset :

    START -> METADATA_RESOLVED -> PATH_RESOLVED -> DIRECTORY_ENSURED
          -> VIDEO_MOVED -> IMAGES_RESOLVED -> DONE

- Un echec avant VIDEO_MOVED est fatal pour le medienset (ERROR).
- Un echec sur les images apres le deplacement de la video donne
  PARTIALLY_DONE : la video n'est jamais remise a sa place d'origine.
- Une destination deja presente avec le meme contenu est consideree comme
  un deplacement deja applique (reprise apres interruption) ; avec un
  contenu different, elle n'est jamais ecrasee.
"""

from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.entities.media_set import (
    LocalMediaServerFiles,
    MediaSet,
    SupportedImage,
    SupportedVideo,
)
from src.core.entities.report import IntegrationResult, IntegrationStage, IntegrationStatus
from src.core.errors import (
    ConfigurationError,
    FileOperationError,
    MetadataExtractionError,
    PathResolutionError,
)
from src.core.ports.file_system import IFileOperations
from src.core.ports.parser import IMetadataExtractor
from src.services.poster_fanart import PosterFanartSelector
from src.services.target_path import TargetPathResolver, parse_recording_date


class MediaIntegrator:
    """
    Orchestre l'integration d'un medienset : metadonnees -> chemin ->
    repertoire -> video -> images -> rapport.

    Utilisation:
        integrator = MediaIntegrator(extractor, file_ops, selector, resolver, "-fanart")
        result = integrator.integrate(media_set)
        if result.success:
            print(result.files.video.path)
    """

    def __init__(
        self,
        metadata_extractor: IMetadataExtractor,
        file_operations: IFileOperations,
        poster_fanart_selector: PosterFanartSelector,
        target_path_resolver: TargetPathResolver,
        banner_file_postfix: Optional[str],
    ) -> None:
        """
        Args:
            metadata_extractor: Lecture du tag album
            file_operations: Operations fichiers (repertoires, deplacements)
            poster_fanart_selector: Attribution poster / fanart
            target_path_resolver: Calcul du chemin cible
            banner_file_postfix: Postfixe du fichier banner (ex: "-fanart")
        """
        self._extractor = metadata_extractor
        self._fs = file_operations
        self._selector = poster_fanart_selector
        self._resolver = target_path_resolver
        self._banner_postfix = banner_file_postfix

    def resolve_metadata(
        self, media_set: MediaSet, video_path: Path
    ) -> tuple[Optional[str], Optional[date]]:
        """
        Retourne (album, date d'enregistrement) du medienset.

        L'album provient du tag de la video (vide -> None), la date du
        premier mot du titre.

        Raises:
            MetadataExtractionError: Si l'outil d'inspection echoue
        """
        album = self._extractor.get_field(video_path, "album") or None
        recording_date = parse_recording_date(media_set.title)

        if album is None:
            logger.debug(f"Pas de tag album pour {video_path.name}")
        if recording_date is None:
            logger.debug(f"Pas de date d'enregistrement dans le titre '{media_set.title}'")
        return album, recording_date

    def resolve_target(self, media_set: MediaSet) -> Optional[Path]:
        """
        Calcule le chemin cible de la video sans rien deplacer.

        Returns:
            Chemin cible, ou None si le medienset n'a pas de video a integrer

        Raises:
            MetadataExtractionError, PathResolutionError
        """
        files = media_set.local_media_server_files
        if files is None:
            return None
        album, recording_date = self.resolve_metadata(media_set, files.video.path)
        return self._resolver.resolve(
            album, recording_date, media_set.title, files.video.path.suffix
        )

    def integrate(self, media_set: MediaSet) -> IntegrationResult:
        """
        Integre un medienset dans la mediatheque.

        Les erreurs sont consignees dans le resultat et ne sont jamais propagees :
        l'integration des mediensets suivants n'est pas interrompue.

        Args:
            media_set: Medienset avec ses LocalMediaServerFiles

        Returns:
            IntegrationResult (DONE, PARTIALLY_DONE, SKIPPED ou ERROR)
        """
        title = media_set.title
        files = media_set.local_media_server_files
        if files is None:
            logger.info(f"Aucune video pour le medienserver dans '{title}', medienset ignore")
            return IntegrationResult(
                title=title,
                status=IntegrationStatus.SKIPPED,
                stage=IntegrationStage.START,
            )

        video = files.video
        logger.info(f"Integration du medienset '{title}' ({video.path.name})")

        # START -> METADATA_RESOLVED
        try:
            album, recording_date = self.resolve_metadata(media_set, video.path)
        except MetadataExtractionError as e:
            return self._failure(title, IntegrationStage.METADATA_RESOLVED, str(e))
        logger.info(f"Album: {album or '-'}, date d'enregistrement: {recording_date or '-'}")

        # -> PATH_RESOLVED
        try:
            target = self._resolver.resolve(album, recording_date, title, video.path.suffix)
        except PathResolutionError as e:
            return self._failure(title, IntegrationStage.PATH_RESOLVED, str(e))
        logger.info(f"Chemin cible: {target}")

        # -> DIRECTORY_ENSURED
        if not self._fs.create_directory(target.parent):
            return self._failure(
                title,
                IntegrationStage.DIRECTORY_ENSURED,
                f"Impossible de creer le repertoire {target.parent}",
                target,
            )

        # -> VIDEO_MOVED
        warnings: list[str] = []
        try:
            self._place(video.path, target, warnings)
        except FileOperationError as e:
            return self._failure(title, IntegrationStage.VIDEO_MOVED, str(e), target)
        moved_video = replace(video, path=target)

        # -> IMAGES_RESOLVED
        try:
            moved_images = self._place_images(files.images, target, warnings)
        except (FileOperationError, ConfigurationError) as e:
            logger.warning(f"Images non integrees pour '{title}': {e}")
            return self._partial(title, moved_video, target, warnings, str(e))
        except Exception as e:
            # La video est deja dans la mediatheque : l'echec reste partiel
            logger.exception(f"Erreur inattendue sur les images de '{title}'")
            return self._partial(
                title, moved_video, target, warnings, f"{type(e).__name__}: {e}"
            )

        logger.info(f"Medienset '{title}' integre: {target}")
        return IntegrationResult(
            title=title,
            status=IntegrationStatus.DONE,
            stage=IntegrationStage.DONE,
            files=LocalMediaServerFiles(video=moved_video, images=moved_images),
            target_path=target,
            warnings=warnings,
        )

    def _place_images(
        self,
        images: tuple[SupportedImage, ...],
        video_target: Path,
        warnings: list[str],
    ) -> tuple[SupportedImage, ...]:
        """
        Deplace les images a cote de la video.

        Une image : poster "<titre><ext>". Deux images ou plus : poster et
        fanart "<titre><postfixe banner><ext>".

        Raises:
            ConfigurationError: Postfixe banner manquant (deux images ou plus)
            FileOperationError: Echec d'un deplacement
        """
        if not images:
            logger.info("Aucune image pour ce medienset")
            return ()

        directory = video_target.parent
        base_name = video_target.stem

        if len(images) == 1:
            poster = images[0]
            destination = self._resolver.image_path(directory, base_name, poster.path.suffix)
            self._place(poster.path, destination, warnings)
            return (replace(poster, path=destination),)

        if not self._banner_postfix or not self._banner_postfix.strip():
            raise ConfigurationError(
                "Le postfixe du fichier banner n'est pas configure."
            )

        selection = self._selector.select(images)
        for extra in selection.ignored:
            warnings.append(f"Image ignoree: {extra.path.name}")

        poster_destination = self._resolver.image_path(
            directory, base_name, selection.poster.path.suffix
        )
        self._place(selection.poster.path, poster_destination, warnings)
        moved = [replace(selection.poster, path=poster_destination)]

        if selection.fanart is not None:
            fanart_destination = self._resolver.image_path(
                directory, base_name, selection.fanart.path.suffix, self._banner_postfix
            )
            self._place(selection.fanart.path, fanart_destination, warnings)
            moved.append(replace(selection.fanart, path=fanart_destination))

        return tuple(moved)

    def _place(self, source: Path, destination: Path, warnings: list[str]) -> None:
        """
        Deplace un fichier vers sa destination sans jamais l'ecraser.

        Une source identique a la destination deja presente est retiree ; si
        ce retrait echoue, un avertissement est ajoute a warnings.

        Raises:
            FileOperationError: Deplacement echoue ou destination differente existante
        """
        if self._fs.exists(destination):
            if not self._fs.exists(source):
                logger.info(f"Deja present dans la mediatheque: {destination}")
                return
            source_hash = self._fs.calculate_hash(source)
            if source_hash is not None and source_hash == self._fs.calculate_hash(destination):
                if self._fs.delete(source):
                    logger.info(f"Fichier identique deja present, source retiree: {destination}")
                else:
                    logger.warning(
                        f"Fichier identique deja present, source non supprimee: {source}"
                    )
                    warnings.append(f"Source non supprimee: {source.name}")
                return
            raise FileOperationError(
                f"La destination {destination} existe deja avec un contenu different"
            )

        if not self._fs.move_file(source, destination):
            raise FileOperationError(f"Impossible de deplacer {source} vers {destination}")
        logger.debug(f"Deplace: {source.name} -> {destination}")

    def _partial(
        self,
        title: str,
        moved_video: SupportedVideo,
        target: Path,
        warnings: list[str],
        message: str,
    ) -> IntegrationResult:
        """Resultat PARTIALLY_DONE : video integree, images omises."""
        warnings.append(message)
        return IntegrationResult(
            title=title,
            status=IntegrationStatus.PARTIALLY_DONE,
            stage=IntegrationStage.IMAGES_RESOLVED,
            files=LocalMediaServerFiles(video=moved_video),
            target_path=target,
            warnings=warnings,
        )

    def _failure(
        self,
        title: str,
        stage: IntegrationStage,
        message: str,
        target: Optional[Path] = None,
    ) -> IntegrationResult:
        logger.error(f"Echec de l'integration de '{title}' ({stage.value}): {message}")
        return IntegrationResult(
            title=title,
            status=IntegrationStatus.ERROR,
            stage=stage,
            target_path=target,
            error=message,
        )
