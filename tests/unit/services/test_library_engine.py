"""
Tests unitaires pour LibraryEngine.

Les composants sont des mocks : ces tests verifient l'orchestration
(validation, ordre des resultats, isolation des echecs).
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.core.entities.media_set import MediaSet
from src.core.entities.report import (
    IntegrationResult,
    IntegrationStage,
    IntegrationStatus,
    SkippedFile,
)
from src.core.errors import (
    ConfigurationError,
    DirectoryNotFoundError,
    MetadataExtractionError,
)
from src.services.descriptor_service import DescriptorService
from src.services.library_engine import LibraryEngine
from src.services.media_integrator import MediaIntegrator
from src.services.media_set_grouper import MediaSetGrouper
from src.services.purpose_organizer import MediaPurposeOrganizer

SOURCE = Path("/src")
LIBRARY = Path("/lib")


@pytest.fixture
def media_sets() -> list[MediaSet]:
    return [MediaSet(title=f"Set {i}", files=[Path(f"/src/Set {i}.mp4")]) for i in range(5)]


@pytest.fixture
def mock_grouper(media_sets) -> MagicMock:
    mock = MagicMock(spec=MediaSetGrouper)
    mock.group_with_diagnostics.return_value = (
        media_sets,
        [SkippedFile(path=Path("/src/notes.txt"), reason="type de fichier non reconnu")],
    )
    return mock


@pytest.fixture
def mock_integrator() -> MagicMock:
    mock = MagicMock(spec=MediaIntegrator)
    mock.integrate.side_effect = lambda media_set: IntegrationResult(
        title=media_set.title,
        status=IntegrationStatus.DONE,
        stage=IntegrationStage.DONE,
    )
    return mock


def _engine(mock_file_operations, mock_grouper, mock_integrator, **kwargs) -> LibraryEngine:
    options = {"source_dir": SOURCE, "library_dir": LIBRARY, "max_workers": 1}
    options.update(kwargs)
    return LibraryEngine(
        file_operations=mock_file_operations,
        grouper=mock_grouper,
        descriptor_service=MagicMock(spec=DescriptorService),
        organizer=MagicMock(spec=MediaPurposeOrganizer),
        integrator=mock_integrator,
        **options,
    )


class TestValidate:
    """Les erreurs de configuration arretent le lancement."""

    def test_missing_source_config(self, mock_file_operations, mock_grouper, mock_integrator):
        engine = _engine(mock_file_operations, mock_grouper, mock_integrator, source_dir=None)
        with pytest.raises(ConfigurationError):
            engine.run()
        mock_integrator.integrate.assert_not_called()

    def test_missing_source_directory(self, mock_file_operations, mock_grouper, mock_integrator):
        mock_file_operations.exists.return_value = False
        engine = _engine(mock_file_operations, mock_grouper, mock_integrator)
        with pytest.raises(DirectoryNotFoundError):
            engine.run()

    def test_missing_library_config(self, mock_file_operations, mock_grouper, mock_integrator):
        mock_file_operations.exists.return_value = True
        engine = _engine(mock_file_operations, mock_grouper, mock_integrator, library_dir=None)
        with pytest.raises(ConfigurationError):
            engine.run()

    def test_library_not_required_for_scan(
        self, mock_file_operations, mock_grouper, mock_integrator
    ):
        mock_file_operations.exists.return_value = True
        engine = _engine(mock_file_operations, mock_grouper, mock_integrator, library_dir=None)
        engine.validate(require_library=False)


class TestRun:
    """Tests pour run."""

    @pytest.mark.parametrize("workers", [1, 3])
    def test_results_keep_discovery_order(
        self, mock_file_operations, mock_grouper, mock_integrator, media_sets, workers
    ):
        mock_file_operations.exists.return_value = True
        engine = _engine(
            mock_file_operations, mock_grouper, mock_integrator, max_workers=workers
        )

        report = engine.run()

        assert [r.title for r in report.results] == [s.title for s in media_sets]
        assert report.count(IntegrationStatus.DONE) == 5
        assert len(report.skipped_files) == 1

    def test_unexpected_failure_does_not_stop_siblings(
        self, mock_file_operations, mock_grouper, mock_integrator
    ):
        mock_file_operations.exists.return_value = True

        def integrate(media_set):
            if media_set.title == "Set 2":
                raise RuntimeError("boom")
            return IntegrationResult(
                title=media_set.title,
                status=IntegrationStatus.DONE,
                stage=IntegrationStage.DONE,
            )

        mock_integrator.integrate.side_effect = integrate
        engine = _engine(mock_file_operations, mock_grouper, mock_integrator)

        report = engine.run()

        assert report.count(IntegrationStatus.DONE) == 4
        assert report.results[2].status == IntegrationStatus.ERROR
        assert report.results[2].error == "boom"

    def test_on_result_callback(self, mock_file_operations, mock_grouper, mock_integrator):
        mock_file_operations.exists.return_value = True
        seen = []
        engine = _engine(mock_file_operations, mock_grouper, mock_integrator)

        engine.run(on_result=seen.append)

        assert len(seen) == 5


class TestPlan:
    def test_plan_collects_targets_and_errors(
        self, mock_file_operations, mock_grouper, mock_integrator
    ):
        mock_file_operations.exists.return_value = True
        mock_integrator.resolve_target.side_effect = [
            Path("/lib/2023/2023-05-01/Set 0.mp4"),
            None,
            MetadataExtractionError("ffprobe absent"),
            Path("/lib/unknown/Set 3.mp4"),
            Path("/lib/unknown/Set 4.mp4"),
        ]
        engine = _engine(mock_file_operations, mock_grouper, mock_integrator)

        planned = engine.plan()

        assert planned[0].target_path == Path("/lib/2023/2023-05-01/Set 0.mp4")
        assert planned[1].target_path is None
        assert planned[2].error == "ffprobe absent"
        mock_integrator.integrate.assert_not_called()
        mock_file_operations.move_file.assert_not_called()
