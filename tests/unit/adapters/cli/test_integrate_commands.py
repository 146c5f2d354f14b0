"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- integrate: code retour selon le rapport, erreurs de configuration
- plan / scan: affichage sans deplacement
- tags / xml: inspection des tags et descripteur Infuse
- info / version
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from src.core.entities.media_set import LocalMediaServerFiles, MediaSet, SupportedVideo
from src.core.entities.report import (
    IntegrationResult,
    IntegrationStage,
    IntegrationStatus,
    RunReport,
    SkippedFile,
)
from src.core.errors import (
    DirectoryNotFoundError,
    FileOperationError,
    MetadataExtractionError,
)
from src.main import app
from src.services.library_engine import PlannedIntegration

runner = CliRunner()

LIBRARY = Path("/lib")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Logs dans tmp_path, configuration minimale."""
    monkeypatch.setenv("MEDIATHEQUE_LOG_FILE", str(tmp_path / "logs" / "test.log"))
    monkeypatch.setenv("MEDIATHEQUE_SOURCE_DIR", str(tmp_path))
    monkeypatch.setenv("MEDIATHEQUE_LIBRARY_DIR", str(tmp_path))


@pytest.fixture
def mock_container():
    """Patche la construction du container dans les helpers CLI."""
    container = MagicMock()
    container.engine.source_dir = Path("/src")
    container.engine.library_dir = LIBRARY
    with patch("src.adapters.cli.helpers.Container") as mock_cls:
        mock_cls.build.return_value = container
        yield container


def _result(title: str, status: IntegrationStatus) -> IntegrationResult:
    return IntegrationResult(
        title=title,
        status=status,
        stage=IntegrationStage.DONE,
        target_path=LIBRARY / "2023" / f"{title}.mp4",
    )


class TestIntegrate:
    def test_success_exit_code_zero(self, mock_container):
        mock_container.engine.run.return_value = RunReport(
            results=[_result("Hochzeit", IntegrationStatus.DONE)],
            skipped_files=[SkippedFile(path=Path("/src/notes.txt"), reason="type inconnu")],
        )

        result = runner.invoke(app, ["integrate"])

        assert result.exit_code == 0
        assert "Hochzeit" in result.output
        assert "notes.txt" in result.output

    def test_error_in_report_exit_code_one(self, mock_container):
        mock_container.engine.run.return_value = RunReport(
            results=[
                _result("Hochzeit", IntegrationStatus.DONE),
                _result("Urlaub", IntegrationStatus.ERROR),
            ]
        )

        result = runner.invoke(app, ["integrate"])

        assert result.exit_code == 1

    def test_configuration_error_exit_code_one(self, mock_container):
        mock_container.engine.run.side_effect = DirectoryNotFoundError(Path("/src"), "source")

        result = runner.invoke(app, ["integrate"])

        assert result.exit_code == 1
        assert "introuvable" in result.output

    def test_workers_option_forwarded(self, mock_container):
        mock_container.engine.run.return_value = RunReport()

        with patch("src.adapters.cli.helpers.Container") as mock_cls:
            mock_cls.build.return_value = mock_container
            result = runner.invoke(app, ["integrate", "--workers", "4"])

        assert result.exit_code == 0
        assert mock_cls.build.call_args.kwargs["max_workers"] == 4

    def test_invalid_workers_rejected(self, mock_container):
        result = runner.invoke(app, ["integrate", "--workers", "0"])
        assert result.exit_code != 0


class TestPlanAndScan:
    def test_plan_shows_targets(self, mock_container):
        media_set = MediaSet(title="2023-05-01 Hochzeit", files=[Path("/src/2023-05-01 Hochzeit.mp4")])
        media_set.local_media_server_files = LocalMediaServerFiles(
            video=SupportedVideo.create(Path("/src/2023-05-01 Hochzeit.mp4"))
        )
        mock_container.engine.plan.return_value = [
            PlannedIntegration(
                media_set=media_set,
                target_path=LIBRARY / "2023" / "2023-05-01" / "Hochzeit.mp4",
            ),
            PlannedIntegration(media_set=MediaSet(title="Kaputt"), error="ffprobe absent"),
        ]

        result = runner.invoke(app, ["plan"])

        assert result.exit_code == 0
        assert "Hochzeit.mp4" in result.output
        assert "ffprobe absent" in result.output
        mock_container.engine.run.assert_not_called()

    def test_scan_lists_media_sets(self, mock_container):
        media_set = MediaSet(title="Hochzeit", files=[Path("/src/Hochzeit-4K.mp4")])
        mock_container.engine.discover.return_value = ([media_set], [])

        result = runner.invoke(app, ["scan"])

        assert result.exit_code == 0
        assert "Hochzeit" in result.output
        mock_container.engine.validate.assert_called_once_with(require_library=False)


class TestTags:
    def test_tags_table(self, mock_container, tmp_path):
        video = tmp_path / "film.mp4"
        video.write_bytes(b"x")
        mock_container.metadata_extractor.get_raw_metadata.return_value = (
            ";FFMETADATA1\nalbum=Familie\n"
        )

        result = runner.invoke(app, ["tags", str(video)])

        assert result.exit_code == 0
        assert "Familie" in result.output

    def test_tags_extraction_error(self, mock_container, tmp_path):
        video = tmp_path / "film.mp4"
        video.write_bytes(b"x")
        mock_container.metadata_extractor.get_raw_metadata.side_effect = (
            MetadataExtractionError("ffmpeg absent")
        )

        result = runner.invoke(app, ["tags", str(video)])

        assert result.exit_code == 1


class TestXml:
    def test_prints_descriptor(self, mock_container, tmp_path):
        video = tmp_path / "film-4K.mp4"
        video.write_bytes(b"x")
        mock_container.infuse_xml_service.read_metadata.return_value = (
            "<media type=\"Other\"><title>Film</title></media>\n"
        )

        result = runner.invoke(app, ["xml", str(video)])

        assert result.exit_code == 0
        assert "<title>Film</title>" in result.output
        mock_container.infuse_xml_service.write_descriptor.assert_not_called()

    def test_save_writes_descriptor(self, mock_container, tmp_path):
        video = tmp_path / "film-4K.mp4"
        video.write_bytes(b"x")
        mock_container.infuse_xml_service.write_descriptor.return_value = tmp_path / "film.xml"

        result = runner.invoke(app, ["xml", str(video), "--save", "--force"])

        assert result.exit_code == 0
        mock_container.infuse_xml_service.write_descriptor.assert_called_once_with(
            video, destination=None, overwrite=True
        )

    def test_output_implies_save(self, mock_container, tmp_path):
        video = tmp_path / "film-4K.mp4"
        video.write_bytes(b"x")
        output = tmp_path / "meta.xml"
        mock_container.infuse_xml_service.write_descriptor.return_value = output

        result = runner.invoke(app, ["xml", str(video), "--output", str(output)])

        assert result.exit_code == 0
        mock_container.infuse_xml_service.write_descriptor.assert_called_once_with(
            video, destination=output, overwrite=False
        )

    def test_existing_descriptor_exit_code_one(self, mock_container, tmp_path):
        video = tmp_path / "film-4K.mp4"
        video.write_bytes(b"x")
        mock_container.infuse_xml_service.write_descriptor.side_effect = FileOperationError(
            "Le descripteur existe deja"
        )

        result = runner.invoke(app, ["xml", str(video), "--save"])

        assert result.exit_code == 1


class TestInfoAndVersion:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "Mediatheque v0.1.0" in result.output

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "-4K" in result.output
