"""
Fixtures pytest partagees pour les tests Mediatheque.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileOperations, IMetadataExtractor)
- Settings de test avec chemins temporaires
- Repertoires source et mediatheque temporaires
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.config import Settings
from src.core.ports.file_system import IFileOperations
from src.core.ports.parser import IMetadataExtractor
from src.services.variant_resolver import VariantResolver


@pytest.fixture
def mock_file_operations() -> MagicMock:
    """
    Mock de IFileOperations pour les tests.

    Par defaut : aucune destination n'existe, toutes les operations reussissent.
    Configurer le mock dans chaque test pour des comportements specifiques.
    """
    mock = MagicMock(spec=IFileOperations)
    mock.exists.return_value = False
    mock.list_files.return_value = []
    mock.read_file.return_value = None
    mock.write_file.return_value = True
    mock.create_directory.return_value = True
    mock.move_file.return_value = True
    mock.copy_file.return_value = True
    mock.delete.return_value = True
    mock.calculate_hash.return_value = "abc123hash"
    return mock


@pytest.fixture
def mock_metadata_extractor() -> MagicMock:
    """
    Mock de IMetadataExtractor pour les tests.

    Retourne l'album "Familie" par defaut.
    """
    mock = MagicMock(spec=IMetadataExtractor)
    mock.get_field.return_value = "Familie"
    mock.get_raw_metadata.return_value = ";FFMETADATA1\nalbum=Familie\n"
    mock.get_tags.return_value = {"album": "Familie"}
    return mock


@pytest.fixture
def variant_resolver() -> VariantResolver:
    """VariantResolver avec les suffixes par defaut."""
    return VariantResolver(["-4K", "-1080p", "-720p"])


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Repertoire source temporaire."""
    directory = tmp_path / "source"
    directory.mkdir()
    return directory


@pytest.fixture
def library_dir(tmp_path: Path) -> Path:
    """Racine de mediatheque temporaire."""
    directory = tmp_path / "library"
    directory.mkdir()
    return directory


@pytest.fixture
def test_settings(tmp_path: Path, source_dir: Path, library_dir: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour creer une structure de repertoires
    isolee pour chaque test.
    """
    return Settings(
        source_dir=source_dir,
        library_dir=library_dir,
        variant_suffixes=["-4K", "-1080p", "-720p"],
        banner_file_postfix="-fanart",
        log_file=tmp_path / "test.log",
    )
