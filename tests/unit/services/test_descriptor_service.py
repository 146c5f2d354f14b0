"""
Tests unitaires pour DescriptorService.
"""

from datetime import date
from pathlib import Path

import pytest

from src.adapters.parsing.descriptor_parser import XmlDescriptorParser
from src.core.entities.media_set import MediaSet
from src.services.descriptor_service import DescriptorService

VALID_XML = (
    "<media><title>2023-05-01 Hochzeit Meier</title>"
    "<album>Familie</album><published>2023-05-01</published></media>"
)


@pytest.fixture
def service(mock_file_operations, variant_resolver):
    return DescriptorService(mock_file_operations, XmlDescriptorParser(), variant_resolver)


class TestReadDescriptor:
    def test_valid_descriptor(self, service, mock_file_operations):
        mock_file_operations.read_file.return_value = VALID_XML

        descriptor = service.read_descriptor(Path("/src/Hochzeit.xml"))

        assert descriptor.album == "Familie"
        assert descriptor.published == date(2023, 5, 1)

    def test_unreadable_file(self, service, mock_file_operations):
        mock_file_operations.read_file.return_value = None
        assert service.read_descriptor(Path("/src/Hochzeit.xml")) is None

    def test_unrecognized_xml(self, service, mock_file_operations):
        mock_file_operations.read_file.return_value = "<config><debug>1</debug></config>"
        assert service.read_descriptor(Path("/src/settings.xml")) is None


class TestListDescriptors:
    def test_only_valid_descriptors(self, service, mock_file_operations):
        mock_file_operations.list_files.return_value = [
            Path("/src/Hochzeit.xml"),
            Path("/src/Hochzeit-4K.mp4"),
            Path("/src/broken.xml"),
        ]
        contents = {Path("/src/Hochzeit.xml"): VALID_XML, Path("/src/broken.xml"): "<media"}
        mock_file_operations.read_file.side_effect = contents.get

        result = service.list_descriptors(Path("/src"))

        assert [d.path for d in result] == [Path("/src/Hochzeit.xml")]


class TestAttachDescriptors:
    def test_attaches_descriptor_named_after_variant(self, service, mock_file_operations):
        mock_file_operations.read_file.return_value = VALID_XML
        media_set = MediaSet(
            title="Hochzeit",
            files=[Path("/src/Hochzeit-4K.mp4"), Path("/src/Hochzeit.xml")],
        )

        service.attach_descriptors([media_set])

        mock_file_operations.read_file.assert_called_once_with(Path("/src/Hochzeit.xml"))
        assert media_set.descriptor.title == "2023-05-01 Hochzeit Meier"

    def test_unsuffixed_video_uses_set_descriptor(self, service, mock_file_operations):
        mock_file_operations.read_file.return_value = VALID_XML
        media_set = MediaSet(
            title="Hochzeit",
            files=[Path("/src/Hochzeit.mp4"), Path("/src/Hochzeit.xml")],
        )

        service.attach_descriptors([media_set])

        assert media_set.descriptor is not None

    def test_set_without_descriptor(self, service, mock_file_operations):
        media_set = MediaSet(title="Urlaub", files=[Path("/src/Urlaub.mp4")])

        service.attach_descriptors([media_set])

        assert media_set.descriptor is None
        mock_file_operations.read_file.assert_not_called()
