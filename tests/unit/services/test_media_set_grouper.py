"""
Tests unitaires pour MediaSetGrouper.

Verifie que chaque fichier reconnu appartient a exactement un medienset et
que l'ordre d'enumeration est conserve.
"""

from pathlib import Path

import pytest

from src.services.media_set_grouper import MediaSetGrouper


@pytest.fixture
def grouper(variant_resolver):
    return MediaSetGrouper(variant_resolver)


class TestGroup:
    """Tests pour group / group_with_diagnostics."""

    def test_groups_variants_descriptor_and_images(self, grouper):
        files = [
            Path("/src/Hochzeit-1080p.mp4"),
            Path("/src/Hochzeit-4K.mov"),
            Path("/src/Hochzeit-4K.mp4"),
            Path("/src/Hochzeit.jpg"),
            Path("/src/Hochzeit.xml"),
            Path("/src/Urlaub.mp4"),
        ]

        media_sets = grouper.group(files)

        assert [s.title for s in media_sets] == ["Hochzeit", "Urlaub"]
        assert media_sets[0].files == files[:5]
        assert media_sets[1].files == [Path("/src/Urlaub.mp4")]

    def test_every_recognized_file_in_exactly_one_set(self, grouper):
        files = [
            Path("/src/A-4K.mp4"),
            Path("/src/B.mov"),
            Path("/src/a.xml"),
            Path("/src/C-720p.png"),
        ]

        media_sets = grouper.group(files)
        grouped = [f for s in media_sets for f in s.files]

        assert sorted(grouped) == sorted(files)
        assert len(grouped) == len(set(grouped))

    def test_grouping_is_case_insensitive_and_keeps_first_title(self, grouper):
        files = [Path("/src/hochzeit-4K.mp4"), Path("/src/HOCHZEIT.xml")]

        media_sets = grouper.group(files)

        assert len(media_sets) == 1
        assert media_sets[0].title == "hochzeit"

    def test_unrecognized_files_are_reported(self, grouper):
        files = [Path("/src/Hochzeit-4K.mp4"), Path("/src/notes.txt")]

        media_sets, skipped = grouper.group_with_diagnostics(files)

        assert len(media_sets) == 1
        assert [s.path for s in skipped] == [Path("/src/notes.txt")]

    def test_singleton_set(self, grouper):
        media_sets = grouper.group([Path("/src/Solo.mp4")])
        assert len(media_sets) == 1
        assert media_sets[0].title == "Solo"

    def test_empty_listing(self, grouper):
        assert grouper.group([]) == []
