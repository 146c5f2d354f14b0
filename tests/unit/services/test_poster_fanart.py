"""
Tests unitaires pour PosterFanartSelector.

Les images sont de vrais fichiers generes avec Pillow pour tester
l'heuristique d'orientation.
"""

from pathlib import Path
from unittest.mock import patch

import pytest
from PIL import Image

from src.core.entities.media_set import SupportedImage
from src.services.poster_fanart import PosterFanartSelector, read_image_size
from tests.fixtures.media_files import make_image

PORTRAIT = (200, 300)
LANDSCAPE = (400, 200)


@pytest.fixture
def selector():
    return PosterFanartSelector()


def _image(path: Path, size) -> SupportedImage:
    return SupportedImage(path=make_image(path, size))


class TestSelect:
    """Tests pour select."""

    def test_no_images_raises(self, selector):
        with pytest.raises(ValueError):
            selector.select([])

    def test_single_image_is_poster(self, selector, tmp_path):
        image = _image(tmp_path / "Hochzeit.jpg", LANDSCAPE)

        result = selector.select([image])

        assert result.poster == image
        assert result.fanart is None

    def test_portrait_first_is_poster(self, selector, tmp_path):
        portrait = _image(tmp_path / "b.jpg", PORTRAIT)
        landscape = _image(tmp_path / "a.jpg", LANDSCAPE)

        result = selector.select([portrait, landscape])

        assert result.poster == portrait
        assert result.fanart == landscape

    def test_portrait_second_is_poster(self, selector, tmp_path):
        landscape = _image(tmp_path / "a.png", LANDSCAPE)
        portrait = _image(tmp_path / "b.png", PORTRAIT)

        result = selector.select([landscape, portrait])

        assert result.poster == portrait
        assert result.fanart == landscape

    def test_same_orientation_sorted_by_name(self, selector, tmp_path):
        """Orientation non concluante : le premier nom (tri) devient le poster."""
        second = _image(tmp_path / "Zeta.jpg", LANDSCAPE)
        first = _image(tmp_path / "alpha.jpg", LANDSCAPE)

        result = selector.select([second, first])

        assert result.poster == first
        assert result.fanart == second

    def test_unreadable_images_sorted_by_name(self, selector):
        b = SupportedImage(path=Path("/absent/b.jpg"))
        a = SupportedImage(path=Path("/absent/a.jpg"))

        result = selector.select([b, a])

        assert result.poster == a
        assert result.fanart == b

    def test_square_counts_as_poster(self, selector, tmp_path):
        landscape = _image(tmp_path / "a.jpg", LANDSCAPE)
        square = _image(tmp_path / "b.jpg", (250, 250))

        assert selector.select([landscape, square]).poster == square

    def test_extra_images_are_ignored(self, selector, tmp_path):
        first = _image(tmp_path / "a.jpg", PORTRAIT)
        second = _image(tmp_path / "b.jpg", LANDSCAPE)
        third = _image(tmp_path / "c.jpg", PORTRAIT)

        result = selector.select([first, second, third])

        assert result.poster == first
        assert result.fanart == second
        assert result.ignored == (third,)


class TestReadImageSize:
    def test_reads_size(self, tmp_path):
        path = make_image(tmp_path / "x.png", (640, 480))
        assert read_image_size(path) == (640, 480)

    def test_unreadable_returns_none(self, tmp_path):
        path = tmp_path / "x.jpg"
        path.write_bytes(b"pas une image")
        assert read_image_size(path) is None

    def test_decompression_bomb_returns_none(self, tmp_path):
        path = make_image(tmp_path / "huge.jpg", (640, 480))
        with patch(
            "src.services.poster_fanart.Image.open",
            side_effect=Image.DecompressionBombError("trop de pixels"),
        ):
            assert read_image_size(path) is None

    def test_decompression_bomb_falls_back_to_name_order(self, selector, tmp_path):
        first = _image(tmp_path / "b.jpg", LANDSCAPE)
        second = _image(tmp_path / "a.jpg", PORTRAIT)
        with patch(
            "src.services.poster_fanart.Image.open",
            side_effect=Image.DecompressionBombError("trop de pixels"),
        ):
            result = selector.select([first, second])

        assert result.poster == second
        assert result.fanart == first
