"""
Service de selection du poster et du fanart (banner) d'un medienset.

Avec une seule image, elle devient le poster. Avec deux images ou plus, seules
les deux premieres (ordre de decouverte) sont considerees :
- orientation portrait ou carree -> poster
- orientation paysage -> fanart
Si l'orientation ne departage pas les deux images (meme orientation ou
dimensions illisibles), le tri par nom de fichier decide : le premier est
le poster.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger
from PIL import Image, UnidentifiedImageError

from src.core.entities.media_set import SupportedImage


@dataclass(frozen=True)
class PosterFanart:
    """
    Attribution des roles d'image.

    Attributs :
        poster : Image utilisee comme poster (nom = titre du medienset)
        fanart : Image utilisee comme banner (nom = titre + postfixe), optionnelle
        ignored : Images au-dela des deux premieres
    """

    poster: SupportedImage
    fanart: Optional[SupportedImage] = None
    ignored: tuple[SupportedImage, ...] = ()


def read_image_size(path: Path) -> Optional[tuple[int, int]]:
    """
    Retourne (largeur, hauteur) de l'image, None si illisible.

    Les images refusees par Pillow (DecompressionBombError au-dela de
    Image.MAX_IMAGE_PIXELS) sont traitees comme illisibles.
    """
    try:
        with Image.open(path) as image:
            return image.size
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError, ValueError) as e:
        logger.debug(f"Dimensions illisibles pour {path.name}: {e}")
        return None


def _is_portrait_or_square(size: Optional[tuple[int, int]]) -> Optional[bool]:
    if size is None:
        return None
    width, height = size
    return height >= width


class PosterFanartSelector:
    """Attribue les roles poster / fanart aux images candidates."""

    def select(self, images: Sequence[SupportedImage]) -> PosterFanart:
        """
        Determine le poster et le fanart.

        Args:
            images: Images candidates, dans l'ordre de decouverte

        Returns:
            PosterFanart (fanart None si une seule image)

        Raises:
            ValueError: Si aucune image n'est fournie
        """
        if not images:
            raise ValueError("Aucune image candidate pour le poster")

        if len(images) == 1:
            return PosterFanart(poster=images[0])

        first, second = images[0], images[1]
        ignored = tuple(images[2:])
        if ignored:
            logger.warning(
                f"{len(ignored)} image(s) supplementaire(s) ignoree(s): "
                f"{', '.join(i.path.name for i in ignored)}"
            )

        first_portrait = _is_portrait_or_square(read_image_size(first.path))
        second_portrait = _is_portrait_or_square(read_image_size(second.path))

        if first_portrait is not None and second_portrait is not None:
            if first_portrait and not second_portrait:
                return PosterFanart(poster=first, fanart=second, ignored=ignored)
            if second_portrait and not first_portrait:
                return PosterFanart(poster=second, fanart=first, ignored=ignored)

        # Orientation non concluante : tri stable par nom de fichier
        poster, fanart = sorted((first, second), key=lambda i: i.path.name.lower())
        logger.debug(
            f"Orientation non concluante, poster choisi par nom: {poster.path.name}"
        )
        return PosterFanart(poster=poster, fanart=fanart, ignored=ignored)
