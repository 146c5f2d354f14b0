"""
Classification des fichiers d'un medienset.

Determine si un fichier est une video supportee (format d'echange MPEG-4 ou
conteneur QuickTime natif), une image supportee ou un fichier descripteur XML.
La classification repose sur l'extension, verifiee par la signature des
premiers octets quand le fichier est lisible.
"""

from enum import Enum
from pathlib import Path
from typing import Optional


class MediaKind(Enum):
    """
    Type de media reconnu.

    PRIMARY_VIDEO: Video au format d'echange MPEG-4 (.mp4, .m4v)
    ALTERNATE_VIDEO: Video au format natif QuickTime (.mov)
    IMAGE: Image de couverture (JPEG, PNG)
    DESCRIPTOR: Fichier descripteur XML (Album, Published, Title)
    UNRECOGNIZED: Fichier ignore
    """

    PRIMARY_VIDEO = "primary_video"
    ALTERNATE_VIDEO = "alternate_video"
    IMAGE = "image"
    DESCRIPTOR = "descriptor"
    UNRECOGNIZED = "unrecognized"

    @property
    def is_video(self) -> bool:
        """Vrai pour les deux sous-types video."""
        return self in (MediaKind.PRIMARY_VIDEO, MediaKind.ALTERNATE_VIDEO)


PRIMARY_VIDEO_EXTENSIONS: frozenset[str] = frozenset({".mp4", ".m4v"})
ALTERNATE_VIDEO_EXTENSIONS: frozenset[str] = frozenset({".mov"})
IMAGE_EXTENSIONS: frozenset[str] = frozenset({".jpg", ".jpeg", ".png"})
DESCRIPTOR_EXTENSIONS: frozenset[str] = frozenset({".xml"})

# Atomes ISO-BMFF/QuickTime pouvant ouvrir un fichier video
_VIDEO_LEADING_ATOMS: frozenset[bytes] = frozenset({
    b"ftyp", b"moov", b"mdat", b"wide", b"free", b"skip", b"pnot",
})
_QUICKTIME_BRAND = b"qt  "
_JPEG_SIGNATURE = b"\xff\xd8\xff"
_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
_SNIFF_SIZE = 12


def _read_header(path: Path) -> Optional[bytes]:
    """Lit les premiers octets du fichier, None si illisible ou vide."""
    try:
        with open(path, "rb") as f:
            header = f.read(_SNIFF_SIZE)
    except OSError:
        return None
    return header or None


def _sniff_video(header: bytes, by_extension: MediaKind) -> MediaKind:
    """Verifie la signature d'un conteneur video."""
    if len(header) < 8 or header[4:8] not in _VIDEO_LEADING_ATOMS:
        return MediaKind.UNRECOGNIZED
    if header[4:8] == b"ftyp" and header[8:12] == _QUICKTIME_BRAND:
        return MediaKind.ALTERNATE_VIDEO
    return by_extension


def _sniff_image(header: bytes) -> MediaKind:
    """Verifie la signature JPEG ou PNG."""
    if header.startswith(_JPEG_SIGNATURE) or header.startswith(_PNG_SIGNATURE):
        return MediaKind.IMAGE
    return MediaKind.UNRECOGNIZED


def kind_from_extension(path: Path) -> MediaKind:
    """Classification basee uniquement sur l'extension (insensible a la casse)."""
    suffix = path.suffix.lower()
    if suffix in PRIMARY_VIDEO_EXTENSIONS:
        return MediaKind.PRIMARY_VIDEO
    if suffix in ALTERNATE_VIDEO_EXTENSIONS:
        return MediaKind.ALTERNATE_VIDEO
    if suffix in IMAGE_EXTENSIONS:
        return MediaKind.IMAGE
    if suffix in DESCRIPTOR_EXTENSIONS:
        return MediaKind.DESCRIPTOR
    return MediaKind.UNRECOGNIZED


def classify_media_kind(path: Path) -> MediaKind:
    """
    Classe un fichier dans l'ensemble ferme des MediaKind.

    L'extension determine le type candidat. Si le fichier existe et contient
    des donnees, sa signature doit correspondre, sinon il est UNRECOGNIZED.
    Un fichier vide ou illisible est classe selon son extension seule.

    Args:
        path: Chemin du fichier

    Returns:
        Le MediaKind du fichier (jamais d'exception)
    """
    kind = kind_from_extension(path)
    if kind in (MediaKind.UNRECOGNIZED, MediaKind.DESCRIPTOR):
        return kind

    header = _read_header(path)
    if header is None:
        return kind

    if kind.is_video:
        return _sniff_video(header, kind)
    return _sniff_image(header)
