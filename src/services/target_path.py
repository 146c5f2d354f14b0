"""
Calcul du chemin cible d'un medienset dans la mediatheque.

Structure : <racine>/[<Album>/]<AAAA>/<AAAA-MM-JJ>/<Titre sans date initiale><ext>

Sans date d'enregistrement, le segment fixe "unknown" remplace les deux
niveaux de date : <racine>/[<Album>/]unknown/<Titre><ext>

Le calcul est une fonction pure de ses arguments : deux appels identiques
produisent le meme chemin, ce qui permet de relancer une integration
interrompue.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from src.core.errors import PathResolutionError

UNKNOWN_DATE_SEGMENT = "unknown"


def parse_recording_date(title: Optional[str]) -> Optional[date]:
    """
    Extrait la date d'enregistrement du premier mot du titre.

    Exemple : "2023-05-01 Hochzeit Meier" -> date(2023, 5, 1)

    Returns:
        La date, ou None si le titre est vide ou si le premier mot
        n'est pas une date AAAA-MM-JJ
    """
    if not title or not title.strip():
        return None
    first_token = title.split()[0]
    try:
        parsed = datetime.strptime(first_token, "%Y-%m-%d").date()
    except ValueError:
        return None
    # strptime accepte aussi "2023-5-1"
    return parsed if parsed.isoformat() == first_token else None


def strip_leading_date(title: str, recording_date: Optional[date]) -> str:
    """Retire le prefixe litteral "AAAA-MM-JJ " du titre, s'il est present."""
    if recording_date is None:
        return title
    prefix = f"{recording_date.isoformat()} "
    if title.startswith(prefix):
        return title[len(prefix):]
    return title


def _safe_segment(value: str) -> Optional[str]:
    """
    Neutralise les separateurs de chemin dans un segment.

    Retourne None pour un segment vide, "." ou "..", qui sortirait du
    repertoire parent.
    """
    segment = value.replace("/", "-").replace("\\", "-").strip()
    if segment in ("", ".", ".."):
        return None
    return segment


def resolve_target_path(
    library_root: Optional[Path],
    album: Optional[str],
    recording_date: Optional[date],
    title: str,
    extension: str,
) -> Path:
    """
    Calcule le chemin cible d'une video.

    Args:
        library_root: Racine de la mediatheque
        album: Album optionnel (premier niveau)
        recording_date: Date d'enregistrement optionnelle
        title: Titre du medienset (peut commencer par la date ISO)
        extension: Extension du fichier (avec le point)

    Returns:
        Chemin complet du fichier cible

    Raises:
        PathResolutionError: Si la racine de la mediatheque n'est pas definie
            ou si le titre ne donne pas de nom de fichier valide
    """
    if library_root is None or str(library_root) == "":
        raise PathResolutionError("La racine de la mediatheque n'est pas configuree.")

    directory = Path(library_root)
    album_segment = _safe_segment(album) if album else None
    if album_segment is not None:
        directory = directory / album_segment
    elif album and album.strip():
        logger.warning(f"Album '{album}' inutilisable comme repertoire, niveau ignore")

    if recording_date is not None:
        directory = directory / str(recording_date.year) / recording_date.isoformat()
    else:
        directory = directory / UNKNOWN_DATE_SEGMENT

    file_title = _safe_segment(strip_leading_date(title, recording_date))
    if file_title is None:
        raise PathResolutionError(f"Titre inutilisable comme nom de fichier: '{title}'")
    return directory / f"{file_title}{extension}"


class TargetPathResolver:
    """
    Resolution des chemins cibles pour une racine de mediatheque donnee.

    Utilisation:
        resolver = TargetPathResolver(Path("/lib"))
        resolver.resolve("Familie", date(2023, 5, 1), "2023-05-01 Hochzeit Meier", ".mp4")
        # -> /lib/Familie/2023/2023-05-01/Hochzeit Meier.mp4
    """

    def __init__(self, library_root: Optional[Path]) -> None:
        self._library_root = library_root

    @property
    def library_root(self) -> Optional[Path]:
        return self._library_root

    def resolve(
        self,
        album: Optional[str],
        recording_date: Optional[date],
        title: str,
        extension: str,
    ) -> Path:
        """Voir resolve_target_path()."""
        return resolve_target_path(
            self._library_root, album, recording_date, title, extension
        )

    @staticmethod
    def image_path(
        directory: Path, base_name: str, extension: str, postfix: str = ""
    ) -> Path:
        """Chemin d'une image a cote de la video : <base><postfix><ext>."""
        return directory / f"{base_name}{postfix}{extension}"
