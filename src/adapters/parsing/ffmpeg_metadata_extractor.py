"""
Implementation de l'extracteur de tags avec ffmpeg/ffprobe.

Ce module fournit FFmpegMetadataExtractor qui implemente IMetadataExtractor :
- dump brut des tags au format ffmetadata (ffmpeg)
- lecture d'un tag nomme (ffprobe), un tag absent donnant une chaine vide
- tags globaux parses depuis le dump (parse_ffmetadata)
"""

from pathlib import Path

from loguru import logger

from src.core.errors import MetadataExtractionError, ProcessError
from src.core.ports.parser import ICommandExecutor, IMetadataExtractor

FFMETADATA_HEADER = ";FFMETADATA1"


class FFmpegMetadataExtractor(IMetadataExtractor):
    """
    Extracteur de tags utilisant ffmpeg et ffprobe.

    Les erreurs de processus sont converties en MetadataExtractionError.
    L'absence d'un tag n'est jamais une erreur.
    """

    def __init__(
        self,
        executor: ICommandExecutor,
        ffmpeg_binary: str = "ffmpeg",
        ffprobe_binary: str = "ffprobe",
    ) -> None:
        self._executor = executor
        self._ffmpeg = ffmpeg_binary
        self._ffprobe = ffprobe_binary

    def get_raw_metadata(self, file_path: Path) -> str:
        """
        Retourne les tags bruts du fichier au format ffmetadata.

        Args:
            file_path: Fichier video

        Returns:
            Sortie de ffmpeg, lignes jointes par '\\n'

        Raises:
            MetadataExtractionError: Si ffmpeg echoue
        """
        arguments = ["-i", str(file_path), "-f", "ffmetadata", "-"]
        try:
            lines = self._executor.execute(self._ffmpeg, arguments)
        except ProcessError as e:
            logger.error(f"Erreur lors de la lecture des metadonnees ffmpeg: {e}")
            raise MetadataExtractionError(
                f"Metadonnees illisibles pour {file_path.name}: {e}"
            ) from e
        return "\n".join(lines)

    def get_field(self, file_path: Path, field: str) -> str:
        """
        Retourne la valeur d'un tag, nettoyee des espaces.

        Args:
            file_path: Fichier video
            field: Nom du tag (album, title, description...)

        Returns:
            Valeur du tag, chaine vide si le tag est absent

        Raises:
            MetadataExtractionError: Si ffprobe echoue
        """
        arguments = [
            "-v", "quiet",
            "-show_entries", f"format_tags={field}",
            "-of", "default=noprint_wrappers=1:nokey=1",
            str(file_path),
        ]
        try:
            lines = self._executor.execute(self._ffprobe, arguments)
        except ProcessError as e:
            logger.error(f"Erreur lors de la lecture du tag '{field}' via ffprobe: {e}")
            raise MetadataExtractionError(
                f"Tag '{field}' illisible pour {file_path.name}: {e}"
            ) from e
        return "\n".join(lines).strip()

    def get_tags(self, file_path: Path) -> dict[str, str]:
        """Tags globaux du dump ffmetadata (voir parse_ffmetadata)."""
        return parse_ffmetadata(self.get_raw_metadata(file_path))

    def get_title(self, file_path: Path) -> str:
        return self.get_field(file_path, "title")

    def get_album(self, file_path: Path) -> str:
        return self.get_field(file_path, "album")

    def get_description(self, file_path: Path) -> str:
        return self.get_field(file_path, "description")


def _unescape(value: str) -> str:
    """Retire les echappements ffmetadata (\\=, \\;, \\#, \\\\)."""
    result = []
    escaped = False
    for char in value:
        if escaped:
            result.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        else:
            result.append(char)
    return "".join(result)


def _split_key_value(line: str) -> tuple[str, str] | None:
    """Separe la ligne sur le premier '=' non echappe."""
    escaped = False
    for index, char in enumerate(line):
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == "=":
            return _unescape(line[:index]), _unescape(line[index + 1:])
    return None


def parse_ffmetadata(raw: str) -> dict[str, str]:
    """
    Parse les tags globaux d'un dump ffmetadata.

    Les lignes de commentaire (';' ou '#') sont ignorees, de meme que les
    sections [CHAPTER] et [STREAM]. Une ligne terminee par '\\' se poursuit
    sur la ligne suivante (retour a la ligne echappe).

    Args:
        raw: Sortie de get_raw_metadata

    Returns:
        Dictionnaire cle -> valeur (cles en minuscules)
    """
    tags: dict[str, str] = {}
    pending = ""

    for line in raw.splitlines():
        if pending:
            line = pending + "\n" + line
            pending = ""
        elif not line or line[0] in ";#":
            continue

        if line.startswith("["):
            # Seules les metadonnees globales precedent la premiere section
            break

        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = line[:-1]
            continue

        pair = _split_key_value(line)
        if pair is None:
            continue
        key, value = pair
        tags[key.strip().lower()] = value.strip()

    return tags
