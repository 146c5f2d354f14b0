"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MEDIATHEQUE_,
et peut optionnellement être fournie via un fichier .env.

Les suffixes de variante sont ordonnés : le premier suffixe correspondant l'emporte.
Ils peuvent être fournis en JSON (["-4K", "-1080p"]) ou séparés par des virgules (-4K,-1080p).
"""

import json
from pathlib import Path
from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MEDIATHEQUE_.
    Exemple : MEDIATHEQUE_LIBRARY_DIR=/Volumes/Infuse

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="MEDIATHEQUE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Chemins (avec expansion ~). None = non configuré (erreur de configuration au lancement)
    source_dir: Optional[Path] = Field(default=None)
    library_dir: Optional[Path] = Field(default=None)

    # Convention de nommage des mediensets
    variant_suffixes: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["-4K", "-1080p", "-720p"]
    )
    banner_file_postfix: Optional[str] = Field(default="-fanart")
    descriptor_extension: str = Field(default=".xml")

    # Outils externes
    ffmpeg_binary: str = Field(default="ffmpeg")
    ffprobe_binary: str = Field(default="ffprobe")
    tool_timeout_seconds: float = Field(default=60.0, gt=0)

    # Traitement (1 = séquentiel)
    max_workers: int = Field(default=1, ge=1, le=32)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/mediatheque.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("source_dir", "library_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Étend ~ vers le répertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("variant_suffixes", mode="before")
    @classmethod
    def split_suffixes(cls, v: str | list[str]) -> list[str]:
        """Accepte une liste JSON ou une chaîne séparée par des virgules."""
        if isinstance(v, str):
            text = v.strip()
            if text.startswith("["):
                v = json.loads(text)
            else:
                v = text.split(",")
        return [s.strip() for s in v if s and s.strip()]

    @field_validator("descriptor_extension")
    @classmethod
    def normalize_extension(cls, v: str) -> str:
        """Garantit le point initial (xml -> .xml)."""
        v = v.strip().lower()
        return v if v.startswith(".") else f".{v}"
