"""
Interfaces ports pour l'extraction de metadonnees et l'invocation d'outils externes.

Interfaces abstraites (ports) definissant les contrats pour :
- l'execution d'un outil en ligne de commande (ffmpeg, ffprobe)
- l'extraction des tags d'un conteneur video
- le parsing des fichiers descripteurs XML
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from src.core.value_objects.descriptor import Descriptor


class ICommandExecutor(ABC):
    """Interface d'execution d'un outil externe."""

    @abstractmethod
    def execute(self, tool: str, arguments: list[str]) -> list[str]:
        """
        Execute un outil et retourne sa sortie standard.

        Args:
            tool: Nom ou chemin de l'executable
            arguments: Arguments passes a l'outil

        Retourne:
            Lignes de la sortie standard

        Raises:
            ProcessError: Si le processus ne demarre pas, depasse le delai
                ou se termine avec un code non nul
        """
        ...


class IMetadataExtractor(ABC):
    """
    Interface pour l'extraction des tags d'un fichier video.

    Separe l'echec de transport (exception) de l'absence semantique
    d'un tag (chaine vide).
    """

    @abstractmethod
    def get_raw_metadata(self, file_path: Path) -> str:
        """
        Retourne le dump complet des tags.

        Raises:
            MetadataExtractionError: En cas d'echec du processus
        """
        ...

    @abstractmethod
    def get_field(self, file_path: Path, field: str) -> str:
        """
        Retourne la valeur d'un tag, nettoyee des espaces.

        Un tag absent retourne une chaine vide.

        Raises:
            MetadataExtractionError: En cas d'echec du processus
        """
        ...

    @abstractmethod
    def get_tags(self, file_path: Path) -> dict[str, str]:
        """
        Retourne les tags globaux du fichier (cles en minuscules).

        Raises:
            MetadataExtractionError: En cas d'echec du processus
        """
        ...


class IDescriptorParser(ABC):
    """Interface pour le parsing et la generation des fichiers descripteurs XML."""

    @abstractmethod
    def parse(self, content: str) -> Optional[Descriptor]:
        """
        Parse le contenu XML d'un descripteur.

        Retourne:
            Descriptor, ou None si le contenu n'est pas un descripteur reconnu
        """
        ...

    @abstractmethod
    def render(self, tags: dict[str, str]) -> str:
        """
        Construit le contenu XML d'un descripteur a partir de tags video.

        Retourne:
            Document XML relisible par parse()
        """
        ...
