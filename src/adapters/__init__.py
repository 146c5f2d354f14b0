"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer + Rich)
- parsing/ : Extraction des tags ffmpeg/ffprobe et parsing des descripteurs XML
- process/ : Exécution des outils externes
- file_system : Opérations sur le système de fichiers

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from src.adapters.file_system import FileSystemAdapter
from src.adapters.parsing.descriptor_parser import XmlDescriptorParser
from src.adapters.parsing.ffmpeg_metadata_extractor import FFmpegMetadataExtractor
from src.adapters.process.command_executor import SubprocessCommandExecutor

__all__ = [
    "FileSystemAdapter",
    "FFmpegMetadataExtractor",
    "SubprocessCommandExecutor",
    "XmlDescriptorParser",
]
