"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports système de fichiers :
- IFileOperations : Lecture, déplacement, copie, création de répertoires

Ports outils externes et parsing :
- ICommandExecutor : Exécution d'un outil en ligne de commande
- IMetadataExtractor : Extraction des tags d'un conteneur vidéo
- IDescriptorParser : Parsing des descripteurs XML
"""

from src.core.ports.file_system import IFileOperations
from src.core.ports.parser import (
    ICommandExecutor,
    IDescriptorParser,
    IMetadataExtractor,
)

__all__ = [
    "IFileOperations",
    "ICommandExecutor",
    "IMetadataExtractor",
    "IDescriptorParser",
]
