"""
Entités métier du domaine.

Les entités sont transitoires : elles sont reconstruites à chaque exécution
depuis le contenu du répertoire source. Seuls les fichiers déplacés
persistent sur le disque.

Exports :
- SupportedVideo : Fichier vidéo reconnu (MPEG-4 ou QuickTime)
- SupportedImage : Image de couverture reconnue
- LocalMediaServerFiles : Vidéo et images destinées à la médiathèque
- MediaSet : Unité logique d'une production
- IntegrationResult, IntegrationStatus, IntegrationStage : Issue par medienset
- RunReport, SkippedFile : Rapport d'exécution
"""

from src.core.entities.media_set import (
    LocalMediaServerFiles,
    MediaSet,
    SupportedImage,
    SupportedVideo,
)
from src.core.entities.report import (
    IntegrationResult,
    IntegrationStage,
    IntegrationStatus,
    RunReport,
    SkippedFile,
)

__all__ = [
    "SupportedVideo",
    "SupportedImage",
    "LocalMediaServerFiles",
    "MediaSet",
    "IntegrationResult",
    "IntegrationStage",
    "IntegrationStatus",
    "RunReport",
    "SkippedFile",
]
