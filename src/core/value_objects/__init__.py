"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- MediaKind : Type de media reconnu (video primaire, video alternative, image, descripteur)
- classify_media_kind : Classification d'un fichier par extension et signature
- Descriptor : Metadonnees d'un descripteur XML (Title, Album, Published)
"""

from src.core.value_objects.descriptor import Descriptor
from src.core.value_objects.media_kind import MediaKind, classify_media_kind

__all__ = [
    "MediaKind",
    "classify_media_kind",
    "Descriptor",
]
