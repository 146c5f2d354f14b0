"""
Objet valeur pour les fichiers descripteurs (sidecar XML).

Un descripteur accompagne une variante video et porte les metadonnees
de la production : titre, album et date de publication.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Descriptor:
    """
    Metadonnees d'un fichier descripteur XML.

    Attributs :
        title : Titre de la production (peut commencer par une date ISO)
        album : Album optionnel (premier niveau de la mediatheque)
        published : Date de publication optionnelle
    """

    title: str
    album: Optional[str] = None
    published: Optional[date] = None

    @property
    def published_label(self) -> str:
        """Date de publication au format ISO, ou 'unknown'."""
        return self.published.isoformat() if self.published else "unknown"
